""" Combining rules options called from :func:`~gcpcsaft.parameters.combining_rule_types.combining_rules` during parameter assembly.
"""

import numpy as np
import logging
from inspect import getmembers, isfunction
import sys

logger = logging.getLogger(__name__)


def mean(beadA, beadB, parameter):
    r"""
    Calculates cross interaction parameter according to the calculation method provided.
    mean: c = (a+b)/2

    Parameters
    ----------
    beadA : dict
        Dictionary of parameters used to describe a bead
    beadB : dict
        Dictionary of parameters used to describe a bead
    parameter : str
        Name of parameter for which a mixed value is needed

    Returns
    -------
    parameter12 : float
        Mixed interaction parameter

    """

    return (beadA[parameter] + beadB[parameter]) / 2


def geometric_mean(beadA, beadB, parameter):
    r"""
    Calculates cross interaction parameter according to the calculation method provided.
    geometric mean: c = np.sqrt(a*b)

    Parameters
    ----------
    beadA : dict
        Dictionary of parameters used to describe a bead
    beadB : dict
        Dictionary of parameters used to describe a bead
    parameter : str
        Name of parameter for which a mixed value is needed

    Returns
    -------
    parameter12 : float
        Mixed interaction parameter

    """

    return np.sqrt(beadA[parameter] * beadB[parameter])


def association_volume(beadA, beadB, parameter, weighting_parameters=["sigma"]):
    r"""
    Calculates the product of the association volume and the cubed diameter.
    association volume: c = np.sqrt(a[0]*b[0]) * (a[1]*b[1])**1.5

    Parameters
    ----------
    beadA : dict
        Dictionary of parameters used to describe a bead
    beadB : dict
        Dictionary of parameters used to describe a bead
    parameter : str
        Name of the association volume parameter, e.g. kappa_ab
    weighting_parameters : list[str], Optional, default=["sigma"]
        Name of the segment diameter parameter

    Returns
    -------
    parameter12 : float
        Mixed interaction parameter

    """

    param2 = weighting_parameters[0]
    return np.sqrt(beadA[parameter] * beadB[parameter]) * (beadA[param2] * beadB[param2]) ** 1.5


def combining_rules(beadA, beadB, parameter, function="mean", **kwargs):
    r"""
    Calculates cross interaction parameter according to the calculation method defined.

    Parameters
    ----------
    beadA : dict
        Dictionary of parameters used to describe a bead
    beadB : dict
        Dictionary of parameters used to describe a bead
    parameter : str
        Name of parameter for which a mixed value is needed
    function : str, Optional, default=mean
        Combining rule function found in this module
    kwargs : dict, Optional, default={}
        Keyword arguments used in other averaging function

    Returns
    -------
    parameter12 : float
        Mixed interaction parameter
    """

    this_module = sys.modules[__name__]
    calc_list = [
        o[0] for o in getmembers(this_module, isfunction) if o[0] != "combining_rules"
    ]
    if function not in calc_list:
        raise ValueError(
            "The combining rule type, '{}', was not found\nThe following calculation types are supported: {}".format(
                function, ", ".join(calc_list)
            )
        )

    return getattr(this_module, function)(beadA, beadB, parameter, **kwargs)


def cross_interaction_matrix(beads, bead_library, parameter, function="mean", **kwargs):
    r"""
    Computes a symmetric matrix of cross interaction parameters between each pair of listed beads.

    Parameters
    ----------
    beads : list[str]
        Bead names, one entry for each row of the output. A name may be repeated.
    bead_library : dict
        A dictionary where bead names are the keys to access self interaction parameters
    parameter : str
        Name of parameter for which mixed values are needed
    function : str, Optional, default=mean
        Combining rule function found in this module
    kwargs : dict, Optional, default={}
        Keyword arguments used in the combining rule

    Returns
    -------
    output : numpy.ndarray
        Matrix of mixed parameters, size len(beads) by len(beads)
    """

    nbeads = len(beads)
    output = np.zeros((nbeads, nbeads))
    for i, beadname in enumerate(beads):
        for j in range(i, nbeads):
            beadname2 = beads[j]
            try:
                tmp = combining_rules(
                    bead_library[beadname], bead_library[beadname2], parameter, function=function, **kwargs
                )
            except KeyError:
                raise ValueError(
                    "Unable to calculate '{}' with '{}' method, for beads: '{}' '{}'".format(
                        parameter, function, beadname, beadname2
                    )
                )
            output[i, j] = tmp
            output[j, i] = tmp

    return output
