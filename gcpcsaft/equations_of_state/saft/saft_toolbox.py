"""
Functions shared by the Helmholtz energy contributions of the group contribution PC-SAFT model.
"""

import logging
import autograd.numpy as np

logger = logging.getLogger(__name__)


def zeta(parameters, diameter, partial_density, k):
    r"""
    Packing fraction moments built from segment diameters and partial densities.

    :math:`\zeta_k = \frac{\pi}{6} \sum_\alpha \rho_{i(\alpha)} m_\alpha d_\alpha^k`

    Parameters
    ----------
    parameters : ParameterSet
        Assembled parameters
    diameter : numpy.ndarray
        Temperature dependent diameter of each segment [Å]
    partial_density : numpy.ndarray
        Number density of each molecule [1/Å^3]
    k : list[int]
        Moments to compute

    Returns
    -------
    zeta : list
        One moment for each entry of k
    """

    rho_m = partial_density[parameters.component_index] * parameters.m * (np.pi / 6.0)

    return [np.sum(rho_m * diameter ** kk) for kk in k]


def segment_volume(parameters, moles):
    r"""
    Volume occupied by the segments per molecule, based on the segment diameter ``sigma``.

    Parameters
    ----------
    parameters : ParameterSet
        Assembled parameters
    moles : numpy.ndarray
        Amount of each molecule, any unit

    Returns
    -------
    volume : float
        :math:`\frac{\pi}{6} \sum_\alpha n_{i(\alpha)} m_\alpha \sigma_\alpha^3` in units of moles times Å^3
    """

    moles = np.asarray(moles, dtype=float)

    return np.sum(np.pi / 6.0 * parameters.m * parameters.sigma ** 3 * moles[parameters.component_index])
