"""

Create an EOS class from options taken from factory design pattern.

"""

# Add imports here
from importlib import import_module
import logging

logger = logging.getLogger(__name__)


def initiate_eos(eos="saft.gc_pcsaft", **kwargs):
    """
    Interface between the user and our library of equations of state (EOS).

    Input the name of a desired EOS and available classes are automatically searched
    to allow easy implementation of new EOS.

    Parameters
    ----------
    eos : str, Optional, default="saft.gc_pcsaft"
        Name of EOS in the form EOSfamily.EOSname, the following are currently supported:

        - saft.gc_pcsaft: :class:`~gcpcsaft.equations_of_state.saft.gc_pcsaft.EosType`
        - saft.gc_pcsaft_functional: :class:`~gcpcsaft.equations_of_state.saft.gc_pcsaft_functional.EosType`

    kwargs
        Other keyword argument inputs for the desired EOS. See specific EOS
        documentation for required inputs.

    Returns
    -------
    instance : obj
        An instance of the defined EOS class to be used in thermodynamic computations.
    """

    logger.info("Using EOS: {}".format(eos))

    try:
        eos_fam, eos_type = eos.split(".")
    except ValueError:
        raise ValueError("Input should be in the form EOSfamily.EOSname (e.g. saft.gc_pcsaft).")

    class_name = "EosType"
    try:
        eos_module = import_module("." + eos_type, package="gcpcsaft.equations_of_state." + eos_fam)
        eos_class = getattr(eos_module, class_name)
    except (ImportError, AttributeError):
        raise ImportError(
            "Based on your input, '{}', we expect the class, {}, in a module, {},"
            " found in the package, {}, which indicates the EOS family.".format(eos, class_name, eos_type, eos_fam)
        )
    instance = eos_class(**kwargs)

    logger.info("Created {} Eos object".format(eos))

    return instance
