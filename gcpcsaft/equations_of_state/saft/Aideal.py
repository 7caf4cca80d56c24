# -- coding: utf8 --

r"""

Ideal gas contributions to the Helmholtz energy

"""

import logging
import autograd.numpy as np

from gcpcsaft.equations_of_state import constants

logger = logging.getLogger(__name__)


def Aideal_contribution(state, parameters, method="Abroglie"):

    r"""
    Return the ideal gas contribution of the reduced Helmholtz energy.

    :math:`\frac{A^{ideal}}{k_{B} T}`

    Parameters
    ----------
    state : StateHD
        Thermodynamic state in reduced units
    parameters : ParameterSet
        Assembled parameters
    method : str, Optional, default=Abroglie
        The function name of the method to calculate the ideal contribution of the Helmholtz energy, "Abroglie" or "Ajoback".

    Returns
    -------
    Aideal : float
        Reduced Helmholtz energy of the ideal gas
    """

    functions = {"Abroglie": Abroglie, "Ajoback": Ajoback}

    if method in functions:
        function = functions[method]
    else:
        raise ValueError("Method, {}, was not found to calculate Aideal.".format(method))

    return function(state, parameters)


def default_method(parameters):
    """ Use the Joback correlation if every molecule has a record, the de Broglie wavelength otherwise. """

    if all(x is not None for x in parameters.joback_records):
        return "Ajoback"
    else:
        return "Abroglie"


def Abroglie(state, parameters):

    r"""
    Return the ideal contribution of Helmholtz energy derived from the de Broglie wavelength

    :math:`\frac{A^{ideal}}{k_{B} T} = \sum_i N_i \left(\ln\left(\Lambda_i^3 \rho_i\right) - 1\right)`

    Parameters
    ----------
    state : StateHD
        Thermodynamic state in reduced units
    parameters : ParameterSet
        Assembled parameters

    Returns
    -------
    Aideal : float
        Reduced Helmholtz energy of the ideal gas
    """

    mass = parameters.molarweight * 1e-3 / constants.Nav  # kg per molecule
    Lambda = (
        constants.h
        / np.sqrt(2.0 * np.pi * mass * constants.kb * state.temperature)
        / constants.Atometer
    )
    log_broglie3_rho = np.log(Lambda ** 3 * state.partial_density)

    return np.sum(state.moles * (log_broglie3_rho - 1.0))


def Ajoback(state, parameters):

    r"""
    Return the ideal contribution of Helmholtz energy from the Joback heat capacity correlation.

    The isobaric heat capacity of the ideal gas is :math:`c_p = a + bT + cT^2 + dT^3 + eT^4` and the reference state is an ideal gas at :math:`T_0 = 298.15` K and :math:`p_0 = 10^5` Pa.

    :math:`\frac{A^{ideal}}{k_{B} T} = \sum_i N_i \left(\frac{\Delta H_i}{RT} - \frac{\Delta S_i}{R} + \ln\left(\frac{\rho_i k_B T}{p_0}\right) - 1\right)`

    Parameters
    ----------
    state : StateHD
        Thermodynamic state in reduced units
    parameters : ParameterSet
        Assembled parameters

    Returns
    -------
    Aideal : float
        Reduced Helmholtz energy of the ideal gas
    """

    if any(x is None for x in parameters.joback_records):
        raise ValueError("Joback records are needed for every component to use the method Ajoback.")

    coeff = {
        key: np.array([x[key] for x in parameters.joback_records])
        for key in ["a", "b", "c", "d", "e"]
    }

    T = state.temperature
    T0 = constants.T0
    enthalpy = (
        coeff["a"] * (T - T0)
        + coeff["b"] / 2.0 * (T ** 2 - T0 ** 2)
        + coeff["c"] / 3.0 * (T ** 3 - T0 ** 3)
        + coeff["d"] / 4.0 * (T ** 4 - T0 ** 4)
        + coeff["e"] / 5.0 * (T ** 5 - T0 ** 5)
    )
    entropy = (
        coeff["a"] * np.log(T / T0)
        + coeff["b"] * (T - T0)
        + coeff["c"] / 2.0 * (T ** 2 - T0 ** 2)
        + coeff["d"] / 3.0 * (T ** 3 - T0 ** 3)
        + coeff["e"] / 4.0 * (T ** 4 - T0 ** 4)
    )

    # kT/p0 in Å^3
    kT_p0 = constants.kb * T / constants.p0 * constants.m3toA3
    log_rho = np.log(state.partial_density * kT_p0)

    return np.sum(
        state.moles * (enthalpy / (constants.R * T) - entropy / constants.R + log_rho - 1.0)
    )
