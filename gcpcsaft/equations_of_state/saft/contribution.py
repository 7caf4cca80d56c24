r"""
Interface of the residual Helmholtz energy contributions.

The model is composed of a fixed set of contributions, evaluated and summed in the order hard sphere, hard chain, dispersion, association.
"""

import logging
from abc import ABC, abstractmethod

logger = logging.getLogger(__name__)


class HelmholtzContribution(ABC):
    r"""
    Contribution to the reduced residual Helmholtz energy.

    Parameters
    ----------
    parameters : ParameterSet
        Assembled parameters, shared and never modified

    Attributes
    ----------
    parameters : ParameterSet
        Assembled parameters
    name : str
        Name of the contribution
    """

    name = None

    def __init__(self, parameters):
        self.parameters = parameters

    @abstractmethod
    def helmholtz_energy_density(self, temperature, partial_density):
        r"""
        Reduced Helmholtz energy density, :math:`\frac{A}{k_B T V}`.

        Parameters
        ----------
        temperature : float
            Temperature [K]
        partial_density : numpy.ndarray
            Number density of each molecule [1/Å^3]

        Returns
        -------
        a : float
            Helmholtz energy density [1/Å^3]
        """
        pass

    def helmholtz_energy(self, state):
        r"""
        Reduced Helmholtz energy, :math:`\frac{A}{k_B T}`.

        Parameters
        ----------
        state : StateHD
            Thermodynamic state

        Returns
        -------
        A : float
            Reduced Helmholtz energy
        """
        return state.volume * self.helmholtz_energy_density(state.temperature, state.partial_density)

    def __str__(self):
        return self.name
