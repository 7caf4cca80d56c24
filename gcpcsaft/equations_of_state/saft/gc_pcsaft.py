# -- coding: utf8 --

r"""

EOS object for the heterosegmented group contribution PC-SAFT equation of state

Thermodynamic properties are obtained as derivatives of the Helmholtz energy with ``autograd``. Inputs and outputs of the property methods are in SI units, temperature in K, volume in m^3 and amount in mol.

"""

import logging
import autograd.numpy as np
from autograd import grad
import scipy.optimize as spo

from gcpcsaft.exceptions import EosError
from gcpcsaft.equations_of_state import constants
from gcpcsaft.equations_of_state.interface import EosTemplate
from gcpcsaft.equations_of_state.saft.state import StateHD
from gcpcsaft.equations_of_state.saft import Aideal

logger = logging.getLogger(__name__)


class EosType(EosTemplate):

    r"""
    Group contribution PC-SAFT equation of state for homogeneous systems.

    Identical segments of a molecule are merged when the parameters are assembled by this object.

    Parameters
    ----------
    parameters : ParameterSet, Optional, default=None
        Assembled parameters. If None, they are assembled from ``chemical_records``, ``bead_library``, and ``cross_library``.
    chemical_records : list[ChemicalRecord], Optional, default=None
        Topology of each molecule
    bead_library : dict, Optional, default=None
        A dictionary where bead names are the keys to access segment parameters, see :mod:`~gcpcsaft.parameters.records`
    cross_library : dict, Optional, default=None
        Optional library of binary segment parameters, e.g. ``{"CH3": {"OH": {"k_ij": -0.0087}}}``
    ideal_gas_method : str, Optional, default=None
        Functional form of the ideal gas contribution, "Ajoback" or "Abroglie". By default, "Ajoback" is used when every component has Joback records.
    max_eta : float, Optional, default=0.5
        Maximum packing fraction of the segments
    max_iter_cross_assoc : int, Optional, default=50
        Maximum number of Newton iterations of cross association
    tol_cross_assoc : float, Optional, default=1e-10
        Tolerance of the residual norm of cross association

    Attributes
    ----------
    parameters : ParameterSet
        Assembled parameters
    options : SaftOptions
        Options of the evaluation
    number_of_components : int
        Number of components in mixture represented by given EOS object.
    contributions : list[HelmholtzContribution]
        Residual Helmholtz energy contributions in the order they are summed
    ideal_gas_method : str
        Functional form of the ideal gas contribution

    """

    merge_segments = True

    def __init__(self, ideal_gas_method=None, **kwargs):

        super().__init__(**kwargs)

        if ideal_gas_method is None:
            ideal_gas_method = Aideal.default_method(self.parameters)
        elif ideal_gas_method == "Ajoback" and Aideal.default_method(self.parameters) != "Ajoback":
            raise ValueError("Joback records are needed for every component to use the method Ajoback.")
        self.ideal_gas_method = ideal_gas_method

        logger.info("Ideal gas contribution: {}".format(ideal_gas_method))

    def ideal_gas_helmholtz_energy(self, state):
        r"""
        Reduced Helmholtz energy of the ideal gas, :math:`\frac{A^{ideal}}{k_B T}`.

        Parameters
        ----------
        state : StateHD
            Thermodynamic state in reduced units, may carry derivatives

        Returns
        -------
        Aideal : float
            Reduced Helmholtz energy
        """
        return Aideal.Aideal_contribution(state, self.parameters, method=self.ideal_gas_method)

    def helmholtz_energy(self, state):
        r"""
        Reduced Helmholtz energy, :math:`\frac{A}{k_B T}`, sum of the ideal gas and residual parts.

        Parameters
        ----------
        state : StateHD
            Thermodynamic state in reduced units, may carry derivatives

        Returns
        -------
        A : float
            Reduced Helmholtz energy
        """
        return self.ideal_gas_helmholtz_energy(state) + self.residual_helmholtz_energy(state)

    def _energy_function(self, residual):
        if residual:
            return self.residual_helmholtz_energy
        else:
            return self.helmholtz_energy

    def pressure(self, temperature, volume, moles, residual=False):
        r"""
        Compute pressure given system information

        Parameters
        ----------
        temperature : float
            Temperature of the system [K]
        volume : float
            Volume of the system [m^3]
        moles : list[float]
            Amount of each component [mol]
        residual : bool, Optional, default=False
            If True, only the residual contribution is returned

        Returns
        -------
        P : float
            Pressure [Pa]
        """

        func = self._energy_function(residual)
        moles = np.array(moles, dtype=float) * constants.Nav
        temperature = float(temperature)

        dAdV = grad(lambda v: func(StateHD(temperature, v, moles)))(volume * constants.m3toA3)

        return -dAdV * temperature * constants.reference_pressure

    def dp_dv(self, temperature, volume, moles, residual=False):
        r"""
        Derivative of the pressure with respect to volume at constant temperature and composition

        Parameters
        ----------
        temperature : float
            Temperature of the system [K]
        volume : float
            Volume of the system [m^3]
        moles : list[float]
            Amount of each component [mol]
        residual : bool, Optional, default=False
            If True, only the residual contribution is returned

        Returns
        -------
        dPdV : float
            Derivative of pressure [Pa/m^3]
        """

        func = self._energy_function(residual)
        moles = np.array(moles, dtype=float) * constants.Nav
        temperature = float(temperature)

        d2AdV2 = grad(grad(lambda v: func(StateHD(temperature, v, moles))))(volume * constants.m3toA3)

        return -d2AdV2 * temperature * constants.reference_pressure * constants.m3toA3

    def density(self, temperature, pressure, moles, phase="liquid", npoints=100):
        r"""
        Molar density at which the equation of state reproduces the given pressure.

        The pressure is evaluated on a logarithmic grid of densities up to :meth:`density_max`. The root is bracketed by the first change of sign, scanning up from low densities for a vapor and down from the maximum density for a liquid, and refined with ``scipy.optimize.brentq``.

        Parameters
        ----------
        temperature : float
            Temperature of the system [K]
        pressure : float
            Pressure of the system [Pa]
        moles : list[float]
            Amount of each component [mol]
        phase : str, Optional, default="liquid"
            Either "liquid" or "vapor"
        npoints : int, Optional, default=100
            Number of grid points used to bracket the root

        Returns
        -------
        rho : float
            Molar density [mol/m^3]
        """

        if phase not in ["liquid", "vapor"]:
            raise ValueError("Phase, {}, should be either 'liquid' or 'vapor'.".format(phase))

        moles = np.array(moles, dtype=float)
        ntotal = np.sum(moles)
        rho_max = self.density_max(moles / ntotal)

        def pressure_error(rho):
            return self.pressure(temperature, ntotal / rho, moles) - pressure

        rho_grid = np.logspace(-10, 0, npoints) * rho_max
        if phase == "liquid":
            rho_grid = rho_grid[::-1]

        error_old = pressure_error(rho_grid[0])
        for i in range(1, npoints):
            error = pressure_error(rho_grid[i])
            if error * error_old <= 0.0:
                rho = spo.brentq(pressure_error, rho_grid[i - 1], rho_grid[i], rtol=1e-12)
                logger.debug("{} density: {} mol/m^3".format(phase.capitalize(), rho))
                return rho
            error_old = error

        raise EosError(
            "No {} density was found at T={} K and P={} Pa below the maximum density, {} mol/m^3".format(
                phase, temperature, pressure, rho_max
            )
        )

    def chemical_potential(self, temperature, volume, moles, residual=False):
        r"""
        Chemical potential of each component

        Parameters
        ----------
        temperature : float
            Temperature of the system [K]
        volume : float
            Volume of the system [m^3]
        moles : list[float]
            Amount of each component [mol]
        residual : bool, Optional, default=False
            If True, only the residual contribution is returned

        Returns
        -------
        mu : numpy.ndarray
            Chemical potential of each component [J/mol]
        """

        func = self._energy_function(residual)
        volume = volume * constants.m3toA3
        temperature = float(temperature)

        dAdN = grad(lambda n: func(StateHD(temperature, volume, n)))(
            np.array(moles, dtype=float) * constants.Nav
        )

        return dAdN * constants.R * temperature

    def residual_chemical_potential(self, temperature, volume, moles):
        r"""
        Residual chemical potential of each component at constant volume

        Parameters
        ----------
        temperature : float
            Temperature of the system [K]
        volume : float
            Volume of the system [m^3]
        moles : list[float]
            Amount of each component [mol]

        Returns
        -------
        mu_res : numpy.ndarray
            Residual chemical potential of each component [J/mol]
        """
        return self.chemical_potential(temperature, volume, moles, residual=True)

    def ln_fugacity_coefficient(self, temperature, volume, moles):
        r"""
        Compute the natural logarithm of the fugacity coefficient of each component

        :math:`\ln \phi_i = \frac{\mu_i^{res}}{RT} - \ln Z`

        Parameters
        ----------
        temperature : float
            Temperature of the system [K]
        volume : float
            Volume of the system [m^3]
        moles : list[float]
            Amount of each component [mol]

        Returns
        -------
        ln_phi : numpy.ndarray
            Logarithm of the fugacity coefficient of each component
        """

        mu_res = self.residual_chemical_potential(temperature, volume, moles)
        P = self.pressure(temperature, volume, moles)
        Z = P * volume / (np.sum(moles) * constants.R * temperature)

        return mu_res / (constants.R * temperature) - np.log(Z)

    def entropy(self, temperature, volume, moles, residual=False):
        r"""
        Entropy of the system

        Parameters
        ----------
        temperature : float
            Temperature of the system [K]
        volume : float
            Volume of the system [m^3]
        moles : list[float]
            Amount of each component [mol]
        residual : bool, Optional, default=False
            If True, only the residual contribution is returned

        Returns
        -------
        S : float
            Entropy [J/K]
        """

        func = self._energy_function(residual)
        volume = volume * constants.m3toA3
        moles = np.array(moles, dtype=float) * constants.Nav

        dATdT = grad(lambda t: t * func(StateHD(t, volume, moles)))(float(temperature))

        return -dATdT * constants.kb

    def molar_isochoric_heat_capacity(self, temperature, volume, moles, residual=False):
        r"""
        Isochoric heat capacity per mole of the system

        :math:`c_v = -\frac{T}{n} \left(\frac{\partial^2 A}{\partial T^2}\right)_{V,N}`

        Parameters
        ----------
        temperature : float
            Temperature of the system [K]
        volume : float
            Volume of the system [m^3]
        moles : list[float]
            Amount of each component [mol]
        residual : bool, Optional, default=False
            If True, only the residual contribution is returned

        Returns
        -------
        cv : float
            Isochoric heat capacity [J/mol/K]
        """

        func = self._energy_function(residual)
        volume = volume * constants.m3toA3
        moles = np.array(moles, dtype=float)
        temperature = float(temperature)

        d2ATdT2 = grad(grad(lambda t: t * func(StateHD(t, volume, moles * constants.Nav))))(temperature)

        return -temperature * d2ATdT2 * constants.kb / np.sum(moles)

    def subset(self, component_list):
        """
        Equation of state restricted to some of the components.

        Parameters
        ----------
        component_list : list[int]
            Indices of the components to keep

        Returns
        -------
        eos : EosType
            New object with the same options
        """

        return EosType(
            parameters=self.parameters.subset(component_list),
            ideal_gas_method=self.ideal_gas_method,
            **self._options_dict()
        )

    def __str__(self):

        string = "Components: {}\n".format(
            ", ".join(str(x.identifier.name) for x in self.parameters.chemical_records)
        )
        string += "Contributions: {}\n".format(", ".join(str(x) for x in self.contributions))
        string += str(self.options)

        return string
