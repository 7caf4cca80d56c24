"""
    Interface shared by the equation of state and the Helmholtz energy functional objects.

    Both compose the residual Helmholtz energy from the same contributions and expose the maximum density used to bound external solvers.

"""

import logging
from abc import ABC, abstractmethod
import autograd.numpy as np

from gcpcsaft.parameters import ParameterSet
from gcpcsaft.equations_of_state import constants
from gcpcsaft.equations_of_state.saft import saft_toolbox as stb
from gcpcsaft.equations_of_state.saft.Ahard_sphere import HardSphere
from gcpcsaft.equations_of_state.saft.Achain import HardChain
from gcpcsaft.equations_of_state.saft.Adispersion import Dispersion
from gcpcsaft.equations_of_state.saft.Aassoc import association_contribution

logger = logging.getLogger(__name__)


class SaftOptions:
    """
    Options of the evaluation of the Helmholtz energy.

    Parameters
    ----------
    max_eta : float, Optional, default=0.5
        Maximum packing fraction of the segments, used in :meth:`EosTemplate.compute_max_density`
    max_iter_cross_assoc : int, Optional, default=50
        Maximum number of Newton iterations of cross association
    tol_cross_assoc : float, Optional, default=1e-10
        Tolerance of the residual norm of cross association
    """

    def __init__(self, max_eta=0.5, max_iter_cross_assoc=50, tol_cross_assoc=1e-10):

        if not 0.0 < max_eta < 1.0:
            raise ValueError("The maximum packing fraction, {}, should be between 0 and 1.".format(max_eta))
        if int(max_iter_cross_assoc) < 1:
            raise ValueError(
                "The maximum number of cross association iterations, {}, should be positive.".format(
                    max_iter_cross_assoc
                )
            )
        if tol_cross_assoc <= 0.0:
            raise ValueError("The cross association tolerance, {}, should be positive.".format(tol_cross_assoc))

        self.max_eta = max_eta
        self.max_iter_cross_assoc = int(max_iter_cross_assoc)
        self.tol_cross_assoc = tol_cross_assoc

    def __str__(self):

        string = "Options: max_eta {}, max_iter_cross_assoc {}, tol_cross_assoc {}".format(
            self.max_eta, self.max_iter_cross_assoc, self.tol_cross_assoc
        )

        return string


# __________________ EOS Interface _________________
class EosTemplate(ABC):

    """
    Interface used in all EOS object options.

    Parameters
    ----------
    parameters : ParameterSet, Optional, default=None
        Assembled parameters. If None, they are assembled from ``chemical_records``, ``bead_library``, and ``cross_library``.
    chemical_records : list[ChemicalRecord], Optional, default=None
        Topology of each molecule
    bead_library : dict, Optional, default=None
        A dictionary where bead names are the keys to access segment parameters, see :mod:`~gcpcsaft.parameters.records`
    cross_library : dict, Optional, default=None
        Optional library of binary segment parameters
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

    """

    merge_segments = False

    def __init__(
        self,
        parameters=None,
        chemical_records=None,
        bead_library=None,
        cross_library=None,
        max_eta=0.5,
        max_iter_cross_assoc=50,
        tol_cross_assoc=1e-10,
    ):

        if parameters is None:
            if chemical_records is None or bead_library is None:
                raise ValueError(
                    "Either parameters or both chemical_records and bead_library should be provided."
                )
            parameters = ParameterSet(
                chemical_records, bead_library, cross_library=cross_library, merge_segments=self.merge_segments
            )
        self.parameters = parameters
        self.options = SaftOptions(
            max_eta=max_eta, max_iter_cross_assoc=max_iter_cross_assoc, tol_cross_assoc=tol_cross_assoc
        )
        self.number_of_components = parameters.number_of_components

        self.contributions = [HardSphere(parameters), HardChain(parameters), Dispersion(parameters)]
        assoc = association_contribution(
            parameters, max_iter=self.options.max_iter_cross_assoc, tol=self.options.tol_cross_assoc
        )
        if assoc is not None:
            self.contributions.append(assoc)

        logger.debug(
            "Helmholtz energy contributions: {}. {}".format(
                ", ".join(str(x) for x in self.contributions), self.options
            )
        )

    @property
    def molar_weight(self):
        """ Molar weight of each component [g/mol] """
        return self.parameters.molarweight

    def residual_helmholtz_energy(self, state):
        r"""
        Reduced residual Helmholtz energy, :math:`\frac{A^{res}}{k_B T}`.

        Parameters
        ----------
        state : StateHD
            Thermodynamic state in reduced units, may carry derivatives

        Returns
        -------
        Ares : float
            Sum of the contributions
        """

        Ares = 0.0
        for contribution in self.contributions:
            Ares = Ares + contribution.helmholtz_energy(state)

        return Ares

    def helmholtz_energy_contributions(self, state):
        r"""
        Reduced residual Helmholtz energy of each contribution.

        Parameters
        ----------
        state : StateHD
            Thermodynamic state in reduced units, may carry derivatives

        Returns
        -------
        output : list[tuple]
            Name and value of each contribution
        """

        return [(str(x), x.helmholtz_energy(state)) for x in self.contributions]

    def compute_max_density(self, moles):
        r"""
        Number density at which the packing fraction of the segments reaches ``max_eta``.

        Parameters
        ----------
        moles : numpy.ndarray
            Amount of each component, any unit

        Returns
        -------
        max_density : float
            Maximum number density [1/Å^3]
        """

        return self.options.max_eta * np.sum(moles) / stb.segment_volume(self.parameters, moles)

    def density_max(self, xi):
        """
        Estimate the maximum density based on the hard sphere packing fraction.

        Parameters
        ----------
        xi : list[float]
            Mole fraction of each component

        Returns
        -------
        max_density : float
            Maximum molar density [mol/m^3]
        """

        return self.compute_max_density(xi) * constants.m3toA3 / constants.Nav

    @abstractmethod
    def subset(self, component_list):
        """
        Object of the same type restricted to some of the components.

        Parameters
        ----------
        component_list : list[int]
            Indices of the components to keep

        Returns
        -------
        eos : EosTemplate
            New object with the same options
        """
        pass

    def _options_dict(self):
        return {
            "max_eta": self.options.max_eta,
            "max_iter_cross_assoc": self.options.max_iter_cross_assoc,
            "tol_cross_assoc": self.options.tol_cross_assoc,
        }
