# -- coding: utf8 --

r"""

Helmholtz energy functional object for the heterosegmented group contribution PC-SAFT model

Spatially resolved solvers evaluate the contributions on local partial densities and use the bond lengths to build the weight functions of the chains. Each segment occurrence has its own entry in the parameter arrays.

"""

import logging

from gcpcsaft.equations_of_state.interface import EosTemplate

logger = logging.getLogger(__name__)


class EosType(EosTemplate):

    r"""
    Group contribution PC-SAFT Helmholtz energy functional.

    Parameters
    ----------
    parameters : ParameterSet, Optional, default=None
        Assembled parameters without merged segments. If None, they are assembled from ``chemical_records``, ``bead_library``, and ``cross_library``.
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
        Number of components in mixture represented by given object.
    contributions : list[HelmholtzContribution]
        Residual Helmholtz energy contributions in the order they are summed

    """

    merge_segments = False

    def __init__(self, **kwargs):

        super().__init__(**kwargs)

        if self.parameters.merge_segments:
            raise ValueError("The Helmholtz energy functional requires one parameter entry per segment occurrence.")

    @property
    def component_index(self):
        """ Component of each segment """
        return self.parameters.component_index

    @property
    def sigma_ff(self):
        """ Segment diameters used by external potentials [Å] """
        return self.parameters.sigma

    @property
    def epsilon_k_ff(self):
        """ Segment energies used by external potentials [K] """
        return self.parameters.epsilon_k

    def helmholtz_energy_density(self, temperature, partial_density):
        r"""
        Reduced residual Helmholtz energy density, :math:`\frac{A^{res}}{k_B T V}`, of a homogeneous system at the given local densities.

        Points where every density is zero, as in the vacuum of a pore, give zero.

        Parameters
        ----------
        temperature : float
            Temperature [K]
        partial_density : numpy.ndarray
            Number density of each component [1/Å^3]

        Returns
        -------
        a : float
            Helmholtz energy density [1/Å^3]
        """

        a = 0.0
        for contribution in self.contributions:
            a = a + contribution.helmholtz_energy_density(temperature, partial_density)

        return a

    def helmholtz_energy(self, state):
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
        return self.residual_helmholtz_energy(state)

    def bond_lengths(self, temperature):
        r"""
        Bond graph weighted with the contact distance of each pair of bonded segments.

        Parameters
        ----------
        temperature : float
            Temperature [K]

        Returns
        -------
        bonds : networkx.Graph
            Copy of the bond graph with the edge attribute "length", :math:`\frac{d_\alpha + d_\beta}{2}` [Å]
        """

        diameter = self.parameters.hs_diameter(temperature)
        bonds = self.parameters.bonds.copy()
        for i, j, data in bonds.edges(data=True):
            data["length"] = 0.5 * (diameter[i] + diameter[j])

        return bonds

    def subset(self, component_list):
        """
        Functional restricted to some of the components.

        Parameters
        ----------
        component_list : list[int]
            Indices of the components to keep

        Returns
        -------
        functional : EosType
            New object with the same options
        """

        return EosType(parameters=self.parameters.subset(component_list), **self._options_dict())
