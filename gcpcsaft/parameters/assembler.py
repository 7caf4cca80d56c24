r"""
Assembly of the parameter set of the heterosegmented group contribution PC-SAFT model.

Segment parameters are taken from the bead library and laid out in arrays aligned with a flattened segment index that runs over all molecules. Two layouts are supported:

- ``merge_segments=False``: one entry for each segment occurrence, as needed by the Helmholtz energy functional. Bonds are re-indexed with the offset of each molecule.
- ``merge_segments=True``: identical segments of a molecule are merged in order of first occurrence, as used by the bulk equation of state. The segment shape factor, ``m``, is multiplied by the number of occurrences and bonds are counted per pair of merged segments, which may be a self loop.

Both layouts describe the same bulk fluid.
"""

import copy
import logging
import numpy as np
import autograd.numpy as anp
import networkx as nx

from gcpcsaft.exceptions import UnknownSegmentError
from gcpcsaft.equations_of_state import constants
from . import combining_rule_types as crt
from .records import ChemicalRecord, validate_bead_library, is_associating, joback_parameters

logger = logging.getLogger(__name__)

# Constant terms of the Joback correlation for the ideal gas heat capacity [J/mol/K]
joback_constants = {"a": -37.93, "b": 0.21, "c": -3.91e-4, "d": 2.06e-7, "e": 0.0}


def assemble(chemical_records, bead_library, cross_library=None, merge_segments=False):
    r"""
    Assemble the parameters of a mixture from the topology of its molecules.

    Parameters
    ----------
    chemical_records : list[ChemicalRecord]
        Topology of each molecule, dictionaries with the keys "identifier", "segments", and "bonds" are also accepted
    bead_library : dict
        Segment record store, see :mod:`~gcpcsaft.parameters.records`
    cross_library : dict, Optional, default=None
        Binary segment parameters, e.g. ``{"CH3": {"OH": {"k_ij": -0.0087}}}``
    merge_segments : bool, Optional, default=False
        If True, identical segments within a molecule are merged

    Returns
    -------
    parameters : ParameterSet
        Assembled parameter set
    """
    return ParameterSet(chemical_records, bead_library, cross_library=cross_library, merge_segments=merge_segments)


class ParameterSet:
    r"""
    Parameters of a mixture, aligned with a flattened segment index.

    Parameters
    ----------
    chemical_records : list[ChemicalRecord]
        Topology of each molecule
    bead_library : dict
        Segment record store, see :mod:`~gcpcsaft.parameters.records`
    cross_library : dict, Optional, default=None
        Binary segment parameters, e.g. ``{"CH3": {"OH": {"k_ij": -0.0087}}}``
    merge_segments : bool, Optional, default=False
        If True, identical segments within a molecule are merged

    Attributes
    ----------
    chemical_records : list[ChemicalRecord]
        Topology of each molecule, kept to derive subsets
    bead_library : dict
        Validated records of the segments used in this mixture
    cross_library : dict
        Binary segment parameters
    merge_segments : bool
        Layout of the segment arrays
    number_of_components : int
        Number of molecules
    identifiers : list[str]
        Segment identifier of each entry
    component_index : numpy.ndarray
        Molecule to which each segment entry belongs
    segment_count : numpy.ndarray
        Number of merged occurrences of each segment entry
    molarweight : numpy.ndarray
        Molar weight of each molecule [g/mol]
    m : numpy.ndarray
        Segment shape factors, multiplied by ``segment_count``
    sigma : numpy.ndarray
        Segment diameters [Å]
    epsilon_k : numpy.ndarray
        Dispersion energies [K]
    psi_dft : numpy.ndarray
        Weighted density parameter of each segment, None unless given for all segments. Read by the weight functions of external density functional solvers, not by the bulk contributions.
    bonds : networkx.Graph
        Bond graph over the segment entries, the edge attribute "count" is the number of bonds
    assoc_segment : numpy.ndarray
        Segment entries that carry association sites
    n : numpy.ndarray
        Number of occurrences of each associating segment entry
    kappa_ab, epsilon_k_ab, na, nb : numpy.ndarray
        Association parameters aligned with ``assoc_segment``
    k_ij : numpy.ndarray
        Binary interaction parameters between segment entries of different molecules
    sigma_ij, epsilon_k_ij : numpy.ndarray
        Combining rule matrices between all segment entries
    sigma3_kappa_aibj, epsilon_k_aibj : numpy.ndarray
        Combining rule matrices between associating segment entries
    dipole_comp : numpy.ndarray
        Molecules that carry a dipole moment
    mu, mu2, m_mix, s_ij, e_k_ij : numpy.ndarray
        Dipole moment [D], reduced squared dipole moment per segment [K Å^3], shape factor, and mixed size [Å] and energy [K] of the dipolar molecules. Provided for polar terms supplied by external consumers, no contribution of this package reads them.
    joback_records : list
        Summed Joback coefficients of each molecule, None where a segment lacks a record
    """

    def __init__(self, chemical_records, bead_library, cross_library=None, merge_segments=False):

        self.chemical_records = [
            x if isinstance(x, ChemicalRecord) else ChemicalRecord.from_dict(x) for x in chemical_records
        ]
        self.merge_segments = merge_segments
        self.number_of_components = len(self.chemical_records)

        used = []
        for record in self.chemical_records:
            for segment in record.segments:
                if segment not in bead_library:
                    raise UnknownSegmentError(segment, molecule=record.identifier)
                if segment not in used:
                    used.append(segment)
        self.bead_library = validate_bead_library({key: bead_library[key] for key in used})

        if cross_library is None:
            cross_library = {}
        self.cross_library = copy.deepcopy(cross_library)

        self._flatten()
        self._combining_rules()
        self._dipoles()
        self._joback()

        logger.info(
            "Assembled {} components with {} segments and {} association sites".format(
                self.number_of_components, len(self.identifiers), len(self.assoc_segment)
            )
        )

    def _flatten(self):
        """ Lay out the segment, bond and association arrays. """

        identifiers = []
        component_index = []
        segment_count = []
        bonds = nx.Graph()
        self.molarweight = np.zeros(self.number_of_components)

        for i, record in enumerate(self.chemical_records):
            offset = len(identifiers)
            if self.merge_segments:
                local_index = {}
                for segment, count in record.segment_count().items():
                    local_index[segment] = len(identifiers)
                    identifiers.append(segment)
                    component_index.append(i)
                    segment_count.append(count)
                edges = [
                    (local_index[seg1], local_index[seg2], count)
                    for (seg1, seg2), count in record.bond_count().items()
                ]
            else:
                for segment in record.segments:
                    identifiers.append(segment)
                    component_index.append(i)
                    segment_count.append(1)
                edges = [(offset + j, offset + k, 1) for j, k in record.bonds]

            bonds.add_nodes_from(range(offset, len(identifiers)))
            for j, k, count in edges:
                if bonds.has_edge(j, k):
                    bonds[j][k]["count"] += count
                else:
                    bonds.add_edge(j, k, count=count)

            self.molarweight[i] = sum(self.bead_library[x]["molarweight"] for x in record.segments)

        self.identifiers = identifiers
        self.component_index = np.array(component_index, dtype=int)
        self.segment_count = np.array(segment_count, dtype=float)
        self.bonds = bonds

        self.m = self._extract("m") * self.segment_count
        self.sigma = self._extract("sigma")
        self.epsilon_k = self._extract("epsilon_k")
        if all(self.bead_library[x].get("psi_dft") is not None for x in identifiers):
            self.psi_dft = self._extract("psi_dft")
        else:
            self.psi_dft = None

        self.assoc_segment = np.array(
            [i for i, x in enumerate(identifiers) if is_associating(self.bead_library[x])], dtype=int
        )
        assoc_beads = [identifiers[i] for i in self.assoc_segment]
        self.n = self.segment_count[self.assoc_segment]
        self.kappa_ab = self._extract("kappa_ab", assoc_beads)
        self.epsilon_k_ab = self._extract("epsilon_k_ab", assoc_beads)
        self.na = self._extract("na", assoc_beads)
        self.nb = self._extract("nb", assoc_beads)

    def _extract(self, parameter, beads=None):
        if beads is None:
            beads = self.identifiers
        return np.array([self.bead_library[x][parameter] for x in beads], dtype=float)

    def _binary_interaction(self):
        """ Matrix of binary interaction parameters between segments of different molecules. """

        binary = {}
        for bead1, tmp in self.cross_library.items():
            for bead2, parameters in tmp.items():
                if parameters.get("k_ij") is not None:
                    binary[(bead1, bead2)] = parameters["k_ij"]
                    binary[(bead2, bead1)] = parameters["k_ij"]

        nseg = len(self.identifiers)
        k_ij = np.zeros((nseg, nseg))
        for i, bead1 in enumerate(self.identifiers):
            for j, bead2 in enumerate(self.identifiers):
                if self.component_index[i] != self.component_index[j]:
                    k_ij[i, j] = binary.get((bead1, bead2), 0.0)

        return k_ij

    def _combining_rules(self):

        self.k_ij = self._binary_interaction()
        self.sigma_ij = crt.cross_interaction_matrix(self.identifiers, self.bead_library, "sigma", function="mean")
        self.epsilon_k_ij = crt.cross_interaction_matrix(
            self.identifiers, self.bead_library, "epsilon_k", function="geometric_mean"
        ) * (1.0 - self.k_ij)

        assoc_beads = [self.identifiers[i] for i in self.assoc_segment]
        self.sigma3_kappa_aibj = crt.cross_interaction_matrix(
            assoc_beads, self.bead_library, "kappa_ab", function="association_volume", weighting_parameters=["sigma"]
        )
        self.epsilon_k_aibj = crt.cross_interaction_matrix(assoc_beads, self.bead_library, "epsilon_k_ab", function="mean")

    def _dipoles(self):
        """ Mixed size and energy of molecules with a dipole moment. """

        dipole_comp, mu, mu2, m_mix, sigma_mix, epsilon_k_mix = [], [], [], [], [], []
        for i, record in enumerate(self.chemical_records):
            m_i, sigma_i, epsilon_k_i, mu2_i = 0.0, 0.0, 0.0, 0.0
            for segment, count in record.segment_count().items():
                bead = self.bead_library[segment]
                m_i += bead["m"] * count
                sigma_i += bead["m"] * bead["sigma"] ** 3 * count
                epsilon_k_i += bead["m"] * bead["epsilon_k"] * count
                if bead.get("mu") is not None:
                    mu2_i += bead["mu"] ** 2 * count

            if mu2_i > 0.0:
                dipole_comp.append(i)
                mu.append(np.sqrt(mu2_i))
                # Debye^2 = 1e-19 J Å^3
                mu2.append(mu2_i / m_i * 1e-19 / constants.kb)
                m_mix.append(m_i)
                sigma_mix.append(np.cbrt(sigma_i / m_i))
                epsilon_k_mix.append(epsilon_k_i / m_i)

        self.dipole_comp = np.array(dipole_comp, dtype=int)
        self.mu = np.array(mu)
        self.mu2 = np.array(mu2)
        self.m_mix = np.array(m_mix)
        sigma_mix = np.array(sigma_mix)
        epsilon_k_mix = np.array(epsilon_k_mix)
        self.s_ij = 0.5 * (sigma_mix[:, None] + sigma_mix[None, :])
        self.e_k_ij = np.sqrt(epsilon_k_mix[:, None] * epsilon_k_mix[None, :])

    def _joback(self):

        self.joback_records = []
        for record in self.chemical_records:
            counts = record.segment_count()
            if all(self.bead_library[x].get("joback") is not None for x in counts):
                self.joback_records.append(
                    {
                        key: sum(self.bead_library[x]["joback"][key] * n for x, n in counts.items())
                        + joback_constants[key]
                        for key in joback_parameters
                    }
                )
            else:
                self.joback_records.append(None)

    def hs_diameter(self, temperature):
        r"""
        Temperature dependent segment diameter.

        :math:`d_i = \sigma_i \left(1 - 0.12 \exp\left(-3 \epsilon_i / k_B T\right)\right)`

        Parameters
        ----------
        temperature : float
            Temperature of the system [K], may carry derivatives

        Returns
        -------
        diameter : numpy.ndarray
            Diameter of each segment [Å]
        """
        return self.sigma * (1.0 - 0.12 * anp.exp(-3.0 * self.epsilon_k / temperature))

    def subset(self, component_list):
        r"""
        Parameter set of a subset of the molecules.

        The parameters are assembled again from the chemical records, the bead library, and the cross library.

        Parameters
        ----------
        component_list : list[int]
            Indices of the molecules to keep

        Returns
        -------
        parameters : ParameterSet
            New parameter set with the same layout
        """

        for i in component_list:
            if not 0 <= i < self.number_of_components:
                raise IndexError(
                    "Component index, {}, is out of range for a mixture of {} components".format(
                        i, self.number_of_components
                    )
                )

        return ParameterSet(
            [self.chemical_records[i] for i in component_list],
            self.bead_library,
            cross_library=self.cross_library,
            merge_segments=self.merge_segments,
        )

    def __str__(self):

        string = "ParameterSet("
        string += "\n\tmolarweight={}".format(self.molarweight)
        string += "\n\tcomponent_index={}".format(self.component_index)
        string += "\n\tm={}".format(self.m)
        string += "\n\tsigma={}".format(self.sigma)
        string += "\n\tepsilon_k={}".format(self.epsilon_k)
        string += "\n\tbonds={}".format(list(self.bonds.edges(data="count")))
        if len(self.assoc_segment) > 0:
            string += "\n\tassoc_segment={}".format(self.assoc_segment)
            string += "\n\tkappa_ab={}".format(self.kappa_ab)
            string += "\n\tepsilon_k_ab={}".format(self.epsilon_k_ab)
            string += "\n\tna={}".format(self.na)
            string += "\n\tnb={}".format(self.nb)
        if len(self.dipole_comp) > 0:
            string += "\n\tdipole_comp={}".format(self.dipole_comp)
            string += "\n\tmu={}".format(self.mu)
        string += "\n)"

        return string
