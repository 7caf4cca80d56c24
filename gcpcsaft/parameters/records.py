"""
Records describing the segments of the group contribution model and the topology of each molecule.

The segment record store is a ``bead_library`` dictionary keyed by segment identifier. Each entry holds:

- molarweight: Molar weight of the segment [g/mol]
- m: Segment shape factor
- sigma: Segment diameter [Å]
- epsilon_k: Dispersion energy divided by the Boltzmann constant [K]
- kappa_ab: Optional, association volume
- epsilon_k_ab: Optional, association energy divided by the Boltzmann constant [K]
- na: Optional, number of association sites of type A, default of 1 when the segment associates
- nb: Optional, number of association sites of type B, default of 1 when the segment associates
- mu: Optional, dipole moment [D]
- q: Optional, quadrupole moment [DÅ]
- psi_dft: Optional, parameter of the weighted density of the dispersion functional
- joback: Optional, dictionary of Joback group contributions "a", "b", "c", "d", "e" to the ideal gas heat capacity [J/mol/K]

"""

import copy
import logging
from collections import OrderedDict

from gcpcsaft.exceptions import InsufficientInformationError

logger = logging.getLogger(__name__)

required_parameters = ["molarweight", "m", "sigma", "epsilon_k"]
association_parameters = ["kappa_ab", "epsilon_k_ab"]
joback_parameters = ["a", "b", "c", "d", "e"]


class Identifier:
    r"""
    Names used to find a molecule in a catalogue.

    Parameters
    ----------
    name : str, Optional, default=None
        Common name
    cas : str, Optional, default=None
        CAS number
    smiles : str, Optional, default=None
        SMILES key
    inchi : str, Optional, default=None
        InChI key
    iupac_name : str, Optional, default=None
        IUPAC name
    formula : str, Optional, default=None
        Chemical formula
    """

    search_options = ["name", "cas", "smiles", "inchi", "iupac_name", "formula"]

    def __init__(self, name=None, cas=None, smiles=None, inchi=None, iupac_name=None, formula=None):
        self.name = name
        self.cas = cas
        self.smiles = smiles
        self.inchi = inchi
        self.iupac_name = iupac_name
        self.formula = formula

    @classmethod
    def from_dict(cls, input_dict):
        """ Build an identifier from a dictionary, unknown keys are ignored. """
        return cls(**{key: input_dict.get(key) for key in cls.search_options})

    def as_string(self, option="name"):
        """
        Return the entry used to search for this molecule.

        Parameters
        ----------
        option : str, Optional, default="name"
            One of "name", "cas", "smiles", "inchi", "iupac_name", "formula"

        Returns
        -------
        value : str
            Requested entry, None if it is not defined
        """
        if option not in self.search_options:
            raise ValueError(
                "Search option, {}, is not supported. Choose from: {}".format(
                    option, ", ".join(self.search_options)
                )
            )
        return getattr(self, option)

    def __eq__(self, other):
        if not isinstance(other, Identifier):
            return NotImplemented
        return all(getattr(self, key) == getattr(other, key) for key in self.search_options)

    def __str__(self):
        entries = [
            "{}={}".format(key, getattr(self, key))
            for key in self.search_options
            if getattr(self, key) is not None
        ]
        return "Identifier({})".format(", ".join(entries))

    __repr__ = __str__


class ChemicalRecord:
    r"""
    Topology of a single molecule in terms of segments and bonds.

    Parameters
    ----------
    identifier : Identifier, str, dict
        Identifier of the molecule. A string is taken to be the name.
    segments : list[str]
        Ordered list of segment identifiers
    bonds : list[tuple[int]], Optional, default=None
        Pairs of indices into ``segments``. If None, the segments are assumed to form a linear chain.

    Attributes
    ----------
    identifier : Identifier
        Identifier of the molecule
    segments : list[str]
        Ordered list of segment identifiers
    bonds : list[tuple[int]]
        Pairs of indices into ``segments``
    """

    def __init__(self, identifier, segments, bonds=None):

        if isinstance(identifier, str):
            identifier = Identifier(name=identifier)
        elif isinstance(identifier, dict):
            identifier = Identifier.from_dict(identifier)
        self.identifier = identifier

        self.segments = list(segments)
        if not self.segments:
            raise InsufficientInformationError(
                "The chemical record of {} does not contain any segments".format(identifier)
            )

        if bonds is None:
            bonds = [(i, i + 1) for i in range(len(self.segments) - 1)]

        nsegments = len(self.segments)
        self.bonds = []
        for bond in bonds:
            if len(bond) != 2:
                raise InsufficientInformationError(
                    "Bond, {}, of {} should contain two segment indices".format(bond, identifier)
                )
            i, j = int(bond[0]), int(bond[1])
            if not (0 <= i < nsegments and 0 <= j < nsegments):
                raise InsufficientInformationError(
                    "Bond, {}, of {} refers to a segment outside of the {} segments given".format(
                        bond, identifier, nsegments
                    )
                )
            self.bonds.append((i, j))

    @classmethod
    def from_dict(cls, input_dict):
        """
        Build a chemical record from a dictionary with the keys "identifier", "segments", and optionally "bonds".
        """
        if "segments" not in input_dict:
            raise InsufficientInformationError(
                "A chemical record requires a list of segments: {}".format(input_dict)
            )
        return cls(input_dict.get("identifier", {}), input_dict["segments"], input_dict.get("bonds"))

    def segment_count(self):
        """
        Count the occurrences of each segment.

        Returns
        -------
        segment_count : collections.OrderedDict
            Segment identifiers in order of first occurrence with the number of times each appears
        """
        output = OrderedDict()
        for segment in self.segments:
            output[segment] = output.get(segment, 0) + 1
        return output

    def bond_count(self):
        """
        Count the bonds between each pair of segment types.

        Returns
        -------
        bond_count : dict
            Keys are sorted tuples of two segment identifiers, values the number of such bonds
        """
        output = {}
        for i, j in self.bonds:
            key = tuple(sorted((self.segments[i], self.segments[j])))
            output[key] = output.get(key, 0) + 1
        return output

    def __str__(self):
        return "ChemicalRecord(identifier={}, segments={}, bonds={})".format(
            self.identifier, self.segments, self.bonds
        )

    __repr__ = __str__


def check_bead_parameters(bead_library0, parameter_defaults):
    r"""
    Be sure all needed parameters are available for each bead.

    If a parameter is absent and a default value is given, this value will be added to the parameter set. If the default is None, then an error is raised.

    Parameters
    ----------
    bead_library0 : dict
        A dictionary where bead names are the keys to access EOS self interaction parameters
    parameter_defaults : dict
        A dictionary of default values for the required parameters.

    Returns
    -------
    new_bead_library : dict
        New dictionary with defaults added where relevant

    """

    bead_library = copy.deepcopy(bead_library0)

    for bead, bead_dict in bead_library.items():
        for parameter, default in parameter_defaults.items():
            if parameter not in bead_dict:
                if default is not None:
                    bead_dict[parameter] = default
                    logger.info(
                        "Parameter, {}, is missing for parametrized group, {}. Set to default, {}".format(
                            parameter, bead, default
                        )
                    )
                else:
                    raise InsufficientInformationError(
                        "Parameter, {}, should have been defined for parametrized group, {}.".format(
                            parameter, bead
                        )
                    )

    return bead_library


def validate_bead_library(bead_library0):
    r"""
    Check the segment records and fill in the site numbers of associating segments.

    A segment associates when both ``kappa_ab`` and ``epsilon_k_ab`` are given, in which case missing site numbers ``na`` and ``nb`` are set to one.

    Parameters
    ----------
    bead_library0 : dict
        Segment record store, see module documentation

    Returns
    -------
    bead_library : dict
        Validated copy of the segment record store
    """

    bead_library = check_bead_parameters(bead_library0, {key: None for key in required_parameters})

    for bead, bead_dict in bead_library.items():
        if all(bead_dict.get(key) is not None for key in association_parameters):
            for site in ["na", "nb"]:
                if bead_dict.get(site) is None:
                    bead_dict[site] = 1.0
                    logger.debug("Site number, {}, of group {} set to 1".format(site, bead))

        if "joback" in bead_dict and bead_dict["joback"] is not None:
            for key in joback_parameters:
                if key not in bead_dict["joback"]:
                    raise InsufficientInformationError(
                        "Joback parameter, {}, should have been defined for parametrized group, {}.".format(
                            key, bead
                        )
                    )

    return bead_library


def is_associating(bead_dict):
    """ Return True if the segment record carries association parameters. """
    return all(bead_dict.get(key) is not None for key in association_parameters)
