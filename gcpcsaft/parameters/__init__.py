"""
Segment records, molecular topologies and the assembly of mixture parameters.
"""

from .records import Identifier, ChemicalRecord, check_bead_parameters
from .assembler import ParameterSet, assemble
from .catalogue import from_json_segments, select_chemical_records
