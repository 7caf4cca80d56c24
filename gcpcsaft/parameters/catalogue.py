""" Routines for building parameter sets from catalogues of records stored in .json files.

Three catalogues are read:

- Pure records, a list of entries ``{"identifier": {"name": ..., "cas": ...}, "segments": [...], "bonds": [...]}``. The topology may also be nested under the key "chemical_record".
- Segment records, a list of entries ``{"identifier": "CH3", "molarweight": 15.0, "model_record": {"m": ..., "sigma": ..., "epsilon_k": ...}, "ideal_gas_record": {"a": ..., ...}}``.
- Binary segment records, a list of entries ``{"id1": "CH3", "id2": "OH", "model_record": -0.0087}``.
"""

import logging
import json

from gcpcsaft.exceptions import ComponentsNotFoundError, InsufficientInformationError
from .records import ChemicalRecord
from .assembler import assemble

logger = logging.getLogger(__name__)


def json_to_dict(filename):
    r"""
    Extract json file as a python object

    Parameters
    ----------
    filename : str
        File name and path leading to json file location

    Returns
    -------
    output : list, dict
        Contents of the json file
    """

    with open(filename, "r") as f:
        output = f.read()

    return json.loads(output)


def select_chemical_records(substances, pure_records, search_option="name"):
    r"""
    Find the chemical record of each requested substance.

    Parameters
    ----------
    substances : list[str]
        Identifiers of the requested substances
    pure_records : list
        Available records, either ChemicalRecord objects or dictionaries in the pure record format
    search_option : str, Optional, default="name"
        Entry of the identifier to compare with, see :class:`~gcpcsaft.parameters.records.Identifier`

    Returns
    -------
    chemical_records : list[ChemicalRecord]
        Records in the order of ``substances``
    """

    record_map = {}
    for record in pure_records:
        if not isinstance(record, ChemicalRecord):
            tmp = record.get("chemical_record", record)
            if "identifier" not in tmp:
                tmp = dict(tmp, identifier=record.get("identifier", {}))
            if "segments" not in tmp:
                logger.debug("Record without segments skipped: {}".format(record.get("identifier")))
                continue
            record = ChemicalRecord.from_dict(tmp)
        key = record.identifier.as_string(search_option)
        if key is not None:
            record_map[key] = record

    missing = [x for x in substances if x not in record_map]
    if missing:
        raise ComponentsNotFoundError(missing)

    return [record_map[x] for x in substances]


def bead_library_from_segment_records(segment_records):
    r"""
    Convert a list of segment records into a bead library.

    Parameters
    ----------
    segment_records : list[dict]
        Entries in the segment record format

    Returns
    -------
    bead_library : dict
        Segment record store, see :mod:`~gcpcsaft.parameters.records`
    """

    bead_library = {}
    for record in segment_records:
        try:
            bead = {"molarweight": record["molarweight"]}
            bead.update({k: v for k, v in record["model_record"].items() if v is not None})
            name = record["identifier"]
        except KeyError as e:
            raise InsufficientInformationError(
                "Segment record, {}, is missing the entry {}".format(record.get("identifier"), e)
            )
        if record.get("ideal_gas_record") is not None:
            bead["joback"] = record["ideal_gas_record"]
        bead_library[name] = bead

    return bead_library


def cross_library_from_binary_records(binary_records):
    r"""
    Convert a list of binary segment records into a cross library.

    Parameters
    ----------
    binary_records : list[dict]
        Entries in the binary record format

    Returns
    -------
    cross_library : dict
        Binary segment parameters, e.g. ``{"CH3": {"OH": {"k_ij": -0.0087}}}``
    """

    cross_library = {}
    for record in binary_records:
        value = record["model_record"]
        if isinstance(value, dict):
            value = value["k_ij"]
        cross_library.setdefault(record["id1"], {})[record["id2"]] = {"k_ij": value}

    return cross_library


def from_json_segments(
    substances, file_pure, file_segments, file_binary=None, search_option="name", merge_segments=False
):
    r"""
    Assemble a parameter set from json catalogues.

    Parameters
    ----------
    substances : list[str]
        Identifiers of the requested substances
    file_pure : str
        Path to the catalogue of pure records
    file_segments : str
        Path to the catalogue of segment records
    file_binary : str, Optional, default=None
        Path to the catalogue of binary segment records
    search_option : str, Optional, default="name"
        Entry of the identifier to compare with, see :class:`~gcpcsaft.parameters.records.Identifier`
    merge_segments : bool, Optional, default=False
        If True, identical segments within a molecule are merged

    Returns
    -------
    parameters : ParameterSet
        Assembled parameter set
    """

    chemical_records = select_chemical_records(substances, json_to_dict(file_pure), search_option=search_option)
    bead_library = bead_library_from_segment_records(json_to_dict(file_segments))
    if file_binary is not None:
        cross_library = cross_library_from_binary_records(json_to_dict(file_binary))
    else:
        cross_library = None

    logger.info("Loaded {} from {}".format(", ".join(substances), file_pure))

    return assemble(chemical_records, bead_library, cross_library=cross_library, merge_segments=merge_segments)
