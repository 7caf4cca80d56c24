"""
Unit test for loading parameter sets from json catalogues.
"""

import json
import pytest

from gcpcsaft.parameters import from_json_segments, select_chemical_records, ChemicalRecord
import gcpcsaft.exceptions as exc

segment_records = [
    {
        "identifier": "CH3",
        "molarweight": 15.0,
        "model_record": {"m": 0.77247, "sigma": 3.6937, "epsilon_k": 181.49},
        "ideal_gas_record": {"a": 19.5, "b": -0.00808, "c": 0.000153, "d": -9.67e-08, "e": 0.0},
    },
    {
        "identifier": "CH2",
        "molarweight": 14.0,
        "model_record": {"m": 0.7912, "sigma": 3.0207, "epsilon_k": 157.23},
    },
    {
        "identifier": "OH",
        "molarweight": 0.0,
        "model_record": {
            "m": 1.0231,
            "sigma": 2.7702,
            "epsilon_k": 334.29,
            "kappa_ab": 0.009583,
            "epsilon_k_ab": 2575.9,
            "na": None,
        },
    },
]
pure_records = [
    {"identifier": {"cas": "74-98-6", "name": "propane"}, "segments": ["CH3", "CH2", "CH3"]},
    {"identifier": {"cas": "64-17-5", "name": "ethanol"}, "segments": ["CH3", "CH2", "OH"]},
    {
        "identifier": {"cas": "71-23-8", "name": "1-propanol"},
        "chemical_record": {"segments": ["CH3", "CH2", "CH2", "OH"], "bonds": [[0, 1], [1, 2], [2, 3]]},
    },
]
binary_records = [{"id1": "CH3", "id2": "OH", "model_record": -0.0087}]


@pytest.fixture
def catalogue(tmp_path):

    files = {}
    for name, records in [("pure", pure_records), ("segments", segment_records), ("binary", binary_records)]:
        fname = tmp_path / "{}.json".format(name)
        fname.write_text(json.dumps(records))
        files[name] = str(fname)

    return files


def test_from_json_segments(catalogue):

    params = from_json_segments(
        ["1-propanol", "ethanol"], catalogue["pure"], catalogue["segments"], file_binary=catalogue["binary"]
    )

    assert params.number_of_components == 2
    assert params.molarweight == pytest.approx([43.0, 29.0])
    assert params.chemical_records[0].identifier.cas == "71-23-8"
    assert params.k_ij[0, 6] == pytest.approx(-0.0087)
    assert list(params.na) == [1.0, 1.0]
    assert params.joback_records == [None, None]


def test_from_json_segments_by_cas(catalogue):

    params = from_json_segments(["74-98-6"], catalogue["pure"], catalogue["segments"], search_option="cas")

    assert params.chemical_records[0].identifier.name == "propane"
    assert params.k_ij == pytest.approx(0.0)


def test_components_not_found(catalogue):

    with pytest.raises(exc.ComponentsNotFoundError) as excinfo:
        from_json_segments(["methanol", "ethanol", "butanol"], catalogue["pure"], catalogue["segments"])

    assert excinfo.value.missing == ["methanol", "butanol"]
    assert "methanol" in str(excinfo.value)
    assert "butanol" in str(excinfo.value)


def test_select_chemical_records():

    records = [ChemicalRecord("propane", ["CH3", "CH2", "CH3"]), ChemicalRecord("ethane", ["CH3", "CH3"])]

    selected = select_chemical_records(["ethane"], records)
    assert selected[0].segments == ["CH3", "CH3"]

    with pytest.raises(ValueError):
        select_chemical_records(["ethane"], records, search_option="boiling_point")
