"""
Unit test for the gc-PC-SAFT Helmholtz energy functional object.
"""

import pytest
import numpy as np
from autograd import grad

from gcpcsaft.parameters import ChemicalRecord, assemble
from gcpcsaft.equations_of_state import constants
from gcpcsaft.equations_of_state.saft.state import StateHD
from gcpcsaft.equations_of_state.saft.gc_pcsaft_functional import EosType

bead_library = {
    "CH3": {"molarweight": 15.0, "m": 0.77247, "sigma": 3.6937, "epsilon_k": 181.49},
    "CH2": {"molarweight": 14.0, "m": 0.7912, "sigma": 3.0207, "epsilon_k": 157.23},
    "OH": {
        "molarweight": 0.0,
        "m": 1.0231,
        "sigma": 2.7702,
        "epsilon_k": 334.29,
        "kappa_ab": 0.009583,
        "epsilon_k_ab": 2575.9,
    },
}

propane = ChemicalRecord("propane", ["CH3", "CH2", "CH3"])
propanol = ChemicalRecord("1-propanol", ["CH3", "CH2", "CH2", "OH"])


def test_bond_lengths():

    dft = EosType(chemical_records=[propane], bead_library=bead_library)
    T = 300.0

    d = np.array([3.6937, 3.0207]) * (1.0 - 0.12 * np.exp(-3.0 * np.array([181.49, 157.23]) / T))
    bonds = dft.bond_lengths(T)

    assert bonds.number_of_edges() == 2
    assert bonds[0][1]["length"] == pytest.approx(0.5 * (d[0] + d[1]), rel=1e-14)
    assert bonds[1][2]["length"] == pytest.approx(0.5 * (d[0] + d[1]), rel=1e-14)
    assert bonds[1][2]["count"] == 1
    assert "length" not in dft.parameters.bonds[0][1]


def test_helmholtz_energy_density():

    dft = EosType(chemical_records=[propanol, propane], bead_library=bead_library)
    T = 300.0
    volume = 2e-3 * constants.m3toA3
    moles = np.array([0.4, 0.6]) * constants.Nav
    state = StateHD(T, volume, moles)

    a = dft.helmholtz_energy_density(T, moles / volume)

    assert a * volume == pytest.approx(dft.helmholtz_energy(state), rel=1e-12)
    assert [str(x) for x in dft.contributions][-1] == "Association"


def test_merged_parameters():

    with pytest.raises(ValueError):
        EosType(parameters=assemble([propane], bead_library, merge_segments=True))


def test_segment_properties():

    dft = EosType(chemical_records=[propanol, propane], bead_library=bead_library)

    assert list(dft.component_index) == [0, 0, 0, 0, 1, 1, 1]
    assert dft.sigma_ff == pytest.approx([3.6937, 3.0207, 3.0207, 2.7702, 3.6937, 3.0207, 3.6937])
    assert dft.epsilon_k_ff[3] == pytest.approx(334.29)


def test_subset():

    dft = EosType(chemical_records=[propanol, propane], bead_library=bead_library, max_eta=0.4)
    sub = dft.subset([1])

    assert isinstance(sub, EosType)
    assert sub.options.max_eta == 0.4
    assert list(sub.component_index) == [0, 0, 0]
    assert [str(x) for x in sub.contributions] == ["Hard sphere", "Hard chain", "Dispersion"]


def test_vacuum():

    dft = EosType(chemical_records=[propanol, propane], bead_library=bead_library)
    T = 300.0
    rho = np.zeros(2)

    assert dft.helmholtz_energy_density(T, rho) == 0.0
    for contribution in dft.contributions:
        assert contribution.helmholtz_energy_density(T, rho) == 0.0

    dadrho = grad(lambda x: dft.helmholtz_energy_density(T, x))(rho)
    assert np.all(np.isfinite(dadrho))
    assert dadrho == pytest.approx([0.0, 0.0])
