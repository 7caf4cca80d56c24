"""
Unit and regression test for the gc-PC-SAFT equation of state object.
"""

import copy
import pytest
import numpy as np

from gcpcsaft import initiate_eos
from gcpcsaft.parameters import ChemicalRecord
from gcpcsaft.equations_of_state import constants
from gcpcsaft.equations_of_state.saft.state import StateHD
from gcpcsaft.equations_of_state.saft.gc_pcsaft import EosType
import gcpcsaft.equations_of_state.saft.gc_pcsaft_functional as functional
import gcpcsaft.exceptions as exc

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
cross_library = {"CH3": {"OH": {"k_ij": -0.0087}}}

propane = ChemicalRecord("propane", ["CH3", "CH2", "CH3"])
ethanol = ChemicalRecord("ethanol", ["CH3", "CH2", "OH"])
propanol = ChemicalRecord("1-propanol", ["CH3", "CH2", "CH2", "OH"])

T = 300.0
V = 1e-3


def helmholtz_energy_J(eos, temperature, volume, moles, residual=False):
    """ Helmholtz energy [J] of the system in SI units. """

    state = StateHD(temperature, volume * constants.m3toA3, np.array(moles) * constants.Nav)
    if residual:
        A = eos.residual_helmholtz_energy(state)
    else:
        A = eos.helmholtz_energy(state)

    return A * constants.kb * temperature


@pytest.fixture
def mixture():
    return EosType(chemical_records=[ethanol, propanol], bead_library=bead_library, cross_library=cross_library)


def test_contributions():

    eos = EosType(chemical_records=[propane], bead_library=bead_library)
    assert [str(x) for x in eos.contributions] == ["Hard sphere", "Hard chain", "Dispersion"]

    eos = EosType(chemical_records=[propanol], bead_library=bead_library)
    assert [str(x) for x in eos.contributions][-1] == "Association"

    eos = EosType(chemical_records=[ethanol, propanol], bead_library=bead_library)
    assert [str(x) for x in eos.contributions][-1] == "Cross-association"
    assert eos.number_of_components == 2
    assert eos.parameters.merge_segments


def test_helmholtz_energy_contributions(mixture):

    state = StateHD(T, V * constants.m3toA3, np.array([0.3, 0.7]) * constants.Nav)
    output = mixture.helmholtz_energy_contributions(state)

    assert [x[0] for x in output] == ["Hard sphere", "Hard chain", "Dispersion", "Cross-association"]
    assert sum(x[1] for x in output) == pytest.approx(mixture.residual_helmholtz_energy(state), rel=1e-14)
    assert output[0][1] > 0.0
    assert output[2][1] < 0.0
    assert output[3][1] < 0.0


def test_ideal_gas_limit():

    eos = EosType(chemical_records=[propane], bead_library=bead_library)
    volume = 100.0

    assert eos.pressure(T, volume, [1.0]) == pytest.approx(constants.R * T / volume, rel=1e-3)
    assert eos.pressure(T, volume, [1.0], residual=True) < 0.0
    assert eos.ln_fugacity_coefficient(T, volume, [1.0]) == pytest.approx([0.0], abs=1e-3)


def test_pressure_finite_difference(mixture):

    moles = [0.3, 0.7]
    h = V * 1e-5
    for residual in [True, False]:
        dAdV = (
            helmholtz_energy_J(mixture, T, V + h, moles, residual) - helmholtz_energy_J(mixture, T, V - h, moles, residual)
        ) / (2 * h)
        assert mixture.pressure(T, V, moles, residual=residual) == pytest.approx(-dAdV, rel=1e-6)


def test_dp_dv_finite_difference(mixture):

    moles = [0.3, 0.7]
    h = V * 1e-5
    dPdV = (mixture.pressure(T, V + h, moles) - mixture.pressure(T, V - h, moles)) / (2 * h)

    assert mixture.dp_dv(T, V, moles) == pytest.approx(dPdV, rel=1e-6)


def test_chemical_potential_finite_difference(mixture):

    moles = np.array([0.3, 0.7])
    mu = mixture.chemical_potential(T, V, moles)
    mu_res = mixture.residual_chemical_potential(T, V, moles)

    h = 1e-6
    for i in range(2):
        dn = np.zeros(2)
        dn[i] = h
        dAdn = (helmholtz_energy_J(mixture, T, V, moles + dn) - helmholtz_energy_J(mixture, T, V, moles - dn)) / (2 * h)
        assert mu[i] == pytest.approx(dAdn, rel=1e-6)

        dAdn = (
            helmholtz_energy_J(mixture, T, V, moles + dn, residual=True)
            - helmholtz_energy_J(mixture, T, V, moles - dn, residual=True)
        ) / (2 * h)
        assert mu_res[i] == pytest.approx(dAdn, rel=1e-6)


def test_entropy_finite_difference(mixture):

    moles = [0.3, 0.7]
    h = 1e-4
    dAdT = (helmholtz_energy_J(mixture, T + h, V, moles) - helmholtz_energy_J(mixture, T - h, V, moles)) / (2 * h)

    assert mixture.entropy(T, V, moles) == pytest.approx(-dAdT, rel=1e-6)


def test_isochoric_heat_capacity_de_broglie():

    eos = EosType(chemical_records=[propane], bead_library=bead_library)
    assert eos.ideal_gas_method == "Abroglie"

    cv = eos.molar_isochoric_heat_capacity(T, V, [1.0])
    cv_res = eos.molar_isochoric_heat_capacity(T, V, [1.0], residual=True)

    assert cv - cv_res == pytest.approx(1.5 * constants.R, rel=1e-8)


def test_isochoric_heat_capacity_joback():

    library = copy.deepcopy(bead_library)
    library["CH3"]["joback"] = {"a": 19.5, "b": -8.08e-3, "c": 1.53e-4, "d": -9.67e-8, "e": 0.0}
    library["CH2"]["joback"] = {"a": -0.909, "b": 9.5e-2, "c": -5.44e-5, "d": 1.19e-8, "e": 0.0}

    eos = EosType(chemical_records=[propane], bead_library=library)
    assert eos.ideal_gas_method == "Ajoback"

    coeff = eos.parameters.joback_records[0]
    cp = coeff["a"] + coeff["b"] * T + coeff["c"] * T ** 2 + coeff["d"] * T ** 3 + coeff["e"] * T ** 4
    cv = eos.molar_isochoric_heat_capacity(T, V, [1.0])
    cv_res = eos.molar_isochoric_heat_capacity(T, V, [1.0], residual=True)

    assert cv - cv_res == pytest.approx(cp - constants.R, rel=1e-8)


def test_joback_requires_records():

    with pytest.raises(ValueError):
        EosType(chemical_records=[propane], bead_library=bead_library, ideal_gas_method="Ajoback")


def test_compute_max_density(mixture):

    moles = np.array([0.4, 0.6])
    volume_ethanol = np.pi / 6.0 * (0.77247 * 3.6937 ** 3 + 0.7912 * 3.0207 ** 3 + 1.0231 * 2.7702 ** 3)
    volume_propanol = volume_ethanol + np.pi / 6.0 * 0.7912 * 3.0207 ** 3
    expected = 0.5 / (0.4 * volume_ethanol + 0.6 * volume_propanol)

    assert mixture.compute_max_density(moles) == pytest.approx(expected, rel=1e-14)
    assert mixture.compute_max_density(10.0 * moles) == pytest.approx(expected, rel=1e-14)
    assert mixture.density_max(moles) == pytest.approx(expected * 1e30 / constants.Nav, rel=1e-14)

    dft = functional.EosType(chemical_records=[ethanol, propanol], bead_library=bead_library)
    assert dft.compute_max_density(moles) == pytest.approx(expected, rel=1e-14)

    eos = EosType(chemical_records=[ethanol, propanol], bead_library=bead_library, max_eta=0.4)
    assert eos.compute_max_density(moles) == pytest.approx(0.8 * expected, rel=1e-14)


def test_density_propane():

    eos = EosType(chemical_records=[propane], bead_library=bead_library)

    rho_v = eos.density(T, 1e5, [1.0], phase="vapor")
    rho_l = eos.density(T, 5e6, [1.0], phase="liquid")

    assert eos.pressure(T, 1.0 / rho_v, [1.0]) == pytest.approx(1e5, rel=1e-6)
    assert eos.pressure(T, 1.0 / rho_l, [1.0]) == pytest.approx(5e6, rel=1e-6)
    assert rho_l > 100 * rho_v
    assert rho_l < eos.density_max([1.0])

    with pytest.raises(ValueError):
        eos.density(T, 1e5, [1.0], phase="solid")


def test_residual_energy_matches_functional():

    eos = EosType(chemical_records=[ethanol, propanol, propane], bead_library=bead_library, cross_library=cross_library)
    dft = functional.EosType(
        chemical_records=[ethanol, propanol, propane], bead_library=bead_library, cross_library=cross_library
    )
    state = StateHD(T, V * constants.m3toA3, np.array([0.2, 0.5, 0.3]) * constants.Nav)

    assert len(eos.parameters.m) < len(dft.parameters.m)
    assert eos.residual_helmholtz_energy(state) == pytest.approx(dft.helmholtz_energy(state), rel=1e-10)


@pytest.mark.parametrize("na, nb", [(1.0, 0.0), (0.0, 1.0), (1.0, 1.0)])
def test_repeated_associating_segment_layouts(na, nb):

    library = copy.deepcopy(bead_library)
    library["X"] = {
        "molarweight": 16.0,
        "m": 1.0,
        "sigma": 3.0,
        "epsilon_k": 200.0,
        "kappa_ab": 0.01,
        "epsilon_k_ab": 2000.0,
        "na": na,
        "nb": nb,
    }
    record = ChemicalRecord("X-propane-X", ["X", "CH2", "X"])
    eos = EosType(chemical_records=[record], bead_library=library)
    dft = functional.EosType(chemical_records=[record], bead_library=library)
    state = StateHD(T, 1e-4 * constants.m3toA3, np.array([0.5]) * constants.Nav)

    assert [str(x) for x in eos.contributions][-1] == "Association"
    assert [str(x) for x in dft.contributions][-1] == "Cross-association"
    assert eos.residual_helmholtz_energy(state) == pytest.approx(dft.helmholtz_energy(state), rel=1e-10)


def test_subset(mixture):

    sub = mixture.subset([1])
    direct = EosType(chemical_records=[propanol], bead_library=bead_library)

    assert sub.number_of_components == 1
    assert sub.ideal_gas_method == mixture.ideal_gas_method
    assert [str(x) for x in sub.contributions][-1] == "Association"
    assert sub.pressure(T, V, [1.0]) == pytest.approx(direct.pressure(T, V, [1.0]), rel=1e-14)


def test_molar_weight(mixture):
    assert mixture.molar_weight == pytest.approx([29.0, 43.0])


@pytest.mark.parametrize(
    "options", [{"max_eta": 1.5}, {"max_eta": 0.0}, {"max_iter_cross_assoc": 0}, {"tol_cross_assoc": 0.0}]
)
def test_invalid_options(options):

    with pytest.raises(ValueError):
        EosType(chemical_records=[propane], bead_library=bead_library, **options)


def test_missing_parameters():

    with pytest.raises(ValueError):
        EosType(chemical_records=[propane])


def test_initiate_eos():

    eos = initiate_eos(eos="saft.gc_pcsaft", chemical_records=[propanol], bead_library=bead_library)
    assert isinstance(eos, EosType)

    dft = initiate_eos(eos="saft.gc_pcsaft_functional", chemical_records=[propanol], bead_library=bead_library)
    assert isinstance(dft, functional.EosType)

    with pytest.raises(ValueError):
        initiate_eos(eos="gc_pcsaft", chemical_records=[propanol], bead_library=bead_library)

    with pytest.raises(ImportError):
        initiate_eos(eos="saft.gc_saft_vr", chemical_records=[propanol], bead_library=bead_library)


def test_cross_association_not_converged():

    eos = EosType(chemical_records=[ethanol, propanol], bead_library=bead_library, max_iter_cross_assoc=1)

    with pytest.raises(exc.NotConvergedError):
        eos.pressure(T, V, [0.3, 0.7])


def test_str(mixture):

    string = str(mixture)

    assert "ethanol" in string
    assert "Cross-association" in string
    assert "max_eta 0.5" in string
