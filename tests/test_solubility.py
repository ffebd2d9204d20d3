"""
Tests for CO2 solubility, Schmidt number and air-sea flux.
"""

import numpy as np
import pytest

from carbonate_calcs.carbonate_system import solve_alk_pCO2
from carbonate_calcs.equilibrium import equilibrium_constants
from carbonate_calcs.flux import air_sea_co2_flux, transfer_velocity
from carbonate_calcs.solubility import Ko_Weiss, SCO2_Weiss, co2_saturation

# =============================================================================
# Solubility
# =============================================================================

def test_Ko_Weiss_matches_Henry_constant():
    """Weiss (1974) Ko is the same fit as Kh in the equilibrium constants"""
    for T, S in [(0.0, 35.0), (25.0, 35.0), (20.0, 0.0)]:
        assert Ko_Weiss(T, S) == pytest.approx(equilibrium_constants(T, S).Kh, rel=1e-12)

def test_Ko_Weiss_value():
    assert Ko_Weiss(25.0, 35.0) == pytest.approx(2.83918818e-02, rel=1e-8)

def test_Ko_Weiss_decreases_with_salinity():
    assert Ko_Weiss(15.0, 35.0) < Ko_Weiss(15.0, 0.0), "Salting-out should lower solubility"

def test_co2_saturation_matches_solver():
    _, CO2, _, _, _ = solve_alk_pCO2(25.0, 35.0, 2300.0, 400.0)
    assert co2_saturation(25.0, 35.0, 400.0) == pytest.approx(CO2, rel=1e-12)

def test_co2_saturation_heos_close_to_weiss():
    weiss = co2_saturation(25.0, 35.0, 400.0)
    heos = co2_saturation(25.0, 35.0, 400.0, fugacity='heos')
    assert heos == pytest.approx(weiss, rel=5e-3)
    # pure-CO2 fugacity is a cross-check only, not the solver's p2f
    assert heos != pytest.approx(weiss, rel=1e-4)

def test_co2_saturation_unknown_fugacity():
    with pytest.raises(ValueError):
        co2_saturation(25.0, 35.0, 400.0, fugacity='ideal')

# =============================================================================
# Schmidt number and transfer velocity
# =============================================================================

def test_schmidt_number_reference():
    assert SCO2_Weiss(20.0) == pytest.approx(665.988, abs=1e-3)
    assert SCO2_Weiss(0.0) == 2073.1

def test_schmidt_number_decreases_with_temperature():
    t = np.linspace(0.0, 30.0, 31)
    assert np.all(np.diff(SCO2_Weiss(t)) < 0)

def test_transfer_velocity():
    assert transfer_velocity(20.0, 10.0) == pytest.approx(24.9869, abs=1e-3)
    assert transfer_velocity(20.0, 0.0) == 0.0

# =============================================================================
# Air-sea flux
# =============================================================================

def test_flux_direction():
    assert air_sea_co2_flux(25.0, 35.0, 7.0, 450.0, 420.0) > 0, "Supersaturated ocean outgasses"
    assert air_sea_co2_flux(25.0, 35.0, 7.0, 400.0, 420.0) < 0
    assert air_sea_co2_flux(25.0, 35.0, 7.0, 420.0, 420.0) == 0.0

def test_flux_value():
    assert air_sea_co2_flux(25.0, 35.0, 7.0, 400.0, 420.0) == pytest.approx(-0.702258, abs=1e-5)
