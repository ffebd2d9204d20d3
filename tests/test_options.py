"""Testing options.py and checks.py."""

import threading

import numpy as np
import pytest

from carbonate_calcs.checks import has_valid_temperature_salinity, is_finite, is_positive
from carbonate_calcs.exceptions import InvalidInputError, RangeWarning
from carbonate_calcs.options import OPTIONS, set_options


def test_set_options_context_restores():
    before = OPTIONS["real_root_rtol"]
    with set_options(real_root_rtol=1e-3):
        assert OPTIONS["real_root_rtol"] == 1e-3
    assert OPTIONS["real_root_rtol"] == before

def test_set_options_is_process_wide():
    seen = []
    with set_options(warn_for_range=False):
        worker = threading.Thread(target=lambda: seen.append(OPTIONS["warn_for_range"]))
        worker.start()
        worker.join()
    assert seen == [False]

def test_set_options_bounds_stored_as_floats():
    with set_options(pH_bounds=[2, 12]):
        assert OPTIONS["pH_bounds"] == (2.0, 12.0)
    assert OPTIONS["pH_bounds"] == (0.0, 14.0)

def test_set_options_unknown_name():
    with pytest.raises(ValueError) as e:
        set_options(tolerance=1e-3)
    assert "not in the set of valid options" in str(e.value)

@pytest.mark.parametrize("kwargs", [
    {"real_root_rtol": -1.0},
    {"real_root_rtol": True},
    {"pH_bounds": (14.0, 0.0)},
    {"pH_bounds": 7.0},
    {"warn_for_range": "yes"},
])
def test_set_options_invalid_value(kwargs):
    with pytest.raises(ValueError) as e:
        set_options(**kwargs)
    assert "invalid value" in str(e.value)


def test_is_finite():
    assert is_finite(np.array([1.0, 2.0]), "ALK")
    with pytest.raises(InvalidInputError) as e:
        is_finite(np.array([1.0, np.nan]), "ALK")
    assert "ALK must be finite" in str(e.value)

def test_is_positive():
    assert is_positive(2000.0, "DIC", "µmol/kg")
    with pytest.raises(InvalidInputError) as e:
        is_positive(np.array([2000.0, 0.0]), "DIC", "µmol/kg")
    assert "DIC must be positive" in str(e.value)

def test_temperature_salinity_in_range_is_silent(recwarn):
    assert has_valid_temperature_salinity(25.0, 35.0)
    assert len(recwarn) == 0

def test_salinity_out_of_range_warns():
    with pytest.warns(RangeWarning, match="Salinity"):
        has_valid_temperature_salinity(25.0, np.array([35.0, 10.0]))

def test_invalid_input_error_keeps_message():
    with pytest.raises(InvalidInputError) as e:
        has_valid_temperature_salinity(25.0, -0.5)
    assert e.value.message == str(e.value)
