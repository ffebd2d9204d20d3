import pytest

from carbonate_calcs.equilibrium import equilibrium_constants
from carbonate_calcs.options import set_options


@pytest.fixture
def seawater():
    """Equilibrium constants of standard seawater, 25 °C and S = 35."""
    return equilibrium_constants(25.0, 35.0)


@pytest.fixture
def no_range_warnings():
    with set_options(warn_for_range=False):
        yield
