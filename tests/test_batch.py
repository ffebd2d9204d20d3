import numpy as np
import pandas as pd
import pytest

from carbonate_calcs.batch import speciate_frame
from carbonate_calcs.carbonate_system import solve_alk_DIC, solve_pH_pCO2
from carbonate_calcs.exceptions import InvalidInputError


@pytest.fixture
def samples():
    return pd.DataFrame({
        'TC':  [5.0, 15.0, 25.0],
        'S':   [34.0, 35.0, 36.0],
        'ALK': [2250.0, 2300.0, 2350.0],
        'DIC': [2100.0, 2050.0, 2000.0],
    }, index=['a', 'b', 'c'])


def test_speciate_frame_columns(samples):
    out = speciate_frame(samples)
    assert list(out.columns) == ['TC', 'S', 'DIC', 'CO2', 'HCO3', 'CO3', 'ALK', 'pCO2', 'fCO2', 'pH']
    assert list(out.index) == ['a', 'b', 'c']

def test_speciate_frame_matches_scalar(samples):
    out = speciate_frame(samples)
    for label, row in samples.iterrows():
        pCO2, HCO3, CO3, CO2, pH = solve_alk_DIC(row.TC, row.S, row.ALK, row.DIC)
        assert out.loc[label, 'pCO2'] == pytest.approx(pCO2, rel=1e-9)
        assert out.loc[label, 'pH'] == pytest.approx(pH, rel=1e-9)
        assert out.loc[label, 'CO2'] == pytest.approx(CO2, rel=1e-9)

def test_speciate_frame_other_pair(samples):
    df = samples[['TC', 'S']].assign(pH=[8.0, 8.05, 8.1], pCO2=[400.0, 410.0, 420.0])
    out = speciate_frame(df, known=('pH', 'pCO2'))
    CO2, HCO3, CO3, DIC, ALK = solve_pH_pCO2(15.0, 35.0, 8.05, 410.0)
    assert out.loc['b', 'DIC'] == pytest.approx(DIC, rel=1e-9)
    assert np.allclose(out['pCO2'], df['pCO2'], rtol=1e-9)

def test_speciate_frame_missing_column(samples):
    with pytest.raises(InvalidInputError) as e:
        speciate_frame(samples.drop(columns='DIC'))
    assert "missing column" in str(e.value)
