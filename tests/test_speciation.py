"""Tests for the partition of DIC at known [H+]."""

import pytest

from carbonate_calcs.exceptions import InvalidInputError
from carbonate_calcs.speciation import (
    alkalinity,
    co2_from_alk,
    co2_from_dic,
    co2_from_pco2,
    dic_from_co2,
    fco2_from_co2,
    pco2_from_fco2,
    speciate,
)

H = 10.0**-8.1


def test_speciate_from_co2(seawater):
    sp = speciate(H, seawater, co2=10e-6)
    assert sp.co2 == 10e-6
    assert sp.dic * 1e6 == pytest.approx(2043.6981, abs=1e-3)
    assert sp.dic == pytest.approx(sp.co2 + sp.hco3 + sp.co3, rel=1e-14)

def test_speciate_from_dic(seawater):
    sp = speciate(H, seawater, dic=2000e-6)
    assert sp.dic == 2000e-6
    assert sp.co2 + sp.hco3 + sp.co3 == pytest.approx(2000e-6, rel=1e-14)
    # bicarbonate dominates at seawater pH
    assert sp.hco3 > sp.co3 > sp.co2

def test_co2_dic_inverse(seawater):
    K1, K2 = seawater.K1, seawater.K2
    dic = dic_from_co2(H, 10e-6, K1, K2)
    assert co2_from_dic(H, dic, K1, K2) == pytest.approx(10e-6, rel=1e-14)

def test_speciate_needs_exactly_one_known(seawater):
    with pytest.raises(InvalidInputError):
        speciate(H, seawater)
    with pytest.raises(InvalidInputError):
        speciate(H, seawater, dic=2000e-6, co2=10e-6)

def test_alkalinity_from_co2(seawater):
    alk = alkalinity(H, 10e-6, seawater)
    assert alk * 1e6 == pytest.approx(2385.4352, abs=1e-3)

def test_co2_from_alk_inverts_alkalinity(seawater):
    alk = alkalinity(H, 10e-6, seawater)
    assert co2_from_alk(H, alk, seawater) == pytest.approx(10e-6, rel=1e-12)

def test_gas_phase_conversions(seawater):
    s = co2_from_pco2(400e-6, seawater)
    fco2 = fco2_from_co2(s, seawater.Kh)
    assert fco2 == pytest.approx(400e-6 * seawater.p2f, rel=1e-14)
    assert pco2_from_fco2(fco2, seawater.p2f) == pytest.approx(400e-6, rel=1e-14)
    assert fco2 < 400e-6, "Fugacity of CO2 in air is below its partial pressure"
