"""
Seawater carbonate system from any two known quantities.

Follows the equilibrium formulation of Zeebe and Wolf-Gladrow (2001), CO2 in
Seawater: Equilibrium, Kinetics, Isotopes. All knowns are at 1 atm (sea
surface).

Units
-----
TC : temperature (°C), valid ~0-35
S : practical salinity, valid ~20-40
ALK, DIC, CO2, HCO3, CO3 : µmol/kg
pCO2, fCO2 : µatm
pH : total scale

Scalars or numpy arrays (broadcast elementwise) are accepted.
"""
import logging
from collections import namedtuple

import numpy as np

from .checks import has_valid_temperature_salinity, is_finite, is_positive
from .constants import CASE_KNOWNS, POLYNOMIAL_CASES, STATE_UNITS
from .equilibrium import equilibrium_constants
from .exceptions import InvalidInputError
from .h_solver import solve_h
from .speciation import (
    alkalinity,
    co2_from_alk,
    co2_from_pco2,
    fco2_from_co2,
    pco2_from_fco2,
    speciate,
)
from .units import h_to_pH, mol_to_umol, umol_to_mol

logger = logging.getLogger(__name__)

CarbonateState = namedtuple(
    'CarbonateState', ['DIC', 'CO2', 'HCO3', 'CO3', 'ALK', 'pCO2', 'fCO2', 'pH']
)


def _check_known(name, value):
    if name in ('ALK', 'pH'):
        is_finite(value, name)
    else:
        is_positive(value, name, STATE_UNITS[name])


def _as_float(value):
    """Lists and scalars to float arrays; 0-d results come back as scalars."""
    return np.asarray(value, dtype=float)[()]


def _solve(case, TC, S, known_a, known_b):
    """Validate, solve for [H+] and speciate; returns a CarbonateState."""
    name_a, name_b = CASE_KNOWNS[case]
    has_valid_temperature_salinity(TC, S)
    _check_known(name_a, known_a)
    _check_known(name_b, known_b)
    TC, S, known_a, known_b = (_as_float(v) for v in (TC, S, known_a, known_b))
    logger.debug(f"{case}: TC={TC}, S={S}, {name_a}={known_a}, {name_b}={known_b}")

    consts = equilibrium_constants(TC, S)
    # pH stays dimensionless, everything else goes to mol/kg or atm
    a = known_a if name_a == 'pH' else umol_to_mol(known_a)
    b = umol_to_mol(known_b)
    h = solve_h(case, TC, S, a, b, consts)

    if name_b == 'pCO2':
        species = speciate(h, consts, co2=co2_from_pco2(b, consts))
    elif name_b == 'CO2':
        species = speciate(h, consts, co2=b)
    elif name_b == 'DIC':
        species = speciate(h, consts, dic=b)
    else:
        s = co2_from_alk(h, b, consts)
        if np.any(s <= 0):
            raise InvalidInputError(
                f"Alkalinity {known_b} µmol/kg is too low to hold any dissolved "
                f"inorganic carbon at pH {known_a}."
            )
        species = speciate(h, consts, co2=s)

    # a known alkalinity is reported as given
    if name_a == 'ALK':
        ALK = known_a
    elif name_b == 'ALK':
        ALK = known_b
    else:
        ALK = mol_to_umol(alkalinity(h, species.co2, consts))

    fco2 = fco2_from_co2(species.co2, consts.Kh)
    pco2 = pco2_from_fco2(fco2, consts.p2f)

    # ----------- change units from mol/kg to µmol/kg
    return CarbonateState(
        DIC=mol_to_umol(species.dic),
        CO2=mol_to_umol(species.co2),
        HCO3=mol_to_umol(species.hco3),
        CO3=mol_to_umol(species.co3),
        ALK=ALK,
        pCO2=mol_to_umol(pco2),
        fCO2=mol_to_umol(fco2),
        pH=h_to_pH(h) if case in POLYNOMIAL_CASES else known_a,
    )


def solve_alk_pCO2(TC, S, ALK, pCO2):
    """ALK and pCO2 given. Returns (DIC, CO2, HCO3, CO3, pH)."""
    st = _solve('alk_pCO2', TC, S, ALK, pCO2)
    return st.DIC, st.CO2, st.HCO3, st.CO3, st.pH

def solve_alk_CO2(TC, S, ALK, CO2):
    """ALK and aqueous CO2 given. Returns (DIC, HCO3, CO3, pH, pCO2)."""
    st = _solve('alk_CO2', TC, S, ALK, CO2)
    return st.DIC, st.HCO3, st.CO3, st.pH, st.pCO2

def solve_alk_DIC(TC, S, ALK, DIC):
    """ALK and DIC given. Returns (pCO2, HCO3, CO3, CO2, pH)."""
    st = _solve('alk_DIC', TC, S, ALK, DIC)
    return st.pCO2, st.HCO3, st.CO3, st.CO2, st.pH

def solve_pH_CO2(TC, S, pH, CO2):
    """pH and aqueous CO2 given. Returns (pCO2, HCO3, CO3, DIC, ALK)."""
    st = _solve('pH_CO2', TC, S, pH, CO2)
    return st.pCO2, st.HCO3, st.CO3, st.DIC, st.ALK

def solve_pH_pCO2(TC, S, pH, pCO2):
    """pH and pCO2 given. Returns (CO2, HCO3, CO3, DIC, ALK)."""
    st = _solve('pH_pCO2', TC, S, pH, pCO2)
    return st.CO2, st.HCO3, st.CO3, st.DIC, st.ALK

def solve_pH_DIC(TC, S, pH, DIC):
    """pH and DIC given. Returns (pCO2, HCO3, CO3, CO2, ALK)."""
    st = _solve('pH_DIC', TC, S, pH, DIC)
    return st.pCO2, st.HCO3, st.CO3, st.CO2, st.ALK

def solve_pH_alk(TC, S, pH, ALK):
    """pH and ALK given. Returns (pCO2, HCO3, CO3, CO2, DIC)."""
    st = _solve('pH_alk', TC, S, pH, ALK)
    return st.pCO2, st.HCO3, st.CO3, st.CO2, st.DIC


def carbonate_state(TC, S, **knowns):
    """Full CarbonateState from exactly two of ALK, DIC, CO2, pCO2 and pH,
    e.g. ``carbonate_state(25.0, 35.0, ALK=2300.0, pCO2=400.0)``.
    """
    given = {k for k, v in knowns.items() if v is not None}
    for case, names in CASE_KNOWNS.items():
        if set(names) == given:
            return _solve(case, TC, S, knowns[names[0]], knowns[names[1]])

    pairs = [' + '.join(names) for names in CASE_KNOWNS.values()]
    raise InvalidInputError(
        f"Cannot solve the carbonate system from {sorted(given)}; "
        f"supported pairs are: {', '.join(pairs)}."
    )
