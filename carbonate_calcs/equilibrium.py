"""
Equilibrium constants of the seawater carbonate system at 1 atm.

All constants are on the total pH scale in mol/kg-soln, evaluated from
temperature T (Kelvin) and practical salinity S. Each fit is documented for
roughly 0-35 °C and S = 20-40; outside that range the values are silently
extrapolated, and S < 0 gives NaN.
"""
from collections import namedtuple

import numpy as np

from .constants import BORATE_PER_SALINITY, P_STD, R_BAR, UMOL
from .salinity import borate_salinity_ratio
from .units import celsius_to_kelvin

EquilibriumConstants = namedtuple(
    'EquilibriumConstants', ['Kw', 'Kh', 'p2f', 'K1', 'K2', 'Kb', 'borate_total']
)


def kw_millero(T, S):
    """Ion product of water, Millero (1995) in Dickson and Goyet (1994)."""
    lnKw = (-13847.26 / T + 148.9652 - 23.6521 * np.log(T)
            + (118.67 / T - 5.977 + 1.0495 * np.log(T)) * np.sqrt(S) - 0.01615 * S)
    return np.exp(lnKw)

def kh_weiss(T, S):
    """Henry's constant [CO2]/fCO2 in mol/kg/atm, Weiss (1974)."""
    lnKh = (9345.17 / T - 60.2409 + 23.3585 * np.log(T / 100.0)
            + S * (0.023517 - 0.00023656 * T + 0.0047036e-4 * T * T))
    return np.exp(lnKh)

def virial_co2_weiss(T):
    """Second virial coefficient of pure CO2 in cm³/mol, Weiss (1974)."""
    return -1636.75 + 12.0408 * T - 0.0327957 * T**2 + 3.16528e-5 * T**3

def p2f_weiss(T):
    """pCO2 → fCO2 factor for CO2 in air at 1 atm, Weiss (1974) virial form."""
    delC = 57.7 - 0.118 * T  # CO2-air cross virial term
    B = virial_co2_weiss(T)
    return np.exp((B + 2 * delC) * P_STD / (R_BAR * T))

def k1_lueker(T, S):
    """[H+][HCO3-]/[CO2]; Mehrbach et al. (1973) refit by Lueker et al. (2000)."""
    pK1 = 3633.86 / T - 61.2172 + 9.6777 * np.log(T) - 0.011555 * S + 0.0001152 * S * S
    return 10.0**(-pK1)

def k2_lueker(T, S):
    """[H+][CO3--]/[HCO3-]; Mehrbach et al. (1973) refit by Lueker et al. (2000)."""
    pK2 = 471.78 / T + 25.9290 - 3.16967 * np.log(T) - 0.01781 * S + 0.0001122 * S * S
    return 10.0**(-pK2)

def kb_dickson(T, S):
    """[H+][B(OH)4-]/[B(OH)3], Dickson (1990)."""
    sqrtS = np.sqrt(S)
    tmp1 = -8966.90 - 2890.53 * sqrtS - 77.942 * S + 1.728 * np.power(S, 1.5) - 0.0996 * S * S
    tmp2 = 148.0248 + 137.1942 * sqrtS + 1.62142 * S
    tmp3 = (-24.4344 - 25.085 * sqrtS - 0.2474 * S) * np.log(T)
    return np.exp(tmp1 / T + tmp2 + tmp3 + 0.053105 * sqrtS * T)

def borate_total(S):
    """Total borate in mol/kg (DOE 1994); zero in freshwater."""
    return BORATE_PER_SALINITY * borate_salinity_ratio(S) * UMOL


def equilibrium_constants(TC, S):
    """Evaluate the full constant set at temperature TC (°C) and salinity S.

    Works elementwise on numpy arrays. No range checks are made here; see
    :py:func:`carbonate_calcs.checks.has_valid_temperature_salinity`.
    """
    T = celsius_to_kelvin(TC)
    return EquilibriumConstants(
        Kw=kw_millero(T, S),
        Kh=kh_weiss(T, S),
        p2f=p2f_weiss(T),
        K1=k1_lueker(T, S),
        K2=k2_lueker(T, S),
        Kb=kb_dickson(T, S),
        borate_total=borate_total(S),
    )
