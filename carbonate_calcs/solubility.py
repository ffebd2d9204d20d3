import numpy as np

from .constants import KELVIN
from .equilibrium import p2f_weiss
from .gas_properties import real_gas_props
from .units import mol_to_umol, umol_to_mol

def Ko_Weiss(T_degC, S):
    """
    Solubility of CO2 in seawater, Weiss (1974), Marine Chemistry 2, 203-215.
    T_degC in °C, S practical salinity; returns Ko in mol/kg/atm.
    """
    A = [-60.2409, 9345.17, 23.3585]       # mol/kg/atm
    B = [0.023517, -0.00023656, 0.0047036] # mol/kg/atm
    T = T_degC + KELVIN
    ln_Ko = A[0] + A[1] / T + A[2] * np.log(T / 100) + S * (B[0] + B[1] * T + B[2] * (T / 100)**2)
    return np.exp(ln_Ko)

def SCO2_Weiss(T_degC):
    """
    Schmidt number of CO2 in seawater (S = 35), Wanninkhof (1992) Table A1.
    Fitted for 0-30 °C.
    """
    c = [2073.1, 125.62, 3.6276, 0.043219]
    t = T_degC
    return c[0] - c[1] * t + c[2] * t**2 - c[3] * t**3

def co2_saturation(T_degC, S, pCO2_uatm, fugacity='weiss'):
    """Aqueous CO2 (µmol/kg) in equilibrium with a gas-phase pCO2 (µatm).

    fugacity='weiss' uses the Weiss (1974) factor for CO2 in air, the same
    p2f the solver entry points use, so the result equals their CO2(aq) for
    that pCO2. 'heos' swaps in the fugacity coefficient of pure CO2 at 1 atm
    from CoolProp (scalar T_degC only). Pure CO2 is not trace CO2 in air, so
    this lands ~0.2 % off; use it as a real-gas cross-check, not as a
    speciation input.
    """
    Ko = Ko_Weiss(T_degC, S)
    if fugacity == 'weiss':
        f = p2f_weiss(T_degC + KELVIN)
    elif fugacity == 'heos':
        _, f, _, _ = real_gas_props(T_degC, 1.0)
    else:
        raise ValueError(f"fugacity must be 'weiss' or 'heos', got {fugacity!r}")
    fco2 = umol_to_mol(pCO2_uatm) * f   # atm
    return mol_to_umol(Ko * fco2)
