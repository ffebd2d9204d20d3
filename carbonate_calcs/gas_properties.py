import numpy as np
from CoolProp.CoolProp import AbstractState, PT_INPUTS

from .constants import CO2_FLUID, KELVIN, P_STD, R_BAR
from .equilibrium import virial_co2_weiss

def real_gas_props(Temp_C, Pressure_atm=1.0):
    """Get real‐gas Z, φ, ρ_mass, μ of pure CO2 at T,P from CoolProp using AbstractState."""
    T_K = Temp_C + KELVIN
    P_Pa = Pressure_atm * 101325.0

    # Span-Wagner reference equation via the HEOS backend
    AS = AbstractState("HEOS", CO2_FLUID)
    AS.update(PT_INPUTS, P_Pa, T_K)

    Z        = AS.compressibility_factor()       # dimensionless Z
    phi      = AS.fugacity_coefficient(0)        # fugacity coeff of component 0
    rho_mass = AS.rhomass()                      # kg/m³
    mu       = AS.viscosity()                    # Pa·s

    return Z, phi, rho_mass, mu

def virial_fugacity_coefficient(Temp_C, Pressure_atm=1.0):
    """
    φ of pure CO2 truncated at the second virial coefficient, ln φ = B·P/(R·T),
    with B from Weiss (1974). Dropping the cross term 2δ of the CO2-air
    factor p2f leaves the pure-gas value to compare with `real_gas_props`.
    """
    T_K = Temp_C + KELVIN
    P_bar = Pressure_atm * P_STD
    return np.exp(virial_co2_weiss(T_K) * P_bar / (R_BAR * T_K))
