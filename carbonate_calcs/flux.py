"""Air-sea CO2 exchange built on the Weiss solubility and Schmidt number."""
from .solubility import Ko_Weiss, SCO2_Weiss
from .units import umol_to_mol
from .water_properties import unesco_density

SC_REF = 660.0  # Schmidt number of CO2 in seawater at 20 °C
HOURS_PER_YEAR = 24.0 * 365.0

def transfer_velocity(T_degC, u10, scale=0.251):
    """
    Gas transfer velocity (cm/hr), Wanninkhof (2014) form
    k = scale · u10² · (Sc/660)^-0.5. u10 is the 10 m wind speed (m/s).
    """
    Sc = SCO2_Weiss(T_degC)
    return scale * u10**2 * (Sc / SC_REF)**(-0.5)

def air_sea_co2_flux(T_degC, S, u10, pCO2_sw, pCO2_air, scale=0.251):
    """
    Air-sea CO2 flux F = k·Ko·ρ·(pCO2_sw − pCO2_air) in mol/m²/yr,
    positive out of the ocean. pCO2 values in µatm.
    """
    k = transfer_velocity(T_degC, u10, scale)       # cm/hr
    Ko = Ko_Weiss(T_degC, S)                        # mol/kg/atm
    rho = unesco_density(T_degC, S)                 # kg/m³
    dpCO2 = umol_to_mol(pCO2_sw - pCO2_air)         # atm

    # cm/hr → m/yr
    k_m_yr = k * 0.01 * HOURS_PER_YEAR
    return k_m_yr * Ko * rho * dpCO2
