def unesco_density(Temp_C, S):
    """
    UNESCO (1980) equation of state for seawater density (kg/m^3) at 1 atm.
    S is practical salinity.
    """
    # pure water density coefficients
    A0 = 999.842594
    A1 = 6.793952e-2
    A2 = -9.095290e-3
    A3 = 1.001685e-4
    A4 = -1.120083e-6
    A5 = 6.536332e-9
    t = Temp_C
    rho_w = A0 + t * (A1 + t * (A2 + t * (A3 + t * (A4 + t * A5))))

    # first-order salinity term
    B0 = 0.824493
    B1 = -0.0040899
    B2 = 7.6438e-5
    B3 = -8.2467e-7
    B4 = 5.3875e-9
    b = B0 + t * (B1 + t * (B2 + t * (B3 + t * B4)))

    # S^1.5 and S^2 terms
    C0 = -5.72466e-3
    C1 = 1.0227e-4
    C2 = -1.6546e-6
    c = C0 + t * (C1 + t * C2)
    D0 = 4.8314e-4

    return rho_w + b * S + c * S**1.5 + D0 * S**2

def umol_kg_to_umol_L(value, Temp_C, S):
    """Convert a concentration in µmol/kg to µmol/L at in-situ density."""
    return value * unesco_density(Temp_C, S) / 1000.0
