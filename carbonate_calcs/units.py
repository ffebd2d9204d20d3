import numpy as np

from .constants import KELVIN, UMOL, UMOL_PER_MOL


def fahrenheit_to_celsius(F):
    return (F - 32.0) * (5.0 / 9.0)

def celsius_to_kelvin(Temp_C):
    return Temp_C + KELVIN

# Concentrations and pressures
def umol_to_mol(value):
    """µmol/kg → mol/kg (also µatm → atm)."""
    return value * UMOL

def mol_to_umol(value):
    """mol/kg → µmol/kg (also atm → µatm)."""
    return value * UMOL_PER_MOL

# Hydrogen ion
def pH_to_h(pH):
    """Total-scale pH → [H+] in mol/kg."""
    return 10.0**(-pH)

def h_to_pH(h):
    return -np.log10(h)
