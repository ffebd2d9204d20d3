from .constants import REFERENCE_SALINITY

# Salinity conversion (mg/L, ppt or g/kg → practical salinity)
def salinity_to_psu(value, unit):
    """Convert a salinity reading to practical salinity.

    'psu' and 'g/kg' pass through; 'ppt' is treated as g/kg; 'mg/L' is
    approximated as 1000 mg/L ≈ 1 g/kg, which ignores the density of the
    sample (good to ~3% for seawater).
    """
    unit = unit.lower()
    if unit in ('psu', 'g/kg', 'ppt'):
        return value
    if unit == 'mg/l':
        return value / 1000.0
    raise ValueError(f"Unknown salinity unit {unit!r}; use 'psu', 'ppt', 'g/kg' or 'mg/L'")

def borate_salinity_ratio(S):
    """Salinity normalised to S = 35, the scaling used for conservative ions."""
    return S / REFERENCE_SALINITY
