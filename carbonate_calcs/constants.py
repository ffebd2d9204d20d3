KELVIN = 273.15  # offset degC -> K
R_BAR = 83.14510  # gas constant, cm³·bar/(mol·K); fCO2 <-> pCO2 conversion
P_STD = 1.01325  # standard pressure, bar

UMOL = 1.0e-6  # µmol/kg -> mol/kg and µatm -> atm
UMOL_PER_MOL = 1.0e6  # mol/kg -> µmol/kg and atm -> µatm
BORATE_PER_SALINITY = 416.0  # total borate at S = 35, µmol/kg (DOE 1994)
REFERENCE_SALINITY = 35.0

# Documented validity of the empirical fits
TEMPERATURE_RANGE = (0.0, 35.0)  # degC
SALINITY_RANGE = (20.0, 40.0)

# Known-pair cases understood by the [H+] solver.
# Polynomial cases need root finding, pH cases take h = 10^-pH directly.
POLYNOMIAL_CASES = ('alk_pCO2', 'alk_CO2', 'alk_DIC')
PH_CASES = ('pH_CO2', 'pH_pCO2', 'pH_DIC', 'pH_alk')
CASES = POLYNOMIAL_CASES + PH_CASES

# Output variables of a full carbonate-system state, in reporting units
STATE_UNITS = {
    'DIC':  'µmol/kg',
    'CO2':  'µmol/kg',
    'HCO3': 'µmol/kg',
    'CO3':  'µmol/kg',
    'ALK':  'µmol/kg',
    'pCO2': 'µatm',
    'fCO2': 'µatm',
    'pH':   'total scale',
}

# CoolProp fluid name for the gas phase
CO2_FLUID = 'CO2'

# Names of the two knowns for each case, in argument order
CASE_KNOWNS = {
    'alk_pCO2': ('ALK', 'pCO2'),
    'alk_CO2':  ('ALK', 'CO2'),
    'alk_DIC':  ('ALK', 'DIC'),
    'pH_CO2':   ('pH', 'CO2'),
    'pH_pCO2':  ('pH', 'pCO2'),
    'pH_DIC':   ('pH', 'DIC'),
    'pH_alk':   ('pH', 'ALK'),
}
