# Handy unit conversions for membrane distillation work

# Kelvin to Celsius
K2C = lambda T_K: T_K - 273.15

# Celsius to Kelvin
C2K = lambda T_C: T_C + 273.15

# Flux conversions

def kg_m2s_to_lmh(flux: float) -> float:
  """Convert a water mass flux from kg/m²/s to kg/m²/h (numerically L/m²/h,
  the usual "LMH" unit of membrane distillation literature) given
    **flux** (*float*): the mass flux in kg/m²/s"""
  return flux * 3600.0

def lmh_to_kg_m2s(flux: float) -> float:
  """Convert a water mass flux from kg/m²/h (LMH) to kg/m²/s given
    **flux** (*float*): the mass flux in kg/m²/h"""
  return flux / 3600.0

# Salinity conversions

def g_kg_to_fraction(salinity: float) -> float:
  """Convert salinity from g/kg to a mass fraction (kg/kg) given
    **salinity** (*float*): the salinity in g/kg"""
  return salinity * 1e-3

def fraction_to_g_kg(salinity: float) -> float:
  """Convert salinity from a mass fraction (kg/kg) to g/kg given
    **salinity** (*float*): the salinity mass fraction"""
  return salinity * 1e3
