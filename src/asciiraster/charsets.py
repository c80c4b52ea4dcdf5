# Density ramp, sparse/dark to dense/bright
DENSITY_RAMP = ".:-=+*#%@"
