"""default parameters computed once here to avoid recomputation"""

# the trueskill convention, a 0 to 50 scale at +/- 3 sigma
DEFAULT_MU = 25.0
DEFAULT_SIGMA = DEFAULT_MU / 3.0
DEFAULT_BETA = DEFAULT_MU / 6.0

# floor on the per player variance multiplier
KAPPA = 0.0001
