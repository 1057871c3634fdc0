"""mathematical constants computed once here to avoid recomputation"""
import math

# general math constants
SQRT_2 = math.sqrt(2.0)
INV_SQRT_2 = 1.0 / SQRT_2
INV_SQRT_2PI = 1.0 / math.sqrt(2.0 * math.pi)

# erf approximation, Abramowitz & Stegun 7.1.26 (abs error <= 1.5e-7)
ERF_A1 = 0.254829592
ERF_A2 = -0.284496736
ERF_A3 = 1.421413741
ERF_A4 = -1.453152027
ERF_A5 = 1.061405429
ERF_P = 0.3275911

# inverse cdf approximation, Abramowitz & Stegun 26.2.23 (abs error < 4.5e-4)
PPF_C0 = 2.515517
PPF_C1 = 0.802853
PPF_C2 = 0.010328
PPF_D1 = 1.432788
PPF_D2 = 0.189269
PPF_D3 = 0.001308

# below this the v and w functions fall back to their limiting values
DEGENERATE_EPSILON = 1e-10

# trueskill defaults
DEFAULT_MU = 25.0
DEFAULT_DRAW_PROBABILITY = 0.10
SIGMA_PER_MU = 1.0 / 3.0
BETA_PER_SIGMA = 0.5
TAU_PER_SIGMA = 0.01
MIN_SIGMA_PER_SIGMA = 0.01
CONSERVATIVE_K = 3.0
