"""math utility functions for gaussian rating systems"""
import math
import logging
from teamskill.utils.constants import (
    INV_SQRT_2,
    INV_SQRT_2PI,
    ERF_A1,
    ERF_A2,
    ERF_A3,
    ERF_A4,
    ERF_A5,
    ERF_P,
    PPF_C0,
    PPF_C1,
    PPF_C2,
    PPF_D1,
    PPF_D2,
    PPF_D3,
    DEGENERATE_EPSILON,
)

logger = logging.getLogger(__name__)


def norm_pdf(x):
    """pdf of standard normal"""
    return INV_SQRT_2PI * math.exp(-0.5 * x * x)


def erf_approx(x):
    """
    Rational approximation of the error function (Abramowitz & Stegun 7.1.26).

    Absolute error is bounded by 1.5e-7. The approximation is evaluated on |x| and
    mirrored so the result is exactly odd, and erf_approx(0) is exactly 0.
    """
    if x == 0.0:
        return 0.0
    sign = -1.0 if x < 0.0 else 1.0
    abs_x = math.fabs(x)
    t = 1.0 / (1.0 + ERF_P * abs_x)
    poly = ((((ERF_A5 * t + ERF_A4) * t + ERF_A3) * t + ERF_A2) * t + ERF_A1) * t
    return sign * (1.0 - poly * math.exp(-abs_x * abs_x))


def norm_cdf(x):
    """cdf of standard normal"""
    return 0.5 * (1.0 + erf_approx(x * INV_SQRT_2))


def norm_ppf(p):
    """
    Inverse cdf of the standard normal (Abramowitz & Stegun 26.2.23).

    Parameters:
        p (float): a probability, expected in (0, 1)

    Returns:
        float: the quantile, -inf for p <= 0 and inf for p >= 1
    """
    if p <= 0.0:
        return -math.inf
    if p >= 1.0:
        return math.inf
    if p == 0.5:
        return 0.0
    if p < 0.5:
        return -norm_ppf(1.0 - p)
    t = math.sqrt(-2.0 * math.log(1.0 - p))
    num = PPF_C0 + PPF_C1 * t + PPF_C2 * t * t
    denom = 1.0 + PPF_D1 * t + PPF_D2 * t * t + PPF_D3 * t * t * t
    return t - num / denom


def v_and_w_win_scalar(t, eps):
    """calculate v and w for a win in a scalar fashion"""
    diff = t - eps
    cdf = norm_cdf(diff)
    if cdf < DEGENERATE_EPSILON:
        logger.debug('win likelihood saturated at x=%f, using limiting v and w', diff)
        return -diff, 1.0
    v = norm_pdf(diff) / cdf
    w = v * (v + diff)
    return v, w


def v_and_w_draw_scalar(t, eps):
    """calculate v and w for a draw in a scalar fashion"""
    abs_t = math.fabs(t)
    diff_a = eps - abs_t
    diff_b = -eps - abs_t

    pdf_a = norm_pdf(diff_a)
    pdf_b = norm_pdf(diff_b)
    shared_denom = norm_cdf(diff_a) - norm_cdf(diff_b)
    if shared_denom < DEGENERATE_EPSILON:
        logger.debug('draw likelihood saturated at t=%f, using limiting v and w', t)
        return 0.0, 1.0

    sign = -1.0 if t < 0.0 else 1.0
    v = sign * (pdf_b - pdf_a) / shared_denom
    w_num = (diff_a * pdf_a) - (diff_b * pdf_b)
    w = (v**2.0) + (w_num / shared_denom)
    return v, w
