"""parameter presets for common rating scales"""
from bbt.utils.constants import DEFAULT_MU


def scale_params(midpoint: float) -> dict:
    """
    Returns the prior and beta for a scale centered on midpoint.

    The prior spans roughly 0 to 2 * midpoint at +/- 3 sigma and beta is half of the
    prior sigma, which is the same relationship the default 25 / (25/3) / (25/6) scale uses.

    Parameters:
        midpoint (float): the middle of the rating scale, used as the initial mu

    Returns:
        dict: with keys 'mu', 'sigma' and 'beta'
    """
    return {
        'mu': midpoint,
        'sigma': midpoint / 3.0,
        'beta': midpoint / 6.0,
    }


# the 0 to 50 scale used by trueskill and the weng-lin paper
trueskill_scale = scale_params(DEFAULT_MU)

# a more traditional 0 to 3000 scale
elo_scale = scale_params(1500.0)
