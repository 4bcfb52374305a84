"""
bbt: Bayesian Bradley-Terry skill ratings for teams
===================================================

An implementation of Algorithm 1 from "A Bayesian Approximation Method for Online Ranking" by Weng and Lin
https://jmlr.csail.mit.edu/papers/volume12/weng11a/weng11a.pdf

Two player games:

    import bbt

    rater = bbt.Rater()
    p1, p2 = bbt.Rating(), bbt.Rating()
    new_p1, new_p2 = rater.duel(p1, p2, bbt.Outcome.WIN)

Multiplayer and team games take a list of teams and the rank each team finished with. Lower ranks are better
and equal ranks are ties, here team 1 wins, teams 2 and 3 tie for second and team 4 comes last:

    new_teams = rater.update_ratings(
        [[alice, bob], [charlie, dave], [eve, fred], [gabe, henry]],
        [1, 2, 2, 4],
    )

beta is how much randomness the game has, a luck heavy card game deserves a larger beta than chess.
The default scale runs from 0 to 50. For a 0 to 3000 scale use Rating.for_scale(1500.0) and Rater.for_scale(1500.0).

Ratings containing a zero or negative sigma are not rejected, updates involving them produce nan or inf.
"""
from bbt.core.base import OnlineRatingSystem, Outcome
from bbt.exceptions import (
    BBTError,
    EmptyTeamError,
    MismatchedLengthsError,
    RatingSerializationError,
    RatingUpdateError,
)
from bbt.models.weng_lin_bradley_terry import WengLinBradleyTerry
from bbt.rating import Rating

Rater = WengLinBradleyTerry

__version__ = '0.1.0'

__all__ = [
    'BBTError',
    'EmptyTeamError',
    'MismatchedLengthsError',
    'OnlineRatingSystem',
    'Outcome',
    'Rater',
    'Rating',
    'RatingSerializationError',
    'RatingUpdateError',
    'WengLinBradleyTerry',
]
