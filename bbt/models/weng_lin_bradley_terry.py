"""Weng/Lin Bayesian Online Rating system, Bradley Terry Edition"""
import numpy as np
from bbt.configs import scale_params
from bbt.core.base import OnlineRatingSystem
from bbt.rating import Rating
from bbt.utils.constants import DEFAULT_BETA, KAPPA
from bbt.utils.math_utils import sigmoid


class WengLinBradleyTerry(OnlineRatingSystem):
    """
    Algorithm 1 (Bradley-Terry full pair) from "A Bayesian Approximation Method for Online Ranking"
    https://jmlr.csail.mit.edu/papers/volume12/weng11a/weng11a.pdf

    Each team is treated as one competitor whose skill is the sum of its players' gaussians, every
    team is compared against every other team, and the resulting mean shift and variance reduction
    are split between teammates in proportion to their share of the team variance.

    Parameters:
        beta (float): standard deviation of performance around skill, how much luck the game has
        kappa (float): lower bound on the multiplier applied to a player's variance
        update_method (str): 'batched' computes all pairs at once with numpy matrices, 'iterative'
                             loops over the pairs one at a time, both give the same ratings
    """

    def __init__(
        self,
        beta: float = DEFAULT_BETA,
        kappa: float = KAPPA,
        update_method: str = 'batched',
    ):
        self.beta = beta
        self.beta_squared = beta * beta
        self.two_beta_squared = 2.0 * self.beta_squared
        self.kappa = kappa
        self.update_method = update_method

        if update_method == 'batched':
            self.team_updates = self.batched_team_updates
        elif update_method == 'iterative':
            self.team_updates = self.iterative_team_updates
        else:
            raise ValueError(f"update_method must be 'batched' or 'iterative', got {update_method!r}")

    @classmethod
    def for_scale(cls, midpoint: float, **kwargs):
        """a rater whose beta matches Rating.for_scale(midpoint)"""
        return cls(beta=scale_params(midpoint)['beta'], **kwargs)

    def __repr__(self):
        return f'{type(self).__name__}(beta={self.beta}, kappa={self.kappa}, update_method={self.update_method!r})'

    def batched_team_updates(self, team_mus, team_sigma2s, ranks):
        """compute omega and delta for every team using num_teams x num_teams matrices, row i is team i vs team j"""
        combined_devs = np.sqrt(team_sigma2s[:, None] + team_sigma2s[None, :] + self.two_beta_squared)
        mu_diffs = team_mus[:, None] - team_mus[None, :]
        probs = sigmoid(mu_diffs / combined_devs)  # prob team i beats team j
        opp_probs = sigmoid(-mu_diffs / combined_devs)  # prob team j beats team i
        # 1 if team i finished ahead of team j, 0.5 for a tie, 0 if behind
        scores = 0.5 * (np.sign(ranks[None, :] - ranks[:, None]) + 1.0)

        omegas = (team_sigma2s[:, None] / combined_devs) * (scores - probs)
        gammas = np.sqrt(team_sigma2s)[:, None] / combined_devs
        deltas = gammas * (team_sigma2s[:, None] / np.square(combined_devs)) * probs * opp_probs

        # a team does not play itself
        np.fill_diagonal(omegas, 0.0)
        np.fill_diagonal(deltas, 0.0)
        return omegas.sum(axis=1), deltas.sum(axis=1)

    def iterative_team_updates(self, team_mus, team_sigma2s, ranks):
        """compute omega and delta for every team one ordered pair at a time"""
        num_teams = team_mus.shape[0]
        omegas = np.zeros(num_teams, dtype=np.float64)
        deltas = np.zeros(num_teams, dtype=np.float64)
        for i in range(num_teams):
            for j in range(num_teams):
                if i == j:
                    continue
                combined_dev = np.sqrt(team_sigma2s[i] + team_sigma2s[j] + self.two_beta_squared)
                norm_diff = (team_mus[i] - team_mus[j]) / combined_dev
                prob = sigmoid(norm_diff)
                opp_prob = sigmoid(-norm_diff)
                if ranks[j] > ranks[i]:
                    score = 1.0
                elif ranks[j] == ranks[i]:
                    score = 0.5
                else:
                    score = 0.0
                omegas[i] += (team_sigma2s[i] / combined_dev) * (score - prob)
                gamma = np.sqrt(team_sigma2s[i]) / combined_dev
                deltas[i] += gamma * (team_sigma2s[i] / (combined_dev * combined_dev)) * prob * opp_prob
        return omegas, deltas

    def rate_teams(self, teams, ranks):
        team_sizes = np.array([len(team) for team in teams])
        team_idxs = np.repeat(np.arange(len(teams)), team_sizes)  # team of each player
        mus = np.array([player.mu for team in teams for player in team], dtype=np.float64)
        sigma2s = np.array([player.sigma2 for team in teams for player in team], dtype=np.float64)
        # dense integer ranks, compared as given so large integers keep their order
        rank_order = {rank: position for position, rank in enumerate(sorted(set(ranks)))}
        ranks = np.array([rank_order[rank] for rank in ranks], dtype=np.int64)

        team_mus = np.bincount(team_idxs, weights=mus, minlength=len(teams))
        team_sigma2s = np.bincount(team_idxs, weights=sigma2s, minlength=len(teams))

        omegas, deltas = self.team_updates(team_mus, team_sigma2s, ranks)

        # each player takes their share of the team variance
        shares = sigma2s / team_sigma2s[team_idxs]
        new_mus = mus + shares * omegas[team_idxs]
        sigma2_multipliers = np.maximum(1.0 - shares * deltas[team_idxs], self.kappa)
        new_sigmas = np.sqrt(sigma2s * sigma2_multipliers)

        new_ratings = [Rating(mu, sigma) for mu, sigma in zip(new_mus.tolist(), new_sigmas.tolist())]
        bounds = np.concatenate(([0], np.cumsum(team_sizes))).tolist()
        return [new_ratings[start:end] for start, end in zip(bounds[:-1], bounds[1:])]
