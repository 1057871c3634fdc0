"""TrueSkill"""
import math
import logging
from typing import Optional
import numpy as np
from teamskill.core.base import TeamRatingSystem
from teamskill.core.environment import Environment
from teamskill.core.rating import Rating
from teamskill.preprocessing import preprocess_match, restore_order, validate_teams
from teamskill.utils.constants import DEFAULT_MU, DEFAULT_DRAW_PROBABILITY
from teamskill.utils.math_utils import norm_cdf, norm_ppf, v_and_w_win_scalar, v_and_w_draw_scalar

logger = logging.getLogger(__name__)


class TrueSkill(TeamRatingSystem):
    """
    the og TrueSkill rating system shoutout to Microsoft

    Teams are compared only against the team finishing directly above and below them, so a
    middle ranked team is adjusted by both neighbours. This is a simplification of the full
    factor graph which runs message passing over every team at once.
    """

    rating_dim = 2

    def __init__(
        self,
        mu: float = DEFAULT_MU,
        sigma: Optional[float] = None,
        beta: Optional[float] = None,
        tau: Optional[float] = None,
        draw_probability: float = DEFAULT_DRAW_PROBABILITY,
    ):
        self.env = Environment.create(
            mu=mu,
            sigma=sigma,
            beta=beta,
            tau=tau,
            draw_probability=draw_probability,
        )
        self.beta_squared = self.env.beta**2.0
        self.tau_squared = self.env.tau**2.0
        self.draw_margin_over_c = norm_ppf((1.0 + self.env.draw_probability) / 2.0)

    @property
    def mu(self):
        return self.env.mu

    @property
    def sigma(self):
        return self.env.sigma

    @property
    def beta(self):
        return self.env.beta

    @property
    def tau(self):
        return self.env.tau

    @property
    def draw_probability(self):
        return self.env.draw_probability

    def __repr__(self):
        return (
            f'TrueSkill(mu={self.mu:.3f}, sigma={self.sigma:.3f}, beta={self.beta:.3f}, '
            f'tau={self.tau:.3f}, draw_probability={self.draw_probability:.1%})'
        )

    def create_rating(self, mu: Optional[float] = None, sigma: Optional[float] = None) -> Rating:
        return Rating(
            mu=self.env.mu if mu is None else mu,
            sigma=self.env.sigma if sigma is None else sigma,
        )

    def expose(self, rating: Rating) -> float:
        """leaderboard sort key, the conservative skill estimate"""
        return rating.conservative_rating

    def increase_rating_dev(self, teams):
        """model skill drift between matches, returns per player (mus, sigma2s) arrays for each team"""
        mus = [np.array([r.mu for r in team], dtype=np.float64) for team in teams]
        sigma2s = [
            np.square(np.array([r.sigma for r in team], dtype=np.float64)) + self.tau_squared for team in teams
        ]
        return mus, sigma2s

    def rate(self, teams, ranks=None, weights=None):
        match = preprocess_match(teams, ranks, weights)
        logger.debug('rating match with team sizes %s', [len(team) for team in teams])

        mus, sigma2s = self.increase_rating_dev(match.teams)
        team_mus = np.array([m.sum() for m in mus])
        team_sigma2s = np.array([s.sum() for s in sigma2s])
        team_sizes = np.array([len(team) for team in match.teams])

        mu_deltas, sigma_multipliers = self.team_updates(team_mus, team_sigma2s, team_sizes, match.ranks)

        sorted_results = []
        for team_idx in range(len(match.teams)):
            sorted_results.append(
                self.distribute(
                    mus[team_idx],
                    sigma2s[team_idx],
                    match.weights[team_idx],
                    mu_deltas[team_idx],
                    sigma_multipliers[team_idx],
                )
            )
        return restore_order(sorted_results, match.order)

    def team_updates(self, team_mus, team_sigma2s, team_sizes, ranks):
        """
        Compare each team with the team ranked directly below it.

        Parameters:
            team_mus (np.ndarray): summed means of each team in finishing order
            team_sigma2s (np.ndarray): summed variances of each team in finishing order
            team_sizes (np.ndarray): number of players on each team
            ranks (np.ndarray): sorted finishing ranks, equal neighbours drew

        Returns:
            tuple: (mu_deltas, sigma_multipliers) per team, accumulated over both neighbours
        """
        num_teams = team_mus.shape[0]
        mu_deltas = np.zeros(num_teams, dtype=np.float64)
        sigma_multipliers = np.ones(num_teams, dtype=np.float64)

        for idx in range(num_teams - 1):
            pair = [idx, idx + 1]
            pair_sigma2s = team_sigma2s[pair]
            combined_sigma2 = pair_sigma2s.sum() + team_sizes[pair].sum() * self.beta_squared
            combined_dev = math.sqrt(combined_sigma2)
            norm_diff = (team_mus[idx] - team_mus[idx + 1]) / combined_dev

            if ranks[idx] == ranks[idx + 1]:
                v, w = v_and_w_draw_scalar(norm_diff, self.draw_margin_over_c)
            else:
                v, w = v_and_w_win_scalar(norm_diff, self.draw_margin_over_c)

            mu_updates = (pair_sigma2s / combined_dev) * v
            mu_deltas[idx] += mu_updates[0]
            mu_deltas[idx + 1] -= mu_updates[1]

            radicands = np.maximum(1.0 - w * pair_sigma2s / combined_sigma2, 0.0)
            multipliers = np.sqrt(radicands)
            multipliers[np.isnan(multipliers)] = 1.0
            sigma_multipliers[pair] *= multipliers

        return mu_deltas, sigma_multipliers

    def distribute(self, mus, sigma2s, weights, mu_delta, sigma_multiplier):
        """share a team level update between its players by weight and variance share"""
        contributions = weights * sigma2s / sigma2s.sum()
        new_mus = mus + contributions * mu_delta
        new_sigmas = np.maximum(np.sqrt(sigma2s) * sigma_multiplier, self.env.min_sigma)
        return [Rating(mu=float(mu), sigma=float(sigma)) for mu, sigma in zip(new_mus, new_sigmas)]

    def quality(self, teams):
        """
        Two teams: the draw probability relative to the draw probability of equal teams.
        More teams: the mean of that quantity over every unordered pair of teams.
        """
        validate_teams(teams)
        team_mus = np.array([sum(r.mu for r in team) for team in teams], dtype=np.float64)
        team_sigma2s = np.array([sum(r.sigma**2.0 for r in team) for team in teams], dtype=np.float64)
        team_sizes = np.array([len(team) for team in teams])

        idx_1, idx_2 = np.triu_indices(len(teams), k=1)
        n_beta_squared = (team_sizes[idx_1] + team_sizes[idx_2]) * self.beta_squared
        combined_sigma2s = team_sigma2s[idx_1] + team_sigma2s[idx_2] + n_beta_squared
        rating_diffs = team_mus[idx_1] - team_mus[idx_2]
        qualities = np.sqrt(n_beta_squared / combined_sigma2s) * np.exp(
            -np.square(rating_diffs) / (2.0 * combined_sigma2s)
        )
        return float(qualities.mean())

    def predict_win(self, rating, opponent):
        combined_sigma2 = rating.sigma**2.0 + opponent.sigma**2.0 + 2.0 * self.beta_squared
        return norm_cdf((rating.mu - opponent.mu) / math.sqrt(combined_sigma2))
