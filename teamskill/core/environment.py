"""immutable configuration for a trueskill style rating environment"""
from dataclasses import dataclass
from typing import Optional
from teamskill.utils.constants import (
    DEFAULT_MU,
    DEFAULT_DRAW_PROBABILITY,
    SIGMA_PER_MU,
    BETA_PER_SIGMA,
    TAU_PER_SIGMA,
    MIN_SIGMA_PER_SIGMA,
)


@dataclass(frozen=True)
class Environment:
    """
    Parameters shared by every match rated in one environment.

    Attributes:
        mu (float): default mean for new players
        sigma (float): default deviation for new players
        beta (float): performance variance width, the skill gap giving ~76% win probability
        tau (float): dynamics factor added to every deviation before a match
        draw_probability (float): probability of a draw between evenly matched teams
    """

    mu: float
    sigma: float
    beta: float
    tau: float
    draw_probability: float

    def __post_init__(self):
        if not self.sigma > 0.0:
            raise ValueError(f'sigma must be positive, got {self.sigma}')
        if not self.beta > 0.0:
            raise ValueError(f'beta must be positive, got {self.beta}')
        if not self.tau >= 0.0:
            raise ValueError(f'tau must be non-negative, got {self.tau}')
        if not 0.0 <= self.draw_probability < 1.0:
            raise ValueError(f'draw_probability must be in [0, 1), got {self.draw_probability}')

    @classmethod
    def create(
        cls,
        mu: float = DEFAULT_MU,
        sigma: Optional[float] = None,
        beta: Optional[float] = None,
        tau: Optional[float] = None,
        draw_probability: float = DEFAULT_DRAW_PROBABILITY,
    ) -> 'Environment':
        """resolve unset parameters from mu and sigma, beta and tau follow an overridden sigma"""
        sigma = mu * SIGMA_PER_MU if sigma is None else sigma
        beta = sigma * BETA_PER_SIGMA if beta is None else beta
        tau = sigma * TAU_PER_SIGMA if tau is None else tau
        return cls(mu=mu, sigma=sigma, beta=beta, tau=tau, draw_probability=draw_probability)

    @property
    def min_sigma(self) -> float:
        return self.sigma * MIN_SIGMA_PER_SIGMA
