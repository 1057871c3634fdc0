"""the (mu, sigma) skill estimate shared by gaussian rating systems"""
from dataclasses import dataclass
from teamskill.utils.constants import CONSERVATIVE_K


@dataclass(frozen=True)
class Rating:
    """
    An immutable skill estimate represented as a gaussian N(mu, sigma^2).

    Attributes:
        mu (float): mean skill level, higher is stronger
        sigma (float): standard deviation of the skill estimate, the uncertainty
    """

    mu: float
    sigma: float

    def __post_init__(self):
        if not self.sigma > 0.0:
            raise ValueError(f'sigma must be positive, got {self.sigma}')

    @property
    def rating(self) -> float:
        return self.mu

    @property
    def conservative_rating(self) -> float:
        """mu - 3 * sigma, the value the player's true skill exceeds with ~99% confidence"""
        return self.exposure(CONSERVATIVE_K)

    def exposure(self, k: float = CONSERVATIVE_K) -> float:
        """mu - k * sigma, a lower bound on skill penalizing uncertainty"""
        return self.mu - k * self.sigma

    def __str__(self):
        return f'Rating(mu={self.mu:.2f}, sigma={self.sigma:.2f}, conservative={self.conservative_rating:.2f})'
