"""base class for team rating systems"""
from abc import ABC
from typing import Optional, Sequence
from teamskill.core.rating import Rating


class TeamRatingSystem(ABC):
    """
    Base class for rating systems which rate matches between teams. This class defines the
    structure shared by gaussian systems such as TrueSkill, where every participant carries a
    rating and a match is an ordered collection of teams with finishing ranks.

    Attributes:
        rating_dim (int): Dimension of competitor ratings. This is 2 for systems like TrueSkill
                          which track a mean and a standard deviation for each competitor.
    """

    rating_dim: int

    def create_rating(self, mu: Optional[float] = None, sigma: Optional[float] = None) -> Rating:
        """
        Creates a rating for a new competitor.

        Parameters:
            mu (float, optional): Mean override, the system default is used when omitted.
            sigma (float, optional): Deviation override, the system default is used when omitted.
        """
        raise NotImplementedError

    def rate(
        self,
        teams: Sequence[Sequence[Rating]],
        ranks: Optional[Sequence[float]] = None,
        weights: Optional[Sequence[Sequence[float]]] = None,
    ) -> list:
        """
        Computes post-match ratings for every participant of a single match.

        Parameters:
            teams: Ordered teams, each an ordered sequence of ratings.
            ranks (optional): Finishing rank of each team, lower is better and equal ranks are draws.
                              Defaults to the team order.
            weights (optional): Participation weight in (0, 1] of every player, shaped like teams.
                                Defaults to 1.0 for everyone.

        Returns:
            list: New ratings with the same team and player order as the input.
        """
        raise NotImplementedError

    def quality(self, teams: Sequence[Sequence[Rating]]) -> float:
        """
        Estimates how evenly matched the teams are, in (0, 1] with higher being more balanced.
        """
        raise NotImplementedError

    def predict_win(self, rating: Rating, opponent: Rating) -> float:
        """
        Returns the probability that a player with rating beats a player with opponent in 1v1.
        """
        raise NotImplementedError

    def rate_1vs1(self, winner: Rating, loser: Rating, drawn: bool = False):
        """
        Rates a match between two solo players. If not a draw the first player is the winner.

        Returns:
            tuple: The new ratings of (winner, loser).
        """
        ranks = [0, 0] if drawn else [0, 1]
        (new_winner,), (new_loser,) = self.rate([[winner], [loser]], ranks=ranks)
        return new_winner, new_loser

    def quality_1vs1(self, rating: Rating, opponent: Rating) -> float:
        """match quality of two solo players"""
        return self.quality([[rating], [opponent]])
