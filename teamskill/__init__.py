"""
teamskill
=========

Gaussian skill ratings for matches between two or more teams of any size, with draws,
partial play, match quality and win probability.
"""
from teamskill.core.base import TeamRatingSystem
from teamskill.core.environment import Environment
from teamskill.core.rating import Rating
from teamskill.models.trueskill import TrueSkill

__all__ = ['TeamRatingSystem', 'Environment', 'Rating', 'TrueSkill']
