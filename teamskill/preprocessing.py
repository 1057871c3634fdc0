"""
Preprocessing utilities for team matches
"""
import logging
from typing import List, NamedTuple, Optional, Sequence
import numpy as np
from teamskill.core.rating import Rating

logger = logging.getLogger(__name__)


class SortedMatch(NamedTuple):
    """a match with teams, ranks and weights permuted into finishing order"""

    teams: List[Sequence[Rating]]
    ranks: np.ndarray
    weights: List[np.ndarray]
    order: np.ndarray  # order[k] is the input index of the k-th sorted team


def validate_teams(teams):
    """a match needs at least 2 teams and every team needs a player"""
    if len(teams) < 2:
        raise ValueError(f'at least 2 teams are required, got {len(teams)}')
    for team_idx, team in enumerate(teams):
        if len(team) == 0:
            raise ValueError(f'team {team_idx} has no players')


def default_weights(teams):
    return [np.ones(len(team), dtype=np.float64) for team in teams]


def validate_weights(teams, weights):
    """weights must mirror the team/player shape and lie in (0, 1]"""
    if len(weights) != len(teams):
        raise ValueError(f'got weights for {len(weights)} teams but the match has {len(teams)} teams')
    team_weights = []
    for team_idx, (team, weight) in enumerate(zip(teams, weights)):
        weight = np.asarray(weight, dtype=np.float64)
        if weight.shape != (len(team),):
            raise ValueError(f'team {team_idx} has {len(team)} players but {weight.size} weights')
        if not np.all((weight > 0.0) & (weight <= 1.0)):
            raise ValueError(f'weights must be in (0, 1], got {weight.tolist()} for team {team_idx}')
        team_weights.append(weight)
    return team_weights


def preprocess_match(
    teams: Sequence[Sequence[Rating]],
    ranks: Optional[Sequence[float]] = None,
    weights: Optional[Sequence[Sequence[float]]] = None,
) -> SortedMatch:
    """
    Validate a match, fill in defaults, and sort it into finishing order.

    Parameters:
        teams: ordered teams of ratings, at least 2 and none empty
        ranks (optional): finishing rank per team, defaults to the team index
        weights (optional): per player participation weights, default 1.0

    Returns:
        SortedMatch: the match sorted by ascending rank with a stable sort, plus the permutation used
    """
    validate_teams(teams)
    num_teams = len(teams)

    if ranks is None:
        ranks = np.arange(num_teams)
    ranks = np.asarray(ranks)
    if ranks.shape != (num_teams,):
        raise ValueError(f'got {ranks.size} ranks for {num_teams} teams')

    if weights is None:
        weights = default_weights(teams)
    else:
        weights = validate_weights(teams, weights)

    order = np.argsort(ranks, kind='stable')
    logger.debug('sorted %d teams into finishing order %s', num_teams, order.tolist())
    return SortedMatch(
        teams=[teams[idx] for idx in order],
        ranks=ranks[order],
        weights=[weights[idx] for idx in order],
        order=order,
    )


def restore_order(sorted_results, order):
    """scatter results computed in sorted order back to input order"""
    results = [None] * len(order)
    for sorted_idx, input_idx in enumerate(order):
        results[input_idx] = sorted_results[sorted_idx]
    return results
