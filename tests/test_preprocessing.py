import pytest
import numpy as np
from teamskill.core.rating import Rating
from teamskill.preprocessing import preprocess_match, restore_order

A = Rating(mu=20.0, sigma=5.0)
B = Rating(mu=25.0, sigma=6.0)
C = Rating(mu=30.0, sigma=7.0)


def test_defaults():
    match = preprocess_match([[A], [B, C]])
    np.testing.assert_array_equal(match.ranks, [0, 1])
    np.testing.assert_array_equal(match.order, [0, 1])
    np.testing.assert_array_equal(match.weights[0], [1.0])
    np.testing.assert_array_equal(match.weights[1], [1.0, 1.0])


def test_sorts_by_rank():
    match = preprocess_match([[A], [B, C], [C]], ranks=[2, 0, 1], weights=[[0.5], [1.0, 0.25], [1.0]])
    assert match.teams == [[B, C], [C], [A]]
    np.testing.assert_array_equal(match.ranks, [0, 1, 2])
    np.testing.assert_array_equal(match.order, [1, 2, 0])
    np.testing.assert_array_equal(match.weights[0], [1.0, 0.25])
    np.testing.assert_array_equal(match.weights[2], [0.5])


def test_sort_is_stable_for_ties():
    match = preprocess_match([[A], [B], [C]], ranks=[1, 0, 0])
    np.testing.assert_array_equal(match.order, [1, 2, 0])


def test_restore_order():
    order = np.array([1, 2, 0])
    assert restore_order(['b', 'c', 'a'], order) == ['a', 'b', 'c']


def test_too_few_teams():
    with pytest.raises(ValueError):
        preprocess_match([[A]])
    with pytest.raises(ValueError):
        preprocess_match([])


def test_empty_team():
    with pytest.raises(ValueError):
        preprocess_match([[A], []])


def test_rank_count_mismatch():
    with pytest.raises(ValueError):
        preprocess_match([[A], [B]], ranks=[0])
    with pytest.raises(ValueError):
        preprocess_match([[A], [B]], ranks=[0, 1, 2])


def test_weight_shape_mismatch():
    with pytest.raises(ValueError):
        preprocess_match([[A], [B]], weights=[[1.0]])
    with pytest.raises(ValueError):
        preprocess_match([[A], [B, C]], weights=[[1.0], [1.0]])


@pytest.mark.parametrize('weight', [0.0, -0.5, 1.5, float('nan')])
def test_weight_out_of_range(weight):
    with pytest.raises(ValueError):
        preprocess_match([[A], [B]], weights=[[weight], [1.0]])
