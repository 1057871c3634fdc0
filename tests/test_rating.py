import dataclasses
import pytest
from teamskill.core.environment import Environment
from teamskill.core.rating import Rating


def test_rating_fields():
    rating = Rating(mu=25.0, sigma=8.333)
    assert rating.mu == 25.0
    assert rating.sigma == 8.333
    assert rating.rating == 25.0


def test_conservative_rating():
    assert Rating(mu=25.0, sigma=25.0 / 3.0).conservative_rating == pytest.approx(0.0, abs=1e-12)
    assert Rating(mu=30.0, sigma=2.0).conservative_rating == 24.0


def test_exposure():
    rating = Rating(mu=30.0, sigma=5.0)
    assert rating.exposure() == 15.0
    assert rating.exposure(2.0) == 20.0
    assert rating.exposure(1.0) == 25.0


def test_rating_is_a_value():
    assert Rating(mu=25.0, sigma=8.333) == Rating(mu=25.0, sigma=8.333)
    assert Rating(mu=25.0, sigma=8.333) != Rating(mu=30.0, sigma=5.0)
    assert len({Rating(mu=25.0, sigma=8.333), Rating(mu=25.0, sigma=8.333)}) == 1
    with pytest.raises(dataclasses.FrozenInstanceError):
        Rating(mu=25.0, sigma=8.333).mu = 30.0


@pytest.mark.parametrize('sigma', [0.0, -1.0, float('nan')])
def test_rating_rejects_bad_sigma(sigma):
    with pytest.raises(ValueError):
        Rating(mu=25.0, sigma=sigma)


def test_rating_str():
    text = str(Rating(mu=25.5, sigma=8.333))
    assert '25.50' in text
    assert '8.33' in text


def test_environment_defaults():
    env = Environment.create()
    assert env.mu == 25.0
    assert env.sigma == pytest.approx(8.333, abs=1e-3)
    assert env.beta == pytest.approx(4.167, abs=1e-3)
    assert env.tau == pytest.approx(0.0833, abs=1e-4)
    assert env.draw_probability == 0.10
    assert env.min_sigma == pytest.approx(0.0833, abs=1e-4)


def test_environment_sigma_cascades():
    env = Environment.create(mu=50.0, sigma=10.0)
    assert env.beta == 5.0
    assert env.tau == pytest.approx(0.1)

    env = Environment.create(sigma=10.0, beta=3.0, tau=0.5)
    assert env.beta == 3.0
    assert env.tau == 0.5


@pytest.mark.parametrize(
    'kwargs',
    [
        {'sigma': 0.0},
        {'sigma': -1.0},
        {'beta': 0.0},
        {'tau': -0.1},
        {'draw_probability': 1.0},
        {'draw_probability': -0.1},
    ],
)
def test_environment_rejects_bad_parameters(kwargs):
    with pytest.raises(ValueError):
        Environment.create(**kwargs)
