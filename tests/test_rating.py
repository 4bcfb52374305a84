"""
Rating construction, ordering and display
"""
import copy
import pickle
import pytest
from bbt import Rating
from bbt.configs import elo_scale, scale_params, trueskill_scale


def test_can_instantiate_ratings():
    default_rating = Rating.default()
    assert default_rating == Rating(25.0, 25.0 / 3.0)
    assert default_rating == Rating()
    assert default_rating.mu == 25.0
    assert default_rating.sigma == 25.0 / 3.0


def test_sigma2_follows_sigma():
    rating = Rating(10.0, 3.0)
    assert rating.sigma2 == 9.0
    assert Rating.default().sigma2 == (25.0 / 3.0) * (25.0 / 3.0)


def test_conservative_estimate():
    assert Rating(30.0, 2.0).conservative_estimate() == 24.0
    assert Rating(1.0, 2.0).conservative_estimate() == 0.0
    assert Rating.default().conservative_estimate() == pytest.approx(0.0, abs=1e-12)


def test_ordering_uses_conservative_estimate():
    strong = Rating(30.0, 2.0)
    weak = Rating(20.0, 2.0)
    assert weak < strong
    assert strong > weak
    assert weak <= strong
    assert strong >= weak
    assert sorted([strong, weak]) == [weak, strong]

    # both floor at 0 so neither is ahead, but they are different ratings
    a, b = Rating(10.0, 5.0), Rating(20.0, 10.0)
    assert not a < b
    assert not b < a
    assert a <= b and b <= a
    assert a != b


def test_ratings_are_immutable():
    rating = Rating()
    with pytest.raises(AttributeError):
        rating.mu = 30.0
    with pytest.raises(AttributeError):
        rating.sigma = 1.0
    with pytest.raises(AttributeError):
        rating.extra = 1.0
    assert rating == Rating()


def test_hash_and_copy():
    assert len({Rating(1.0, 2.0), Rating(1.0, 2.0), Rating(2.0, 1.0)}) == 2
    rating = Rating(27.5, 4.25)
    assert copy.copy(rating) == rating
    assert copy.deepcopy(rating) == rating
    assert pickle.loads(pickle.dumps(rating)) == rating


def test_display():
    assert str(Rating(30.0, 2.0)) == '24.0'
    assert str(Rating(1.0, 2.0)) == '0.0'
    assert repr(Rating(30.0, 2.0)) == 'Rating(30.0±6.0)'


def test_scales():
    assert trueskill_scale == {'mu': 25.0, 'sigma': 25.0 / 3.0, 'beta': 25.0 / 6.0}
    assert elo_scale == {'mu': 1500.0, 'sigma': 500.0, 'beta': 250.0}
    assert scale_params(300.0)['sigma'] == 100.0
    assert Rating.for_scale(1500.0) == Rating(1500.0, 500.0)
    assert Rating.for_scale(25.0) == Rating.default()
