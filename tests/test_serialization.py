"""
a rating is stored as a record with exactly the fields mu and sigma
"""
import json
import math
import pytest
from bbt import Outcome, Rater, Rating
from bbt.exceptions import RatingSerializationError


@pytest.fixture
def rating():
    winner, _ = Rater().duel(Rating(), Rating(), Outcome.WIN)
    return winner


def test_end_to_end(rating):
    assert Rating.from_json(rating.to_json()) == rating
    assert Rating.from_dict(rating.to_dict()) == rating
    assert Rating.from_tuple(rating.to_tuple()) == rating


def test_record_layout(rating):
    assert rating.to_dict() == {'mu': rating.mu, 'sigma': rating.sigma}
    assert list(json.loads(rating.to_json())) == ['mu', 'sigma']
    assert rating.to_tuple() == (rating.mu, rating.sigma)


def test_accepts_integers():
    assert Rating.from_json('{"mu": 25, "sigma": 5}') == Rating(25.0, 5.0)
    assert Rating.from_json('{"sigma": 5.0, "mu": 25.0}') == Rating(25.0, 5.0)


@pytest.mark.parametrize(
    'text',
    [
        '{"mu": 25.0}',
        '{"sigma": 8.0}',
        '{"mu": 25.0, "sigma": 8.0, "tau": 0.1}',
        '{"mu": 25.0, "sigma": 8.0, "mu": 26.0}',
        '{"mu": "25.0", "sigma": 8.0}',
        '[25.0, 8.0]',
        '{"mu": 25.0, "sigma": ',
    ],
)
def test_rejects_bad_json(text):
    with pytest.raises(RatingSerializationError):
        Rating.from_json(text)


def test_rejects_bad_dicts():
    with pytest.raises(RatingSerializationError):
        Rating.from_dict({'mu': 25.0})
    with pytest.raises(RatingSerializationError):
        Rating.from_dict({'mu': 25.0, 'sigma': 8.0, 'extra': 1})
    with pytest.raises(ValueError):
        Rating.from_dict(None)


@pytest.mark.parametrize('values', [(), (25.0,), (25.0, 8.0, 1.0)])
def test_rejects_bad_tuples(values):
    with pytest.raises(RatingSerializationError):
        Rating.from_tuple(values)


def test_non_finite_values_survive_json():
    rating = Rating(25.0, float('inf'))
    assert json.loads(rating.to_json()) == {'mu': 25.0, 'sigma': float('inf')}
    assert Rating.from_json(rating.to_json()) == rating

    restored = Rating.from_json(Rating(float('nan'), 1.0).to_json())
    assert math.isnan(restored.mu)
    assert restored.sigma == 1.0
