"""a player's skill as a gaussian"""
from bbt import serialization
from bbt.utils.constants import DEFAULT_MU, DEFAULT_SIGMA


class Rating:
    """
    The skill of a single player, modeled as a gaussian with mean mu and standard deviation sigma.

    Ratings are immutable, a rating update always produces new Rating objects. Two Ratings are equal
    when both mu and sigma are equal, but they are ordered only by their conservative estimate, so
    ratings with different values may sort as equivalent.

    sigma is expected to be non negative. It is not validated, a negative sigma does not raise
    but rating updates involving it produce meaningless numbers.

    Attributes:
        mu (float): mean of the skill estimate
        sigma (float): standard deviation of the skill estimate
    """

    __slots__ = ('_mu', '_sigma')

    def __init__(self, mu: float = DEFAULT_MU, sigma: float = DEFAULT_SIGMA):
        object.__setattr__(self, '_mu', float(mu))
        object.__setattr__(self, '_sigma', float(sigma))

    @classmethod
    def default(cls):
        """the prior for a player who has never played, mu=25 and sigma=25/3"""
        return cls(DEFAULT_MU, DEFAULT_SIGMA)

    @classmethod
    def for_scale(cls, midpoint: float):
        """the unrated prior for a scale centered on midpoint, e.g. Rating.for_scale(1500.0) for a 0-3000 scale"""
        return cls(midpoint, midpoint / 3.0)

    @property
    def mu(self) -> float:
        return self._mu

    @property
    def sigma(self) -> float:
        return self._sigma

    @property
    def sigma2(self) -> float:
        """variance, always derived from sigma"""
        return self._sigma * self._sigma

    def conservative_estimate(self) -> float:
        """mu - 3 * sigma floored at 0, a pessimistic skill value used for sorting"""
        return max(self._mu - 3.0 * self._sigma, 0.0)

    def __setattr__(self, name, value):
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __delattr__(self, name):
        raise AttributeError(f'{type(self).__name__} is immutable')

    def __eq__(self, other):
        if not isinstance(other, Rating):
            return NotImplemented
        return self._mu == other._mu and self._sigma == other._sigma

    def __hash__(self):
        return hash((self._mu, self._sigma))

    def __lt__(self, other):
        if not isinstance(other, Rating):
            return NotImplemented
        return self.conservative_estimate() < other.conservative_estimate()

    def __le__(self, other):
        if not isinstance(other, Rating):
            return NotImplemented
        return self.conservative_estimate() <= other.conservative_estimate()

    def __gt__(self, other):
        if not isinstance(other, Rating):
            return NotImplemented
        return self.conservative_estimate() > other.conservative_estimate()

    def __ge__(self, other):
        if not isinstance(other, Rating):
            return NotImplemented
        return self.conservative_estimate() >= other.conservative_estimate()

    def __str__(self):
        return str(self.conservative_estimate())

    def __repr__(self):
        return f'Rating({self._mu}±{3.0 * self._sigma})'

    def __reduce__(self):
        return (type(self), (self._mu, self._sigma))

    def to_dict(self) -> dict:
        return serialization.encode_dict(self._mu, self._sigma)

    def to_json(self) -> str:
        return serialization.encode_json(self._mu, self._sigma)

    def to_tuple(self) -> tuple:
        return serialization.encode_tuple(self._mu, self._sigma)

    @classmethod
    def from_dict(cls, data):
        record = serialization.decode_dict(data)
        return cls(record.mu, record.sigma)

    @classmethod
    def from_json(cls, text):
        record = serialization.decode_json(text)
        return cls(record.mu, record.sigma)

    @classmethod
    def from_tuple(cls, values):
        record = serialization.decode_tuple(values)
        return cls(record.mu, record.sigma)
