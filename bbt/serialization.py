"""
the two field record a Rating is persisted and transmitted as

{"mu": 25.0, "sigma": 8.333333333333334}

both fields are required, nothing else is allowed, and json objects which repeat a key are rejected
"""
import json
from typing import Sequence
from pydantic import BaseModel, ConfigDict, ValidationError
from bbt.exceptions import RatingSerializationError


class RatingRecord(BaseModel):
    """wire form of a Rating, field order is the positional order"""

    model_config = ConfigDict(extra='forbid', strict=True, frozen=True, ser_json_inf_nan='constants')

    mu: float
    sigma: float


FIELD_NAMES = tuple(RatingRecord.model_fields)


def _reject_duplicate_keys(pairs):
    obj = {}
    for key, value in pairs:
        if key in obj:
            raise RatingSerializationError(f'duplicate field {key!r}')
        obj[key] = value
    return obj


def decode_dict(data) -> RatingRecord:
    """validate a mapping with exactly the keys mu and sigma"""
    try:
        return RatingRecord.model_validate(data)
    except ValidationError as exc:
        raise RatingSerializationError(f'invalid rating record: {exc}') from exc


def decode_json(text) -> RatingRecord:
    """parse a json object into a record"""
    try:
        data = json.loads(text, object_pairs_hook=_reject_duplicate_keys)
    except json.JSONDecodeError as exc:
        raise RatingSerializationError(f'invalid rating json: {exc}') from exc
    return decode_dict(data)


def decode_tuple(values: Sequence) -> RatingRecord:
    """positional form, (mu, sigma)"""
    values = tuple(values)
    if len(values) != len(FIELD_NAMES):
        raise RatingSerializationError(f'expected {len(FIELD_NAMES)} values (mu, sigma) but got {len(values)}')
    return decode_dict(dict(zip(FIELD_NAMES, values)))


def encode_dict(mu: float, sigma: float) -> dict:
    return RatingRecord(mu=mu, sigma=sigma).model_dump()


def encode_json(mu: float, sigma: float) -> str:
    return RatingRecord(mu=mu, sigma=sigma).model_dump_json()


def encode_tuple(mu: float, sigma: float) -> tuple:
    record = RatingRecord(mu=mu, sigma=sigma)
    return tuple(getattr(record, name) for name in FIELD_NAMES)
