# File: log_fixtures/time_policy.py
from datetime import datetime, timezone
from typing import Union

EPOCH = 'EPOCH'
NOW = 'NOW'

# Either one of the symbolic names above or a concrete datetime
TimestampPolicy = Union[str, datetime]


def epoch_timestamp() -> datetime:
    """The zero instant (1970-01-01 00:00:00), with a fixed UTC offset."""
    return datetime.fromtimestamp(0, tz=timezone.utc)


def now_timestamp() -> datetime:
    return datetime.now(timezone.utc)


def resolve_timestamp(policy: TimestampPolicy) -> datetime:
    """
    Turns a timing request into a concrete, offset-aware timestamp.

    Args:
        policy: 'EPOCH', 'NOW' or an explicit datetime (pandas.Timestamp works too).

    Returns:
        datetime: the resolved instant. Explicit values are returned unchanged.
    """
    if isinstance(policy, datetime):
        return policy
    if isinstance(policy, str):
        if policy == EPOCH:
            return epoch_timestamp()
        if policy == NOW:
            return now_timestamp()
        raise ValueError(f"Unknown timestamp policy '{policy}'. Use '{EPOCH}', '{NOW}' or a datetime.")
    raise TypeError(f"Timestamp policy must be a string or a datetime, got {type(policy).__name__}.")
