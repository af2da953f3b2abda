# File: log_fixtures/event_builder.py
from pm4py.objects.log.obj import Event

from .config import CONFIG
from .time_policy import resolve_timestamp


def build_event(activity, timestamp=None) -> Event:
    """
    Builds a pm4py Event carrying the two mandatory attributes.

    The timestamp attribute is set first and the activity second, so the
    attribute order is stable across fixtures.

    Args:
        activity: Activity descriptor. Anything is accepted and turned into its
            text form verbatim (no escaping, empty names allowed).
        timestamp: 'EPOCH', 'NOW', an explicit datetime, or None for
            CONFIG['default_event_timestamp'].

    Returns:
        Event: a freshly created event.
    """
    if timestamp is None:
        timestamp = CONFIG['default_event_timestamp']

    event = Event()
    event[CONFIG['timestamp_key']] = resolve_timestamp(timestamp)
    event[CONFIG['activity_key']] = str(activity)
    return event
