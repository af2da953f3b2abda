# File: log_fixtures/trace_builder.py
from datetime import datetime

from pm4py.objects.log.obj import Trace

from .case_ids import get_case_id_generator
from .config import CONFIG
from .event_builder import build_event
from .time_policy import resolve_timestamp


def build_trace_at(activities, base: datetime, case_ids=None) -> Trace:
    """
    Builds a trace from an already resolved base timestamp.

    The event at position i is placed at base + i * CONFIG['event_spacing'].
    Used directly by the log builder so that every trace of a log shares
    one base instant.
    """
    if case_ids is None:
        case_ids = get_case_id_generator()

    trace = Trace()
    trace.attributes[CONFIG['case_id_key']] = case_ids()

    spacing = CONFIG['event_spacing']
    for idx, activity in enumerate(activities):
        trace.append(build_event(activity, timestamp=base + idx * spacing))

    if CONFIG['verbose']:
        print(f"  - Built trace {trace.attributes[CONFIG['case_id_key']]} with {len(trace)} events.")
    return trace


def build_trace(activities=(), base_timestamp=None, case_ids=None) -> Trace:
    """
    Builds a pm4py Trace from an ordered sequence of activity descriptors.

    Args:
        activities: Activity descriptors, in trace order. May be empty.
        base_timestamp: 'EPOCH', 'NOW', an explicit datetime, or None for
            CONFIG['default_trace_base_timestamp']. Resolved exactly once.
        case_ids: Optional callable returning a fresh case identifier.

    Returns:
        Trace: the case id sits in trace.attributes, the events are one hour
        apart starting at the base timestamp.
    """
    if base_timestamp is None:
        base_timestamp = CONFIG['default_trace_base_timestamp']
    base = resolve_timestamp(base_timestamp)
    return build_trace_at(activities, base, case_ids=case_ids)
