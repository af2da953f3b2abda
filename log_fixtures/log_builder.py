# File: log_fixtures/log_builder.py
from pm4py.objects.log.obj import EventLog

from .case_ids import get_case_id_generator
from .config import CONFIG
from .time_policy import resolve_timestamp
from .trace_builder import build_trace_at


def build_event_log(traces=(), base_timestamp=None, case_ids=None) -> EventLog:
    """
    Builds a pm4py EventLog, one trace per trace descriptor.

    The timing request is resolved once and every trace starts at that same
    instant, so a 'NOW' log shows no skew between its traces. Without a
    request the trace default (CONFIG['default_trace_base_timestamp']) is
    used, still resolved once for the whole log.

    Log metadata (attributes, extensions, classifiers, global attributes) is
    left empty.
    """
    if base_timestamp is None:
        base_timestamp = CONFIG['default_trace_base_timestamp']
    base = resolve_timestamp(base_timestamp)

    if case_ids is None:
        case_ids = get_case_id_generator()

    log = EventLog()
    for activities in traces:
        log.append(build_trace_at(activities, base, case_ids=case_ids))

    if CONFIG['verbose']:
        print(f"✅ Built event log with {len(log)} traces starting at {base.isoformat()}.")
    return log
