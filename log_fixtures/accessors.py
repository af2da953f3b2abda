# File: log_fixtures/accessors.py
import pm4py

from .config import CONFIG


def event_to_activity(event):
    return event[CONFIG['activity_key']]


def event_to_timestamp(event):
    return event[CONFIG['timestamp_key']]


def trace_case_id(trace):
    return trace.attributes[CONFIG['case_id_key']]


def trace_to_activities(trace):
    return [event_to_activity(e) for e in trace]


def trace_to_timestamps(trace):
    return [event_to_timestamp(e) for e in trace]


def log_to_activities(log):
    return [trace_to_activities(tr) for tr in log]


def log_to_dataframe(log):
    """Flattens a fixture log into a pandas DataFrame (one row per event, case id under 'case:concept:name')."""
    return pm4py.convert_to_dataframe(log)


def check_fixture_log(log, verbose=True):
    """
    Sanity checks on a fixture log:
      1) schema: every trace has a case id, every event has an activity and a timestamp
      2) monotonicity: timestamps never decrease within a trace

    Returns:
        bool: True if both checks pass.
    """
    activity_key = CONFIG['activity_key']
    timestamp_key = CONFIG['timestamp_key']

    # 1) schema check
    schema_ok = True
    for tr in log:
        if CONFIG['case_id_key'] not in tr.attributes:
            schema_ok = False
        for ev in tr:
            if not all(k in ev for k in (activity_key, timestamp_key)):
                schema_ok = False

    # 2) monotonicity
    monotone_ok = True
    if schema_ok:
        for tr in log:
            last = None
            for ev in tr:
                if last is not None and ev[timestamp_key] < last:
                    monotone_ok = False
                last = ev[timestamp_key]

    if verbose:
        n_events = sum(len(tr) for tr in log)
        print(f"Fixture log: {len(log)} traces, {n_events} events.")
        print(f"  - Schema check: {'✅' if schema_ok else '❌'}")
        print(f"  - Monotonic timestamps: {'✅' if schema_ok and monotone_ok else '❌'}")
    return schema_ok and monotone_ok
