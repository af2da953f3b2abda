# File: log_fixtures/__init__.py

from .config import CONFIG
from .time_policy import EPOCH, NOW, resolve_timestamp
from .case_ids import UuidCaseIds, PlaceholderCaseIds, get_case_id_generator
from .event_builder import build_event
from .trace_builder import build_trace
from .log_builder import build_event_log
from .notation import NotationError, parse_event, parse_trace, parse_event_log, event, trace, event_log
from .accessors import (
    event_to_activity,
    event_to_timestamp,
    trace_case_id,
    trace_to_activities,
    trace_to_timestamps,
    log_to_activities,
    log_to_dataframe,
    check_fixture_log,
)
