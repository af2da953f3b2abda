# File: log_fixtures/config.py
import os
from datetime import timedelta

from pm4py.util import xes_constants

# --- Configuration ---
CONFIG = {
    # --- Reserved attribute keys ---
    'activity_key': xes_constants.DEFAULT_NAME_KEY,        # "concept:name" on events
    'timestamp_key': xes_constants.DEFAULT_TIMESTAMP_KEY,  # "time:timestamp" on events
    'case_id_key': xes_constants.DEFAULT_TRACEID_KEY,      # "concept:name" on traces

    # --- Default timing requests ---
    # A bare event sits at EPOCH so two fixtures compare equal.
    # A bare trace (and a bare log) is anchored to the moment of construction.
    'default_event_timestamp': 'EPOCH',
    'default_trace_base_timestamp': 'NOW',

    # Offset between two consecutive events of a trace
    'event_spacing': timedelta(hours=1),

    # --- Case identifiers ---
    # 'uuid':        fresh uuid4 per trace
    # 'placeholder': the same integer for every trace
    'case_id_mode': os.environ.get('LOG_FIXTURES_CASE_IDS', 'uuid'),
    'placeholder_case_id': 0,

    # Print one line per built trace / log
    'verbose': False,
}
