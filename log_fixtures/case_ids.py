# File: log_fixtures/case_ids.py
import uuid

from .config import CONFIG

CASE_ID_MODES = ('uuid', 'placeholder')


class UuidCaseIds:
    """Hands out a fresh uuid4 for every trace."""

    def __call__(self):
        return uuid.uuid4()


class PlaceholderCaseIds:
    """Hands out the same fixed integer for every trace."""

    def __init__(self, value=0):
        self.value = value

    def __call__(self):
        return self.value


def get_case_id_generator(mode=None):
    """Returns the case id generator for `mode` (defaults to CONFIG['case_id_mode'])."""
    mode = mode or CONFIG['case_id_mode']
    if mode == 'uuid':
        return UuidCaseIds()
    if mode == 'placeholder':
        return PlaceholderCaseIds(CONFIG['placeholder_case_id'])
    raise ValueError(f"Unknown case id mode '{mode}'. Expected one of {CASE_ID_MODES}.")
