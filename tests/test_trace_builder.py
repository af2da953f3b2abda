# tests/test_trace_builder.py
from datetime import datetime, timedelta, timezone

import pytest
from pm4py.objects.log.obj import Trace

from log_fixtures import CONFIG, EPOCH, NOW, build_trace
from log_fixtures.accessors import trace_case_id, trace_to_activities, trace_to_timestamps


def test_simple_trace():
    trace = build_trace(['a', 'b', 'c', 'd'])
    assert isinstance(trace, Trace)
    assert trace_to_activities(trace) == ['a', 'b', 'c', 'd']


def test_timed_trace_epoch(epoch, hours):
    trace = build_trace(['a', 'b', 'c', 'd'], base_timestamp=EPOCH)
    assert trace_to_timestamps(trace) == [epoch, epoch + hours(1), epoch + hours(2), epoch + hours(3)]


def test_timed_trace_explicit(hours):
    timestamp = datetime(2024, 3, 1, 12, tzinfo=timezone(timedelta(hours=-5)))
    trace = build_trace(['a', 'b', 'c', 'd'], base_timestamp=timestamp)
    assert trace_to_timestamps(trace) == [timestamp + hours(i) for i in range(4)]


@pytest.mark.parametrize('n', [0, 1, 2, 7])
def test_length_and_order_preserved(n):
    activities = [f'act_{i}' for i in range(n)]
    trace = build_trace(activities, base_timestamp=EPOCH)
    assert len(trace) == n
    assert trace_to_activities(trace) == activities


def test_empty_trace_has_case_id():
    trace = build_trace([], base_timestamp=NOW)
    assert len(trace) == 0
    assert trace_case_id(trace) is not None
    assert str(trace_case_id(trace)) != ''


def test_no_arguments_gives_empty_trace():
    assert len(build_trace()) == 0


def test_default_base_is_now():
    before = datetime.now(timezone.utc)
    trace = build_trace(['a', 'b'])
    after = datetime.now(timezone.utc)
    first = trace_to_timestamps(trace)[0]
    assert before <= first <= after


def test_duplicate_activities_are_kept():
    trace = build_trace(['a', 'a', 'a'], base_timestamp=EPOCH)
    assert trace_to_activities(trace) == ['a', 'a', 'a']


def test_injected_case_ids(fixed_ids):
    trace = build_trace(['a'], case_ids=fixed_ids)
    assert trace_case_id(trace) == 42


def test_placeholder_mode_from_config(monkeypatch):
    monkeypatch.setitem(CONFIG, 'case_id_mode', 'placeholder')
    assert trace_case_id(build_trace(['a'])) == 0


def test_uuid_case_ids_differ(monkeypatch):
    monkeypatch.setitem(CONFIG, 'case_id_mode', 'uuid')
    assert trace_case_id(build_trace(['a'])) != trace_case_id(build_trace(['a']))


def test_epoch_traces_are_reproducible():
    assert trace_to_timestamps(build_trace(['a', 'b'], base_timestamp=EPOCH)) == \
        trace_to_timestamps(build_trace(['a', 'b'], base_timestamp=EPOCH))


def test_spacing_follows_config(monkeypatch, epoch):
    monkeypatch.setitem(CONFIG, 'event_spacing', timedelta(minutes=15))
    trace = build_trace(['a', 'b', 'c'], base_timestamp=EPOCH)
    assert trace_to_timestamps(trace)[2] == epoch + timedelta(minutes=30)


def test_verbose_prints(monkeypatch, capsys):
    monkeypatch.setitem(CONFIG, 'verbose', True)
    build_trace(['a', 'b'], base_timestamp=EPOCH, case_ids=lambda: 'case-1')
    assert 'Built trace case-1 with 2 events' in capsys.readouterr().out


def test_silent_by_default(capsys):
    build_trace(['a'], base_timestamp=EPOCH)
    assert capsys.readouterr().out == ''
