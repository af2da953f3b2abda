# File: log_fixtures/notation.py
#
# Terse text notation for fixtures:
#
#   event("a")                                  -> activity "a" at EPOCH
#   event('"name with spaces"; timestamp=NOW')
#   trace("a, b, c, d; base_timestamp=EPOCH")
#   trace("")                                   -> empty trace
#   event_log('[a, b], [c], ["names that", "have spaces"]; base_timestamp=NOW')
#
# Names are bare words or quoted strings. Timing values are EPOCH, NOW or an
# ISO-8601 timestamp (quote it if it contains a space).
import re
from collections import namedtuple
from datetime import datetime

from .event_builder import build_event
from .log_builder import build_event_log
from .time_policy import EPOCH, NOW
from .trace_builder import build_trace

_TOKEN_RE = re.compile(r'''
    (?P<quoted>"(?:[^"\\]|\\.)*"|'(?:[^'\\]|\\.)*')
  | (?P<punct>[\[\],;=])
  | (?P<word>[^\s\[\],;="']+)
''', re.VERBOSE)

_Token = namedtuple('_Token', ['kind', 'value', 'pos'])


class NotationError(ValueError):
    """Raised for malformed fixture notation."""

    def __init__(self, message, position=None):
        if position is not None:
            message = f"{message} (at position {position})"
        super().__init__(message)
        self.position = position


def _tokenize(text):
    tokens = []
    pos = 0
    while pos < len(text):
        if text[pos].isspace():
            pos += 1
            continue
        match = _TOKEN_RE.match(text, pos)
        if match is None:
            raise NotationError(f"Unexpected character {text[pos]!r}", pos)
        if match.lastgroup == 'quoted':
            body = match.group('quoted')[1:-1]
            tokens.append(_Token('name', re.sub(r'\\(.)', r'\1', body), pos))
        elif match.lastgroup == 'word':
            tokens.append(_Token('name', match.group('word'), pos))
        else:
            tokens.append(_Token(match.group('punct'), match.group('punct'), pos))
        pos = match.end()
    return tokens


class _Parser:
    def __init__(self, text):
        self.text = text
        self.tokens = _tokenize(text)
        self.idx = 0

    def peek(self):
        if self.idx < len(self.tokens):
            return self.tokens[self.idx].kind
        return None

    def _fail(self, expected):
        if self.idx < len(self.tokens):
            token = self.tokens[self.idx]
            raise NotationError(f"Expected {expected}, found {token.value!r}", token.pos)
        raise NotationError(f"Expected {expected}, found end of input", len(self.text))

    def take(self, kind):
        if self.peek() != kind:
            self._fail(repr(kind))
        token = self.tokens[self.idx]
        self.idx += 1
        return token

    def end(self):
        if self.peek() is not None:
            self._fail('end of input')

    def names(self, closing):
        """Comma separated names, up to (not including) `closing`."""
        names = []
        if self.peek() == closing:
            return names
        names.append(self.take('name').value)
        while self.peek() == ',':
            self.take(',')
            names.append(self.take('name').value)
        return names

    def timing(self, option):
        """Optional `; <option>=<value>` suffix, then end of input."""
        request = None
        if self.peek() == ';':
            self.take(';')
            key = self.take('name')
            if key.value != option:
                raise NotationError(f"Unknown option {key.value!r}, expected {option!r}", key.pos)
            self.take('=')
            value = self.take('name')
            request = _timing_value(value)
            # trailing comma after the option, as in `...; base_timestamp=NOW,`
            if self.peek() == ',':
                self.take(',')
        self.end()
        return request


def _timing_value(token):
    if token.value in (EPOCH, NOW):
        return token.value
    try:
        return datetime.fromisoformat(token.value)
    except ValueError:
        raise NotationError(f"Invalid timestamp {token.value!r}", token.pos) from None


def parse_event(text):
    """Parses `name[; timestamp=...]` into (activity, timing request)."""
    parser = _Parser(text)
    activity = parser.take('name').value
    return activity, parser.timing('timestamp')


def parse_trace(text):
    """Parses `a, b, ...[; base_timestamp=...]` into (activities, timing request)."""
    parser = _Parser(text)
    activities = parser.names(';') if parser.peek() is not None else []
    return activities, parser.timing('base_timestamp')


def parse_event_log(text):
    """Parses `[a, b], [c], ...[; base_timestamp=...]` into (traces, timing request)."""
    parser = _Parser(text)
    traces = []
    while parser.peek() == '[':
        parser.take('[')
        traces.append(parser.names(']'))
        parser.take(']')
        if parser.peek() != ',':
            break
        parser.take(',')
    return traces, parser.timing('base_timestamp')


def event(text):
    activity, timestamp = parse_event(text)
    return build_event(activity, timestamp=timestamp)


def trace(text='', case_ids=None):
    activities, base_timestamp = parse_trace(text)
    return build_trace(activities, base_timestamp=base_timestamp, case_ids=case_ids)


def event_log(text='', case_ids=None):
    traces, base_timestamp = parse_event_log(text)
    return build_event_log(traces, base_timestamp=base_timestamp, case_ids=case_ids)
