"""Parsing of decimal bandwidth strings such as ``2Gbps 340Mbps`` or ``2.34Gbps``."""

import string
from dataclasses import dataclass

from humanrate.bandwidth import BPS_PER_GBPS, U64_MAX, Bandwidth
from humanrate.errors import (
    EmptyError,
    InvalidCharacterError,
    NumberExpectedError,
    NumberOverflowError,
    UnknownUnitError,
)

FRACTION_PART_LIMIT = 12

_DIGITS = frozenset(string.digits)
_UNIT_CHARS = frozenset(string.ascii_letters + "/")
# str.isspace() also accepts the ASCII information separators; they do not count here.
_NOT_WHITESPACE = frozenset("\x1c\x1d\x1e\x1f")

_DECIMAL_UNITS = {
    **dict.fromkeys(("bps", "bit/s", "b/s"), 0),
    **dict.fromkeys(("kbps", "Kbps", "kbit/s", "Kbit/s", "kb/s", "Kb/s"), 1),
    **dict.fromkeys(("Mbps", "mbps", "Mbit/s", "mbit/s", "Mb/s", "mb/s"), 2),
    **dict.fromkeys(("Gbps", "gbps", "Gbit/s", "gbit/s", "Gb/s", "gb/s"), 3),
    **dict.fromkeys(("Tbps", "tbps", "Tbit/s", "tbit/s", "Tb/s", "tb/s"), 4),
}


def _is_whitespace(char):
    return char.isspace() and char not in _NOT_WHITESPACE


def _checked(value):
    if value > U64_MAX:
        raise NumberOverflowError()
    return value


@dataclass(frozen=True)
class _Span:
    """One number followed by its unit, with the unit's position in the source."""

    value: int
    fraction: int
    fraction_digits: int
    start: int
    end: int
    unit: str


class _Scanner:
    def __init__(self, src):
        self.src = src
        self.pos = 0

    def _next(self):
        if self.pos >= len(self.src):
            return None
        char = self.src[self.pos]
        self.pos += 1
        return char

    def _first_digit(self):
        offset = self.pos
        while (char := self._next()) is not None:
            if char in _DIGITS:
                return int(char)
            if _is_whitespace(char):
                continue
            raise NumberExpectedError(offset)
        return None

    def _number(self, value):
        decimal = False
        fraction = 0
        fraction_digits = 0
        offset = self.pos
        while (char := self._next()) is not None:
            if char in _DIGITS:
                if decimal:
                    if fraction_digits >= FRACTION_PART_LIMIT:
                        continue
                    fraction = fraction * 10 + int(char)
                    fraction_digits += 1
                else:
                    value = _checked(value * 10 + int(char))
            elif _is_whitespace(char) or char == "_":
                pass
            elif char == ".":
                if decimal:
                    raise InvalidCharacterError(offset)
                decimal = True
            elif char in _UNIT_CHARS:
                break
            else:
                raise InvalidCharacterError(offset)
            offset = self.pos
        return value, fraction, fraction_digits, offset

    def _unit_end(self):
        offset = self.pos
        while (char := self._next()) is not None:
            if char in _DIGITS:
                return offset, int(char)
            if _is_whitespace(char):
                return offset, None
            if char not in _UNIT_CHARS:
                raise InvalidCharacterError(offset)
            offset = self.pos
        return offset, None

    def spans(self):
        digit = self._first_digit()
        if digit is None:
            raise EmptyError()
        while digit is not None:
            value, fraction, fraction_digits, start = self._number(digit)
            end, digit = self._unit_end()
            yield _Span(value, fraction, fraction_digits, start, end, self.src[start:end])
            if digit is None:
                digit = self._first_digit()


def _iter_spans(s):
    """Yield the spans of ``s`` lazily, so errors surface in source order."""
    return _Scanner(s).spans()


def _scale_fraction(fraction, fraction_digits, needed_digits):
    if needed_digits >= fraction_digits:
        return fraction * 10 ** (needed_digits - fraction_digits)
    return fraction // 10 ** (fraction_digits - needed_digits)


def _span_to_bandwidth(span):
    power = _DECIMAL_UNITS.get(span.unit)
    if power is None:
        raise UnknownUnitError(span.start, span.end, span.unit, span.value)
    n = span.value
    if power == 0:
        return Bandwidth(0, n)
    if power in (1, 2):
        digits = 3 * power
        bps = _checked(
            _checked(n * 10**digits)
            + _scale_fraction(span.fraction, span.fraction_digits, digits)
        )
        return Bandwidth(0, bps)
    if power == 3:
        return Bandwidth(n, _scale_fraction(span.fraction, span.fraction_digits, 9))
    bps = _scale_fraction(span.fraction, span.fraction_digits, 12)
    gbps = _checked(_checked(n * 1000) + bps // BPS_PER_GBPS)
    return Bandwidth(gbps, bps % BPS_PER_GBPS)


def parse_bandwidth(s):
    """Parse a bandwidth such as ``1Gbps 12Mbps 5bps`` or ``1.012000005Gbps``.

    Supported units are ``bps``/``bit/s``/``b/s`` and their ``k``, ``M``, ``G``
    and ``T`` prefixed forms. Fractions below one bit per second are dropped.
    """
    total = Bandwidth()
    for span in _iter_spans(s):
        total = total + _span_to_bandwidth(span)
    return total