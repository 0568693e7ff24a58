"""Rendering of bandwidth values with binary prefixes, such as ``4MiB/s``.

The base unit is the byte (octet) per second and each prefix is a power of
1024. Values are rounded to the nearest whole byte per second.
"""

import re
from dataclasses import dataclass

from humanrate.bandwidth import Bandwidth

_UNITS = ("B/s", "kiB/s", "MiB/s", "GiB/s", "TiB/s")
_ZERO = "0B/s"
_PRECISION_SPEC = re.compile(r"\.(\d+)")


def _split(val):
    """Split a bandwidth into bytes, KiB, MiB, GiB and TiB per second, smallest first.

    The total is converted from bits to bytes, rounded to the nearest byte.
    """
    total = (val.as_gbps() * 1_000_000_000 + val.subgbps_bps() + 4) // 8
    parts = []
    for _ in range(len(_UNITS) - 1):
        total, part = divmod(total, 1024)
        parts.append(part)
    parts.append(total)
    return parts


def _round_to_precision(remainder, digits, precision):
    """Drop trailing digits of ``remainder`` until ``digits`` equals ``precision``.

    Rounds to nearest with ties to even, taking into account the direction
    in which earlier dropped digits already moved the value.
    """
    direction = 0
    while precision < digits:
        remainder, loss = divmod(remainder, 10)
        if loss == 0:
            pass
        elif loss < 5:
            direction = -1
        elif loss == 5:
            if direction == 0:
                if remainder % 2 == 1:
                    remainder += 1
                    direction = 1
                else:
                    direction = -1
            elif direction == -1:
                remainder += 1
                direction = 1
            else:
                direction = -1
        else:
            remainder += 1
            direction = 1
        digits -= 1
    return remainder, digits


@dataclass(frozen=True)
class FormattedBinaryBandwidth:
    """A bandwidth that renders as text with binary prefixes.

    Parsing the text back may not give exactly the same value, since the
    conversion between binary and decimal units rounds.
    """

    bandwidth: Bandwidth

    def fmt_integer(self):
        """Render every non-zero unit as a whole number, e.g. ``9TiB/s 420GiB/s``."""
        values = _split(self.bandwidth)
        if not any(values):
            return _ZERO
        return " ".join(
            f"{value}{unit}"
            for value, unit in zip(reversed(values), reversed(_UNITS))
            if value > 0
        )

    def fmt_decimal(self, precision=None):
        """Render with the largest non-zero unit as a decimal, e.g. ``9.5TiB/s``.

        Without ``precision`` the shortest exact form is used; with it the
        fraction is rounded (ties to even) to at most that many digits.
        """
        if precision is not None and precision < 0:
            raise ValueError("precision must not be negative")
        if self.bandwidth.as_gbps() == 0 and self.bandwidth.subgbps_bps() == 0:
            return _ZERO
        values = _split(self.bandwidth)
        nonzero = [i for i, value in enumerate(values) if value > 0]
        index = max(nonzero) if nonzero else 0
        value = values[index]

        remainder = 0
        for part in reversed(values[:index]):
            remainder = remainder * 1024 + part
        digits = index * 3
        remainder *= 1000**index
        shift = index * 10
        rounding = 1 << (shift - 1) if index else 0
        loss = remainder % (1 << shift)
        remainder = (remainder + rounding) >> shift
        if loss == rounding and remainder % 2 == 1:
            remainder -= 1

        if precision is not None:
            remainder, digits = _round_to_precision(remainder, digits, precision)
            if precision == 0 and remainder > 0:
                value += remainder
                remainder = 0
        elif remainder:
            while remainder % 10 == 0:
                remainder //= 10
                digits -= 1
        else:
            digits = 0

        text = str(value)
        if digits or remainder:
            text += "." + str(remainder).zfill(digits)
        return text + _UNITS[index]

    def __str__(self):
        return self.fmt_decimal()

    def __format__(self, format_spec):
        if not format_spec:
            return str(self)
        match = _PRECISION_SPEC.fullmatch(format_spec)
        if match is None:
            raise ValueError(f"invalid format specifier {format_spec!r}")
        return self.fmt_decimal(int(match.group(1)))


def format_binary_bandwidth(val):
    """Wrap ``val`` so that ``str()`` gives its binary-prefix form."""
    return FormattedBinaryBandwidth(val)