"""Parsing of bandwidth strings written with binary prefixes, such as ``1GiBps 12MiBps``.

The base unit is the byte (octet) per second and each prefix is a power of
1024. The parsed value is converted to bits per second.
"""

from humanrate.bandwidth import BPS_PER_GBPS, U64_MAX, Bandwidth
from humanrate.errors import NumberOverflowError, UnknownBinaryUnitError
from humanrate.parser import _iter_spans

_BITS_PER_BYTE = 8

_BINARY_UNITS = {
    **dict.fromkeys(("Bps", "Byte/s", "B/s", "ops", "o/s"), 0),
    **dict.fromkeys(
        (
            "kiBps", "KiBps", "kiByte/s", "KiByte/s", "kiB/s",
            "KiB/s", "kiops", "Kiops", "kio/s", "Kio/s",
        ),
        1,
    ),
    **dict.fromkeys(
        (
            "MiBps", "miBps", "MiByte/s", "miByte/s", "MiB/s",
            "miB/s", "Miops", "miops", "Mio/s", "mio/s",
        ),
        2,
    ),
    **dict.fromkeys(
        (
            "GiBps", "giBps", "GiByte/s", "giByte/s", "GiB/s",
            "giB/s", "Giops", "giops", "Gio/s", "gio/s",
        ),
        3,
    ),
    **dict.fromkeys(
        (
            "TiBps", "tiBps", "TiByte/s", "tiByte/s", "TiB/s",
            "tiB/s", "Tiops", "tiops", "Tio/s", "tio/s",
        ),
        4,
    ),
}


def _round_fraction(fraction, fraction_digits, power):
    """Bytes per second held by a fractional part, rounded to nearest with ties up."""
    scale = 10**fraction_digits
    return ((fraction << (10 * power)) + (scale >> 1)) // scale


def _span_to_bandwidth(span):
    power = _BINARY_UNITS.get(span.unit)
    if power is None:
        raise UnknownBinaryUnitError(span.start, span.end, span.unit, span.value)
    bytes_per_second = (span.value << (10 * power)) + _round_fraction(
        span.fraction, span.fraction_digits, power
    )
    gbps, bps = divmod(bytes_per_second * _BITS_PER_BYTE, BPS_PER_GBPS)
    if gbps > U64_MAX:
        raise NumberOverflowError()
    return Bandwidth(gbps, bps)


def parse_binary_bandwidth(s):
    """Parse a bandwidth such as ``1GiBps 12MiBps 5Bps`` or ``1.012000005GiBps``.

    Supported units are ``Bps``/``Byte/s``/``B/s``/``ops``/``o/s`` and their
    ``ki``, ``Mi``, ``Gi`` and ``Ti`` prefixed forms. Fractions below one byte
    per second are rounded to the nearest byte, ties away from zero.
    """
    total = Bandwidth()
    for span in _iter_spans(s):
        total = total + _span_to_bandwidth(span)
    return total