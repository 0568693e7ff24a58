"""Conversion of bandwidth values to and from text with binary prefixes.

These helpers suit JSON, YAML or any format whose values are strings or null.
Values are written as, for example, ``15MiB/s`` and read back with any unit
that ``parse_binary_bandwidth`` accepts.
"""

from humanrate.bandwidth import Bandwidth
from humanrate.binary_formatting import format_binary_bandwidth
from humanrate.binary_parser import parse_binary_bandwidth
from humanrate.errors import BandwidthError

_EXPECTING = "a bandwidth"


def serialize(value):
    """Return the binary-prefix text of a bandwidth."""
    if not isinstance(value, Bandwidth):
        raise TypeError(f"expected a Bandwidth, not {type(value).__name__}")
    return str(format_binary_bandwidth(value))


def deserialize(value):
    """Parse the binary-prefix text of a bandwidth.

    Raises ``TypeError`` for anything that is not a string and ``ValueError``
    for a string that is not a valid binary bandwidth.
    """
    if not isinstance(value, str):
        raise TypeError(
            f"invalid type: {type(value).__name__}, expected {_EXPECTING}"
        )
    try:
        return parse_binary_bandwidth(value)
    except BandwidthError as exc:
        raise ValueError(
            f"invalid value: string {value!r}, expected {_EXPECTING}"
        ) from exc


def serialize_optional(value):
    """Like ``serialize``, but ``None`` stays ``None``."""
    return None if value is None else serialize(value)


def deserialize_optional(value):
    """Like ``deserialize``, but ``None`` stays ``None``."""
    return None if value is None else deserialize(value)