"""Conversion of bandwidth values to and from their human-readable text form.

These helpers suit JSON, YAML or any format whose values are strings or null.
"""

from humanrate.bandwidth import Bandwidth
from humanrate.errors import BandwidthError
from humanrate.formatting import format_bandwidth
from humanrate.parser import parse_bandwidth

_EXPECTING = "a bandwidth"


def serialize(value):
    """Return the human-readable text of a bandwidth."""
    if not isinstance(value, Bandwidth):
        raise TypeError(f"expected a Bandwidth, not {type(value).__name__}")
    return str(format_bandwidth(value))


def deserialize(value):
    """Parse the human-readable text of a bandwidth.

    Raises ``TypeError`` for anything that is not a string and ``ValueError``
    for a string that is not a valid bandwidth.
    """
    if not isinstance(value, str):
        raise TypeError(
            f"invalid type: {type(value).__name__}, expected {_EXPECTING}"
        )
    try:
        return parse_bandwidth(value)
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