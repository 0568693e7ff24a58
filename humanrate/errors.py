"""Exceptions raised while parsing human-readable bandwidth strings."""


class BandwidthError(ValueError):
    """Base class for every bandwidth parsing error."""


class InvalidCharacterError(BandwidthError):
    """A character that may not appear in a bandwidth string."""

    def __init__(self, offset):
        self.offset = offset
        super().__init__(f"invalid character at {offset}")


class NumberExpectedError(BandwidthError):
    """A non-numeric character was found where a number should start."""

    def __init__(self, offset):
        self.offset = offset
        super().__init__(f"expected number at {offset}")


class _UnitError(BandwidthError):
    _missing_template = ""
    _unknown_template = ""

    def __init__(self, start, end, unit, value):
        self.start = start
        self.end = end
        self.unit = unit
        self.value = value
        if unit:
            message = self._unknown_template.format(unit=_quote(unit))
        else:
            message = self._missing_template.format(value=value)
        super().__init__(message)


def _quote(text):
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


class UnknownUnitError(_UnitError):
    """The unit after a number is not a supported decimal bandwidth unit."""

    _missing_template = "bandwidth unit needed, for example {value}Mbps or {value}bps"
    _unknown_template = (
        "unknown bandwidth unit {unit}, supported units: bps, kbps, Mbps, Gbps, Tbps"
    )


class UnknownBinaryUnitError(_UnitError):
    """The unit after a number is not a supported binary bandwidth unit."""

    _missing_template = (
        "binary bandwidth unit needed, for example {value}MiB/s or {value}B/s"
    )
    _unknown_template = (
        "unknown binary bandwidth unit {unit}, "
        "supported units: B/s, kiB/s, MiB/s, GiB/s, TiB/s"
    )


class NumberOverflowError(BandwidthError, OverflowError):
    """The numeric value is too large to be represented."""

    def __init__(self):
        super().__init__("number is too large")


class EmptyError(BandwidthError):
    """The string was empty or held only whitespace."""

    def __init__(self):
        super().__init__("value was empty")