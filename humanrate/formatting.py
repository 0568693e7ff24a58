"""Rendering of bandwidth values as human-readable decimal strings."""

from dataclasses import dataclass

from humanrate.bandwidth import Bandwidth

_UNITS = ("bps", "kbps", "Mbps", "Gbps", "Tbps")


def _split(val):
    """Split a bandwidth into its bps, kbps, Mbps, Gbps and Tbps parts, smallest first."""
    tbps, gbps = divmod(val.as_gbps(), 1_000)
    bps = val.subgbps_bps()
    mbps, rest = divmod(bps, 1_000_000)
    kbps, bps = divmod(rest, 1_000)
    return [bps, kbps, mbps, gbps, tbps]


@dataclass(frozen=True)
class FormattedBandwidth:
    """A bandwidth that renders as text with decimal prefixes."""

    bandwidth: Bandwidth

    def fmt_integer(self):
        """Render every non-zero unit as a whole number, e.g. ``9Tbps 420Gbps``."""
        values = _split(self.bandwidth)
        if not any(values):
            return "0bps"
        return " ".join(
            f"{value}{unit}"
            for value, unit in zip(reversed(values), reversed(_UNITS))
            if value > 0
        )

    def fmt_decimal(self):
        """Render with the largest non-zero unit as a decimal, e.g. ``9.42Tbps``."""
        values = _split(self.bandwidth)
        if not any(values):
            return "0bps"
        index = max(i for i, value in enumerate(values) if value > 0)
        parts = [str(values[index])]
        zeros = 0
        dot = True
        for value in reversed(values[:index]):
            if value == 0:
                zeros += 3
                continue
            if dot:
                parts.append(".")
                dot = False
            if zeros:
                parts.append("0" * zeros)
                zeros = 0
            if value % 10:
                parts.append(f"{value:03}")
            elif value % 100:
                parts.append(f"{value // 10:02}")
                zeros += 1
            else:
                parts.append(str(value // 100))
                zeros += 2
        parts.append(_UNITS[index])
        return "".join(parts)

    def __str__(self):
        return self.fmt_decimal()


def format_bandwidth(val):
    """Wrap ``val`` so that ``str()`` gives its human-readable form.

    Parsing the result with ``parse_bandwidth`` gives back the same value.
    """
    return FormattedBandwidth(val)