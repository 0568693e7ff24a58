"""A bandwidth value stored as whole gigabits plus leftover bits per second."""

from dataclasses import dataclass

from humanrate.errors import NumberOverflowError

U64_MAX = 2**64 - 1
BPS_PER_GBPS = 1_000_000_000


@dataclass(frozen=True, order=True)
class Bandwidth:
    """A non-negative bandwidth: ``gbps`` whole gigabits and ``bps`` extra bits per second.

    ``bps`` values of a gigabit or more are carried into ``gbps``.
    """

    gbps: int = 0
    bps: int = 0

    def __post_init__(self):
        for name in ("gbps", "bps"):
            value = getattr(self, name)
            if not isinstance(value, int):
                raise TypeError(f"{name} must be an integer, not {type(value).__name__}")
            if value < 0:
                raise ValueError(f"{name} must not be negative")
        carry, bps = divmod(self.bps, BPS_PER_GBPS)
        gbps = self.gbps + carry
        if gbps > U64_MAX:
            raise NumberOverflowError()
        object.__setattr__(self, "gbps", gbps)
        object.__setattr__(self, "bps", bps)

    @classmethod
    def from_bps(cls, bps):
        """Build a bandwidth from bits per second."""
        return cls(0, bps)

    @classmethod
    def from_kbps(cls, kbps):
        """Build a bandwidth from kilobits per second."""
        return cls(0, kbps * 1_000)

    @classmethod
    def from_mbps(cls, mbps):
        """Build a bandwidth from megabits per second."""
        return cls(0, mbps * 1_000_000)

    @classmethod
    def from_gbps(cls, gbps):
        """Build a bandwidth from gigabits per second."""
        return cls(gbps, 0)

    def as_bps(self):
        """Total bits per second."""
        return self.gbps * BPS_PER_GBPS + self.bps

    def as_gbps(self):
        """Whole gigabits per second."""
        return self.gbps

    def subgbps_bps(self):
        """Bits per second beyond the whole gigabits."""
        return self.bps

    def __add__(self, other):
        if not isinstance(other, Bandwidth):
            return NotImplemented
        return Bandwidth(self.gbps + other.gbps, self.bps + other.bps)