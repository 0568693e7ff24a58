# humanrate

Parse and format network bandwidth in a form people can read and write.

- Parse free-form strings such as `2Gbps 340Mbps` or `2.34Gbps`.
- Format a bandwidth as `150.024kbps`, or as whole parts such as `150kbps 24bps`.
- Work in binary prefixes, with bytes per second as the base unit: `1kiB/s` is `8.192kbps`.
- Turn bandwidths into strings and back, for configuration files and JSON.

The package has no dependencies beyond the standard library. It is a library
only: it installs no command-line tool.

## Installation

```
pip install humanrate
```

## The `Bandwidth` value

`humanrate.bandwidth.Bandwidth` is a frozen, ordered dataclass holding
`gbps` (whole gigabits per second) and `bps` (extra bits per second).
A `bps` of one gigabit or more is carried into `gbps`.

```python
from humanrate.bandwidth import Bandwidth

value = Bandwidth(1, 1_500_000_000)
assert value == Bandwidth(2, 500_000_000)
assert value.as_bps() == 2_500_000_000
assert value.as_gbps() == 2
assert value.subgbps_bps() == 500_000_000
assert Bandwidth.from_kbps(1) + Bandwidth.from_bps(24) == Bandwidth(0, 1024)
```

Constructors: `from_bps`, `from_kbps`, `from_mbps`, `from_gbps`.
Non-integer fields raise `TypeError`, negative ones `ValueError`, and more
than 2**64 − 1 whole gigabits raises `NumberOverflowError`.

## Parsing

```python
from humanrate.parser import parse_bandwidth
from humanrate.bandwidth import Bandwidth

assert parse_bandwidth("9Tbps 420Gbps") == Bandwidth(9420, 0)
assert parse_bandwidth("32Mbps") == Bandwidth.from_mbps(32)
assert parse_bandwidth("150.024kbps") == Bandwidth.from_bps(150_024)
# Any fraction below 1bps is dropped
assert parse_bandwidth("150.02456kbps") == Bandwidth.from_bps(150_024)
```

A bandwidth string is one or more spans, each a number followed by a unit;
the spans are added together. These units are accepted:

| Unit               | Spellings                                              |
|--------------------|--------------------------------------------------------|
| bit per second     | `bps`, `bit/s`, `b/s`                                  |
| kilobit per second | `kbps`, `Kbps`, `kbit/s`, `Kbit/s`, `kb/s`, `Kb/s`     |
| megabit per second | `Mbps`, `mbps`, `Mbit/s`, `mbit/s`, `Mb/s`, `mb/s`     |
| gigabit per second | `Gbps`, `gbps`, `Gbit/s`, `gbit/s`, `Gb/s`, `gb/s`     |
| terabit per second | `Tbps`, `tbps`, `Tbit/s`, `tbit/s`, `Tb/s`, `tb/s`     |

Underscores and whitespace are allowed inside numbers. Only the first 12
fractional digits are used.

## Formatting

```python
from humanrate.formatting import format_bandwidth
from humanrate.bandwidth import Bandwidth

value = format_bandwidth(Bandwidth(9420, 0))
assert str(value) == "9.42Tbps"
assert value.fmt_decimal() == "9.42Tbps"
assert value.fmt_integer() == "9Tbps 420Gbps"
```

`str()` gives the decimal form, using the largest non-zero unit. Text
produced this way parses back to the same value with `parse_bandwidth`.

## Binary prefixes

`humanrate.binary_parser.parse_binary_bandwidth` and
`humanrate.binary_formatting.format_binary_bandwidth` work with bytes per
second and prefixes that are powers of 1024.

```python
from humanrate.binary_parser import parse_binary_bandwidth
from humanrate.binary_formatting import format_binary_bandwidth
from humanrate.bandwidth import Bandwidth

assert parse_binary_bandwidth("4MiBps") == Bandwidth.from_bps(4 * 8 * 1024 * 1024)

value = format_binary_bandwidth(Bandwidth.from_bps(8 * 1024 + 2048))
assert str(value) == "1.25kiB/s"
assert f"{value:.1}" == "1.2kiB/s"
assert value.fmt_decimal(1) == "1.2kiB/s"
assert value.fmt_integer() == "1kiB/s 256B/s"
```

Accepted units are `Bps`, `Byte/s`, `B/s`, `ops`, `o/s` and their `ki`/`Ki`,
`Mi`/`mi`, `Gi`/`gi` and `Ti`/`ti` prefixed forms (for example `KiB/s`,
`miops`, `GiByte/s`).

- When parsing, a fraction of a byte per second is rounded to the nearest
  byte, ties away from zero.
- When formatting, bits are rounded to the nearest whole byte per second.
  A precision, given to `fmt_decimal` or as a `.N` format spec, rounds the
  fraction half to even. Any other format spec raises `ValueError`.
- Because of this rounding, formatted text does not always parse back to
  exactly the same value.

## Serialization

`humanrate.serialization` turns bandwidths into strings and back, for JSON,
YAML or any format whose values are strings or null.

```python
import json
from humanrate import serialization

data = json.loads('{"bandwidth": "1kbps"}')
value = serialization.deserialize(data["bandwidth"])
assert json.dumps({"bandwidth": serialization.serialize(value)}) == '{"bandwidth": "1kbps"}'

assert serialization.deserialize_optional(None) is None
assert serialization.serialize_optional(None) is None
```

`serialize` raises `TypeError` for anything but a `Bandwidth`. `deserialize`
raises `TypeError` for anything but a string and `ValueError` for a string
that does not parse.

`humanrate.binary_serialization` offers the same four functions for
binary-prefix strings: it writes values such as `15MiB/s` and reads any unit
that `parse_binary_bandwidth` accepts.

## Errors

Parse failures raise subclasses of `humanrate.errors.BandwidthError`, which
is itself a `ValueError`:

- `InvalidCharacterError` — has `offset`
- `NumberExpectedError` — has `offset`
- `UnknownUnitError` — has `start`, `end`, `unit` and `value`
- `UnknownBinaryUnitError` — has `start`, `end`, `unit` and `value`
- `NumberOverflowError` — also an `OverflowError`
- `EmptyError` — the string was empty or only whitespace

```python
from humanrate.errors import UnknownUnitError
from humanrate.parser import parse_bandwidth

try:
    parse_bandwidth("123")
except UnknownUnitError as exc:
    print(exc)  # bandwidth unit needed, for example 123Mbps or 123bps
```