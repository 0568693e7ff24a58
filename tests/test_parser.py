import pytest

from humanrate.bandwidth import Bandwidth
from humanrate.errors import (
    EmptyError,
    InvalidCharacterError,
    NumberExpectedError,
    NumberOverflowError,
    UnknownUnitError,
)
from humanrate.parser import parse_bandwidth


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1bps", Bandwidth(0, 1)),
        ("2bit/s", Bandwidth(0, 2)),
        ("15b/s", Bandwidth(0, 15)),
        ("51kbps", Bandwidth(0, 51_000)),
        ("79Kbps", Bandwidth(0, 79_000)),
        ("81kbit/s", Bandwidth(0, 81_000)),
        ("100Kbit/s", Bandwidth(0, 100_000)),
        ("150kb/s", Bandwidth(0, 150_000)),
        ("410Kb/s", Bandwidth(0, 410_000)),
        ("12Mbps", Bandwidth(0, 12_000_000)),
        ("16mbps", Bandwidth(0, 16_000_000)),
        ("24Mbit/s", Bandwidth(0, 24_000_000)),
        ("36mbit/s", Bandwidth(0, 36_000_000)),
        ("48Mb/s", Bandwidth(0, 48_000_000)),
        ("96mb/s", Bandwidth(0, 96_000_000)),
        ("2Gbps", Bandwidth(2, 0)),
        ("4gbps", Bandwidth(4, 0)),
        ("6Gbit/s", Bandwidth(6, 0)),
        ("8gbit/s", Bandwidth(8, 0)),
        ("16Gb/s", Bandwidth(16, 0)),
        ("40gb/s", Bandwidth(40, 0)),
        ("1Tbps", Bandwidth(1_000, 0)),
        ("2tbps", Bandwidth(2_000, 0)),
        ("4Tbit/s", Bandwidth(4_000, 0)),
        ("8tbit/s", Bandwidth(8_000, 0)),
        ("16Tb/s", Bandwidth(16_000, 0)),
        ("32tb/s", Bandwidth(32_000, 0)),
    ],
)
def test_units(text, expected):
    assert parse_bandwidth(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1.5bps", Bandwidth(0, 1)),
        ("2.5bit/s", Bandwidth(0, 2)),
        ("15.5b/s", Bandwidth(0, 15)),
        ("51.6kbps", Bandwidth(0, 51_600)),
        ("79.78Kbps", Bandwidth(0, 79_780)),
        ("81.923kbit/s", Bandwidth(0, 81_923)),
        ("100.1234Kbit/s", Bandwidth(0, 100_123)),
        ("150.12345kb/s", Bandwidth(0, 150_123)),
        ("410.123456Kb/s", Bandwidth(0, 410_123)),
        ("12.123Mbps", Bandwidth(0, 12_123_000)),
        ("16.1234mbps", Bandwidth(0, 16_123_400)),
        ("24.12345Mbit/s", Bandwidth(0, 24_123_450)),
        ("36.123456mbit/s", Bandwidth(0, 36_123_456)),
        ("48.123Mb/s", Bandwidth(0, 48_123_000)),
        ("96.1234mb/s", Bandwidth(0, 96_123_400)),
        ("2.123Gbps", Bandwidth(2, 123_000_000)),
        ("4.1234gbps", Bandwidth(4, 123_400_000)),
        ("6.12345Gbit/s", Bandwidth(6, 123_450_000)),
        ("8.123456gbit/s", Bandwidth(8, 123_456_000)),
        ("16.123456789Gb/s", Bandwidth(16, 123_456_789)),
        ("40.12345678912gb/s", Bandwidth(40, 123_456_789)),
        ("1.123Tbps", Bandwidth(1_123, 0)),
        ("2.1234tbps", Bandwidth(2_123, 400_000_000)),
        ("4.12345Tbit/s", Bandwidth(4_123, 450_000_000)),
        ("8.123456tbit/s", Bandwidth(8_123, 456_000_000)),
        ("16.123456789Tb/s", Bandwidth(16_123, 456_789_000)),
        ("32.12345678912tb/s", Bandwidth(32_123, 456_789_120)),
    ],
)
def test_decimal(text, expected):
    assert parse_bandwidth(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1bps 2bit/s 3b/s", Bandwidth(0, 6)),
        ("4kbps 5Kbps 6kbit/s", Bandwidth(0, 15_000)),
        ("7Mbps 8mbps 9Mbit/s", Bandwidth(0, 24_000_000)),
        ("10Gbps 11gbps 12Gbit/s", Bandwidth(33, 0)),
        ("13Tbps 14tbps 15Tbit/s", Bandwidth(42_000, 0)),
        ("10Gbps 5Mbps 1b/s", Bandwidth(10, 5_000_001)),
        ("36Mbps 12kbps 24bps", Bandwidth(0, 36_012_024)),
    ],
)
def test_combo(text, expected):
    assert parse_bandwidth(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("1.1bps 2.2bit/s 3.3b/s", Bandwidth(0, 6)),
        ("4.4kbps 5.5Kbps 6.6kbit/s", Bandwidth(0, 16_500)),
        ("7.7Mbps 8.8mbps 9.9Mbit/s", Bandwidth(0, 26_400_000)),
        ("10.10Gbps 11.11gbps 12.12Gbit/s", Bandwidth(33, 330_000_000)),
        ("13.13Tbps 14.14tbps 15.15Tbit/s", Bandwidth(42_420, 0)),
        ("10.1Gbps 5.2Mbps 1.3b/s", Bandwidth(10, 105_200_001)),
        ("36.1Mbps 12.2kbps 24.3bps", Bandwidth(0, 36_112_224)),
    ],
)
def test_decimal_combo(text, expected):
    assert parse_bandwidth(text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("9Tbps 420Gbps", Bandwidth(9420, 0)),
        ("32Mbps", Bandwidth(0, 32_000_000)),
        ("150.024kbps", Bandwidth(0, 150_024)),
        ("150.02456kbps", Bandwidth(0, 150_024)),
    ],
)
def test_documented_examples(text, expected):
    assert parse_bandwidth(text) == expected


def test_spans_without_separating_space():
    assert parse_bandwidth("10Gbps5Mbps") == parse_bandwidth("10Gbps 5Mbps")


def test_underscores_and_inner_spaces_ignored():
    assert parse_bandwidth("1_000 bps") == Bandwidth(0, 1000)


@pytest.mark.parametrize(
    "text",
    [
        "100000000000000000000bps",
        "100000000000000000kbps",
        "100000000000000Mbps",
        "100000000000000000000Gbps",
        "10000000000000000000Tbps",
    ],
)
def test_overflow(text):
    with pytest.raises(NumberOverflowError):
        parse_bandwidth(text)


def test_nice_error_message_missing_unit():
    with pytest.raises(UnknownUnitError) as info:
        parse_bandwidth("123")
    assert str(info.value) == "bandwidth unit needed, for example 123Mbps or 123bps"


def test_nice_error_message_missing_unit_in_second_span():
    with pytest.raises(UnknownUnitError) as info:
        parse_bandwidth("10 Gbps 1")
    assert str(info.value) == "bandwidth unit needed, for example 1Mbps or 1bps"


def test_nice_error_message_unknown_unit():
    with pytest.raises(UnknownUnitError) as info:
        parse_bandwidth("10 byte/s")
    assert str(info.value) == (
        'unknown bandwidth unit "byte/s", supported units: bps, kbps, Mbps, Gbps, Tbps'
    )
    assert (info.value.start, info.value.end, info.value.unit) == (3, 9, "byte/s")
    assert info.value.value == 10


@pytest.mark.parametrize("text", ["", "   ", "\t\n"])
def test_empty(text):
    with pytest.raises(EmptyError):
        parse_bandwidth(text)


def test_number_expected_at_start():
    with pytest.raises(NumberExpectedError) as info:
        parse_bandwidth("Gbps")
    assert info.value.offset == 0


def test_number_expected_after_span():
    with pytest.raises(NumberExpectedError) as info:
        parse_bandwidth("1Gbps x")
    assert info.value.offset == 6


def test_second_decimal_point_is_invalid():
    with pytest.raises(InvalidCharacterError) as info:
        parse_bandwidth("1.2.3bps")
    assert info.value.offset == 3


def test_invalid_character_in_number():
    with pytest.raises(InvalidCharacterError) as info:
        parse_bandwidth("1,5Gbps")
    assert info.value.offset == 1


def test_invalid_character_in_unit():
    with pytest.raises(InvalidCharacterError) as info:
        parse_bandwidth("10 Gb!ps")
    assert info.value.offset == 5


def test_unit_error_reported_before_later_invalid_character():
    with pytest.raises(UnknownUnitError):
        parse_bandwidth("1xyz 2,")