import pytest

from tinyqr.DataAnalysis import DataAnalysis
from tinyqr.exceptions import VersionOutOfRangeError


def test_pack_single_character():
    assert DataAnalysis.pack("A", 1) == [0x40, 0x14, 0x10]


def test_pack_two_characters():
    assert DataAnalysis.pack("AB", 1) == [0x40, 0x24, 0x14, 0x20]


def test_pack_empty_text():
    assert DataAnalysis.pack("", 1) == [0x40, 0x00]


@pytest.mark.parametrize("version, capacity", [(1, 17), (2, 32), (3, 53), (4, 78)])
def test_pack_truncates_silently(version, capacity):
    segment = DataAnalysis.pack("a" * 100, version)
    assert len(segment) == capacity + 2
    # count field holds the truncated length
    assert ((segment[0] & 0x0F) << 4 | segment[1] >> 4) == capacity


def test_pack_truncated_header():
    segment = DataAnalysis.pack("a" * 100, 1)
    assert segment[:2] == [0x41, 0x16]
    assert segment[-1] == 0x10


def test_pack_at_capacity_is_not_truncated():
    text = "0123456789abcdefg"
    assert len(DataAnalysis.pack(text, 1)) == len(text) + 2


def test_encode_string_latin1():
    assert DataAnalysis.encode_string("éA", 5) == [0xE9, 0x41]


def test_encode_string_replaces_unmappable_characters():
    assert DataAnalysis.encode_string("€", 5) == [ord("?")]


def test_encode_string_truncates():
    assert DataAnalysis.encode_string("abcdef", 3) == [0x61, 0x62, 0x63]


def test_add_informations_low_nibble_is_zero():
    packed = DataAnalysis.add_informations([0xFF, 0xFF])
    assert packed == [0x40, 0x2F, 0xFF, 0xF0]


def test_pack_rejects_non_text():
    with pytest.raises(TypeError):
        DataAnalysis.pack(b"bytes", 1)


@pytest.mark.parametrize("version", [0, 5])
def test_pack_rejects_unsupported_version(version):
    with pytest.raises(VersionOutOfRangeError):
        DataAnalysis.pack("A", version)
