"""
Title: tinyqr
Code version: 1.0

Adapted from: Project Nayuki (MIT License)
https://www.nayuki.io/page/qr-code-generator-library
"""

from tinyqr.exceptions import VersionOutOfRangeError

MIN_VERSION = 1
MAX_VERSION = 4

# Byte mode indicator (uint4) and the alternating pad codewords
BYTE_MODE_INDICATOR = 0b0100
PAD_CODEWORDS = (0xEC, 0x11)

# Per-version constants for error correction level L.
# version: (max input bytes, data codewords, ecc codewords, side length)
_VERSION_TABLE = {
    1: (17, 19, 7, 21),
    2: (32, 34, 10, 25),
    3: (53, 55, 15, 29),
    4: (78, 80, 20, 33),
}

# 15-bit format information for level L, indexed by mask, MSB first
_FORMAT_SEQUENCES = (
    "111011111000100",
    "111001011110011",
    "111110110101010",
    "111100010011101",
    "110011000101111",
    "110001100011000",
    "110110001000001",
    "110100101110110",
)
FORMAT_SEQUENCE_LENGTH = 15

# A module at column x, row y is inverted when the pattern returns 0
_MASK_PATTERNS = (
    (lambda x, y: (x + y) % 2),
    (lambda x, y: y % 2),
    (lambda x, y: x % 3),
    (lambda x, y: (x + y) % 3),
    (lambda x, y: (y // 2 + x // 3) % 2),
    (lambda x, y: x * y % 2 + x * y % 3),
    (lambda x, y: (x * y % 2 + x * y % 3) % 2),
    (lambda x, y: ((x + y) % 2 + x * y % 3) % 2),
)

# Penalty weights: runs and 2x2 blocks, balance step, finder-like pattern
_PENALTIES = (3, 10, 40)

# Finder-like sequence (light, light, light, light, dark, light, dark, dark,
# dark, light, dark) and its mirror, True for dark
FINDER_LIKE_PATTERN = (False, False, False, False,
                       True, False, True, True, True, False, True)
FINDER_LIKE_PATTERN_REVERSED = tuple(reversed(FINDER_LIKE_PATTERN))


def _get_version_row(version):
    if not (MIN_VERSION <= version <= MAX_VERSION):
        raise VersionOutOfRangeError(
            "Version {} out of range [{}, {}]".format(
                version, MIN_VERSION, MAX_VERSION))
    return _VERSION_TABLE[version]


def get_max_input_length(version):
    """ Number of payload bytes that fit in the given version """
    return _get_version_row(version)[0]


def get_data_codewords_length(version):
    return _get_version_row(version)[1]


def get_ecc_length(version):
    return _get_version_row(version)[2]


def get_matrix_size(version):
    """ Side length of the symbol, in modules """
    return _get_version_row(version)[3]


def get_format_sequence(mask):
    """
    Returns the 15 format bits for the given mask as booleans, most
    significant bit first. Masks outside [0, 7] select no masking and get
    an all-light sequence.
    """
    if not (0 <= mask < len(_FORMAT_SEQUENCES)):
        return (False,) * FORMAT_SEQUENCE_LENGTH
    return tuple(bit == "1" for bit in _FORMAT_SEQUENCES[mask])
