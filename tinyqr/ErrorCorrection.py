"""
Title: tinyqr
Code version: 1.0

Adapted from: Project Nayuki (MIT License)
https://www.nayuki.io/page/qr-code-generator-library
"""

from tinyqr.exceptions import UnsupportedEccLengthError
from tinyqr.params import MAX_VERSION, MIN_VERSION, get_ecc_length

# GF(2^8/0x11D), with generator element r = 0x02
PRIMITIVE_POLYNOMIAL = 0x11D
FIELD_SIZE = 256

# Antilog table is doubled so that exp[log a + log b] needs no modulo
_GF_EXP = [0] * (2 * FIELD_SIZE)
_GF_LOG = [0] * FIELD_SIZE


def _init_tables():
    x = 1
    for i in range(FIELD_SIZE - 1):
        _GF_EXP[i] = x
        _GF_LOG[x] = i
        x <<= 1
        if x & FIELD_SIZE:
            x ^= PRIMITIVE_POLYNOMIAL
    for i in range(FIELD_SIZE - 1, len(_GF_EXP)):
        _GF_EXP[i] = _GF_EXP[i - (FIELD_SIZE - 1)]


_init_tables()

# ECC lengths used by the supported versions
SUPPORTED_ECC_LENGTHS = frozenset(
    get_ecc_length(v) for v in range(MIN_VERSION, MAX_VERSION + 1))

_generators = {}


def gf_exp(i):
    """ Returns r^i """
    return _GF_EXP[i % (FIELD_SIZE - 1)]


def gf_log(a):
    """ Returns i such that r^i == a, for a != 0 """
    if a == 0:
        raise ValueError("log(0) is undefined")
    return _GF_LOG[a]


def gf_multiply(a, b):
    """ Return the product of the multiplication """
    if a == 0 or b == 0:
        return 0
    return _GF_EXP[_GF_LOG[a] + _GF_LOG[b]]


def generator_polynomial(ecc_length):
    """
    Returns the generator polynomial of the given degree, coefficients from
    highest to lowest power, leading 1 included:
        (x - r^0) * (x - r^1) * ... * (x - r^{degree-1})
    Only the degrees needed by the version table are available.
    """
    if ecc_length not in SUPPORTED_ECC_LENGTHS:
        raise UnsupportedEccLengthError(
            "No generator polynomial for {} ecc codewords".format(ecc_length))
    if ecc_length not in _generators:
        result = [1]
        for i in range(ecc_length):
            # Multiply the current product by (x + r^i); minus is plus here
            root = gf_exp(i)
            product = result + [0]
            for (j, coef) in enumerate(result):
                product[j + 1] ^= gf_multiply(coef, root)
            result = product
        _generators[ecc_length] = tuple(result)
    return list(_generators[ecc_length])


def encode(data, ecc_length):
    """
    Returns the ecc codewords for the given data codewords: the remainder of
    data(x) * x^ecc_length divided by the generator polynomial.
    """
    divisor = generator_polynomial(ecc_length)[1:]
    result = [0] * ecc_length
    for b in data:  # Polynomial division
        factor = b ^ result.pop(0)
        result.append(0)
        for (i, coef) in enumerate(divisor):
            result[i] ^= gf_multiply(coef, factor)
    return result
