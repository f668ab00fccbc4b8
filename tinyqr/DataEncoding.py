"""
Title: tinyqr
Code version: 1.0

Adapted from: Project Nayuki (MIT License)
https://www.nayuki.io/page/qr-code-generator-library
"""

from itertools import cycle as itercycle

from tinyqr import ErrorCorrection
from tinyqr.DataAnalysis import DataAnalysis
from tinyqr.params import (PAD_CODEWORDS,
                           get_data_codewords_length,
                           get_ecc_length)
from tinyqr.util import BitBuffer


class DataEncoding(object):
    """
    Encode the segment from DataAnalysis into the final bit stream for the
    given version

    Basic idea is to expand the data by adding error correction coding
    (redundent information) to ensure the integrity of the original data input
    """
    @staticmethod
    def encode_data(text, version):
        """ Returns the bit stream (data and ecc codewords) for the text """
        segment = DataAnalysis.pack(text, version)
        datacodewords = DataEncoding.pad(segment,
                                         get_data_codewords_length(version))
        allcodewords = DataEncoding.add_error_correction(
            datacodewords, get_ecc_length(version))
        bits = DataEncoding.to_bits(allcodewords)
        assert len(bits) == 8 * (get_data_codewords_length(version)
                                 + get_ecc_length(version))
        return bits

    @staticmethod
    def pad(codewords, target_length):
        """
        Pad with alternating bytes (236 and 17) until target_length is
        reached. Longer input is returned as is.
        """
        result = list(codewords)
        for padbyte in itercycle(PAD_CODEWORDS):
            if len(result) >= target_length:
                break
            result.append(padbyte)
        return result

    @staticmethod
    def add_error_correction(datacodewords, ecc_length):
        """ Returns the data codewords followed by their ecc codewords """
        return list(datacodewords) + ErrorCorrection.encode(datacodewords,
                                                            ecc_length)

    @staticmethod
    def to_bits(codewords):
        """ Expand each byte into 8 bits, most significant bit first """
        bb = BitBuffer()
        for b in codewords:
            bb.append_bits(b, 8)
        return bb
