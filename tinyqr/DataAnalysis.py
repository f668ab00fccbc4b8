"""
Title: tinyqr
Code version: 1.0

Adapted from: Project Nayuki (MIT License)
https://www.nayuki.io/page/qr-code-generator-library
"""

import logging

from tinyqr.params import BYTE_MODE_INDICATOR, get_max_input_length

logger = logging.getLogger(__name__)


class DataAnalysis(object):
    """ Convert the text input into a byte mode segment (header + payload) """

    @staticmethod
    def pack(text, version):
        """
        Returns the segment for the given text as a list of bytes:
            - 4 bit mode indicator (byte mode)
            - 8 bit character count
            - the payload, shifted by one nibble
        Text longer than the version capacity is truncated without notice.
        """
        DataAnalysis._validate_input(text)
        payload = DataAnalysis.encode_string(text,
                                             get_max_input_length(version))
        return DataAnalysis.add_informations(payload)

    @staticmethod
    def _validate_input(text):
        """ validate input format """
        if not isinstance(text, str):
            raise TypeError("Text string expected")

    @staticmethod
    def encode_string(text, max_length):
        """
        Returns the ISO-8859-1 code points of text, truncated to max_length.
        Characters outside of ISO-8859-1 are replaced by '?'.
        """
        data = list(text.encode("ISO-8859-1", errors="replace"))
        if len(data) > max_length:
            logger.debug("Truncating %d bytes of input to %d",
                         len(data), max_length)
            data = data[:max_length]
        return data

    @staticmethod
    def add_informations(payload):
        """
        Prepend the 12 bit header to the payload. The header takes a byte
        and a half, so every payload byte is split across two output bytes.
        """
        length = len(payload)
        if length >> 8 != 0:
            raise ValueError("Payload too long for an 8 bit count")
        result = [BYTE_MODE_INDICATOR << 4 | length >> 4]
        # the low nibble of the count is followed by the first payload nibble
        previous = length
        for b in payload:
            result.append((previous << 4 | b >> 4) & 0xFF)
            previous = b
        # last nibble, zero filled
        result.append((previous << 4) & 0xFF)
        assert len(result) == length + 2
        return result
