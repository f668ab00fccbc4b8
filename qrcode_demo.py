"""
Title: tinyqr
Code version: 1.0

Adapted from: Project Nayuki (MIT License)
https://www.nayuki.io/page/qr-code-generator-library
"""

import logging

from tinyqr.TinyQR import TinyQR
from tinyqr.util import makeImg

INPUT = "hueygaidshfbaklh"

# Parameters
VERSION = 2
MASK = None  # None picks the mask with the lowest penalty, -1 disables masking
SCALING = 20


def main():
    logging.basicConfig(level=logging.INFO)
    demo()


def demo():
    """ Creates a QR Code in the form of matrix, then convert it to image """
    # get the qr instance
    qr = TinyQR.generate_qr_code(INPUT, VERSION, MASK)
    # Show version, mask and size
    qr.info()
    # convert to image "jpg" format
    path = makeImg(qr, INPUT, SCALING)
    logging.getLogger(__name__).info("Saved %s", path)
    # print to terminal
    qr.show_qr_in_terminal()


if __name__ == "__main__":
    main()
