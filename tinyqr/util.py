"""
Title: tinyqr
Code version: 1.0

Adapted from: Project Nayuki (MIT License)
https://www.nayuki.io/page/qr-code-generator-library
"""

import os
import glob
import re
from PIL import Image
import numpy as np


class BitBuffer(list):
    """An appendable sequence of bits (0s and 1s)."""

    def append_bits(self, k, n):
        """ Appends n number of low-order bits of k value to the buffer
        Requires n >= 0 and 0 <= val < 2^n."""
        if n < 0 or k >> n != 0:
            raise ValueError("Value out of range")
        self.extend(((k >> i) & 1) for i in reversed(range(n)))


def makeImg(qr: object, filename: str, scale: int = 10,
            directory: str = 'qr_img') -> str:
    """
    Convert the qr code into '*.jpg' format and save it under directory.
    Returns the path of the saved image.
    """
    mat = _magnify(qr.get_qr_matrix_with_margins(), scale)
    img = Image.fromarray((mat * 255).astype(np.uint8), 'L')
    return _saveImg(img, filename, directory)


def _magnify(qrmatrix, factor=10) -> np.ndarray:
    """ Enlarge the input QR matrix by factor """
    # invert the color by XOR with 1, dark modules become black pixels
    inverted = np.asarray(qrmatrix, dtype=np.uint8) ^ 1
    return np.kron(inverted, np.ones((factor, factor), dtype=np.uint8))


def _saveImg(img: object, raw: str, dir_name: str) -> str:
    """ Save the qr code image as *.jpg format under the given directory """
    # create the directory if not exist
    if not os.path.exists(dir_name):
        os.makedirs(dir_name)

    filename = os.path.join(dir_name, _makeFilename(raw))
    return _helperSaveImage(img, filename)


def _makeFilename(raw: str) -> str:
    """ make a file name based on the raw input text """
    # limit filename length, and get rid of illegal symbols for filename
    name_count = 8
    fname = ""
    FILENAME_REGEX = re.compile(r'[a-zA-Z0-9]')  # numbers and alphabets only
    for char in raw:
        if FILENAME_REGEX.match(char):
            name_count -= 1
            fname += char
            if name_count == 0:
                break
    if fname == "":
        fname = "untitled"
    return 'qr_{}'.format(fname)


def _helperSaveImage(img, filename) -> str:
    """ a helper function to save image with the given file name """
    # if the img file already exist, make a new filename with higher counter
    path = filename + '.jpg'
    if os.path.exists(path):
        count_file_same_prefix = 0
        for _ in glob.glob(glob.escape(filename) + "*.jpg"):
            count_file_same_prefix += 1
        path = '{} ({}).jpg'.format(filename, count_file_same_prefix + 1)
    img.save(path)
    return path
