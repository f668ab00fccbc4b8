"""
Title: tinyqr
Code version: 1.0

Adapted from: Project Nayuki (MIT License)
https://www.nayuki.io/page/qr-code-generator-library
"""

import logging
from concurrent.futures import ThreadPoolExecutor

from tinyqr.DataEncoding import DataEncoding
from tinyqr.DataPlacement import DataPlacement
from tinyqr.Masking import get_penalty_score
from tinyqr.params import _MASK_PATTERNS, get_matrix_size

logger = logging.getLogger(__name__)


class TinyQR(object):
    """
    QR Code generator restricted to versions 1 to 4, byte mode and error
    correction level L.

    Generalized into 3 main steps:
    1. Data Analysis
        - Convert the text to ISO-8859-1 bytes, truncated to the capacity of
          the version
        - Prepend the mode indicator and the character count
    2. Data Encoding
        - Pad with alternating bytes until the data capacity is reached
        - Use Reed Solomon to append the error correction codewords
        - Expand the codewords into a bit stream
    3. Data Placement
        - Draw the function patterns onto the squared area (size determined
          by the version)
        - Place the bits in zigzag order through a mask, either the given
          one or the one (0 to 7) that minimizes the penalty score

    The generate_qr_code() method returns a instance created by TinyQR. The
    get_qr_matrix_with_margins() method will return binary matrix with
    built-in border, that is ready for converting into a image
    """

    @staticmethod
    def generate_qr_code(text, version=1, mask=None, parallel=False):
        """
        Returns a QR Code representing the given Unicode text string.
        mask=None chooses the mask automatically; a mask outside [0, 7]
        leaves the data unmasked.
        """
        bits = DataEncoding.encode_data(text, version)
        if mask is None:
            mask, grid, penalty = TinyQR.choose_best_mask(version, bits,
                                                          parallel)
        else:
            grid, penalty = TinyQR._build_candidate(version, bits, mask)
        logger.info("Version %d symbol built with mask %d, penalty %d",
                    version, mask, penalty)
        return TinyQR(text, version, mask, grid.get_modules(), penalty)

    @staticmethod
    def choose_best_mask(version, bits, parallel=False):
        """
        Builds one grid per mask and returns (mask, grid, penalty) for the
        lowest penalty; ties go to the lowest mask number.
        """
        masks = range(len(_MASK_PATTERNS))
        if parallel:
            with ThreadPoolExecutor(max_workers=len(masks)) as executor:
                candidates = list(executor.map(
                    lambda m: TinyQR._build_candidate(version, bits, m),
                    masks))
        else:
            candidates = [TinyQR._build_candidate(version, bits, m)
                          for m in masks]

        best = None
        for (mask, (grid, penalty)) in zip(masks, candidates):
            logger.debug("Mask %d penalty %d", mask, penalty)
            if best is None or penalty < best[2]:
                best = (mask, grid, penalty)
        return best

    @staticmethod
    def _build_candidate(version, bits, mask):
        grid = DataPlacement.place_data(version, bits, mask)
        return grid, get_penalty_score(grid.get_modules())

    def __init__(self, text, version, mask, modules, penalty):
        self._input_string = text
        self._version = version
        self._mask = mask
        self._modules = modules
        self._penalty = penalty
        self._side_length = get_matrix_size(version)

    def info(self):
        print("\nInput text: {}".format(self.get_input_string()))
        print("QR code size: {} x {}".format(self.get_side_length(),
                                             self.get_side_length()))
        print("Version: {}".format(self.get_version()))
        print("Mask: {} (penalty {})\n".format(self.get_mask(),
                                               self.get_penalty()))

    def show_qr_in_terminal(self):
        """Prints the given QrCode object to the console."""
        side = self.get_side_length()
        border = side // 8
        for y in range(-border, side + border):
            for x in range(-border, side + border):
                print(u"\u2588 "[1 if self.get_pixel(x, y) else 0] * 2,
                      end="")
            print()
        print()

    def get_qr_matrix_with_margins(self):
        """ get the matrix with border set to 1/8 of total width of modules """
        side = self.get_side_length()
        border = side // 8
        matrix = [[1 if self.get_pixel(x, y) else 0
                   for x in range(-border, side + border)]
                  for y in range(-border, side + border)]
        return matrix

    def get_input_string(self):
        return self._input_string

    def get_version(self):
        return self._version

    def get_mask(self):
        return self._mask

    def get_penalty(self):
        return self._penalty

    def get_modules(self):
        return self._modules

    def get_side_length(self):
        return self._side_length

    def get_pixel(self, x, y):
        """
        Returns the color of the module (pixel) at the given coordinates,
        which is False for white or True for black. The top left corner has the
        coordinates (x=0, y=0). If the given coordinates are out of bounds,
        then False (white) is returned.
        """
        return (0 <= x < self._side_length) and \
               (0 <= y < self._side_length) and \
               (self._modules[y][x])
