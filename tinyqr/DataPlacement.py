"""
Title: tinyqr
Code version: 1.0

Adapted from: Project Nayuki (MIT License)
https://www.nayuki.io/page/qr-code-generator-library
"""

from tinyqr.FunctionPatterns import FunctionPatterns
from tinyqr.Masking import apply_mask


class DataPlacement(object):
    """
    Data bit (module) placement in the N x N matrix, masking each bit on
    the way
    """
    @staticmethod
    def place_data(version, bits, mask):
        """ Returns the grid of the symbol for the given bits and mask """
        grid = FunctionPatterns.paint(version, mask)
        DataPlacement.place(grid, bits, mask)
        return grid

    @staticmethod
    def data_coordinates(grid):
        """
        Yields the (x, y) coordinates of the unassigned modules in the
        zigzag scan order: 2 module wide strips from right to left, the
        vertical timing column skipped, alternating upward and downward.
        """
        size = grid.get_side_length()
        # Index of right column in each column pair
        for right in range(size - 1, 0, -2):
            if right <= 6:
                right -= 1
            upward = (right + 1) & 2 == 0
            for vert in range(size):  # Vertical counter
                y = (size - 1 - vert) if upward else vert
                for j in range(2):
                    x = right - j  # Actual x coordinate
                    if not grid.is_assigned(x, y):
                        yield x, y

    @staticmethod
    def place(grid, bits, mask):
        """
        Draws the bit stream onto every unassigned module of the grid, in
        place. Modules left over once the bits run out get a light bit; every
        bit goes through the mask.
        """
        coordinates = list(DataPlacement.data_coordinates(grid))
        assert len(bits) <= len(coordinates), "Bit stream too long"
        for (i, (x, y)) in enumerate(coordinates):
            bit = i < len(bits) and bits[i] == 1
            grid.set_data_module(x, y, apply_mask(mask, x, y, bit))
