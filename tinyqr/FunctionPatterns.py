"""
Title: tinyqr
Code version: 1.0

Adapted from: Project Nayuki (MIT License)
https://www.nayuki.io/page/qr-code-generator-library
"""

from tinyqr.Grid import Grid
from tinyqr.params import FORMAT_SEQUENCE_LENGTH, get_format_sequence


class FunctionPatterns(object):
    """
    Draws the function modules of a symbol: finder patterns with their
    separators, the alignment pattern, timing patterns, the dark module and
    the format information. Data modules are left unassigned.
    """
    @staticmethod
    def paint(version, mask):
        """ Returns a new grid with every function module painted """
        grid = Grid(version)
        FunctionPatterns._draw_finder_patterns(grid)
        FunctionPatterns._draw_alignment_pattern(grid)
        FunctionPatterns._draw_timing_patterns(grid)
        FunctionPatterns._draw_dark_module(grid)
        FunctionPatterns._draw_format_bits(grid, mask)
        return grid

    @staticmethod
    def _draw_finder_patterns(grid):
        """ Draw the 3 finder patterns (all corners except bottom right) """
        size = grid.get_side_length()
        for (x, y) in ((3, 3), (size - 4, 3), (3, size - 4)):
            FunctionPatterns._draw_finder_pattern(grid, x, y)

    @staticmethod
    def _draw_finder_pattern(grid, x, y):
        """
        Draws a 9*9 finder pattern including the border separator,
        with the center module at (x, y). Modules can be out of bounds.
        """
        size = grid.get_side_length()
        for dy in range(-4, 5):
            for dx in range(-4, 5):
                xx, yy = x + dx, y + dy
                if (0 <= xx < size) and (0 <= yy < size):
                    # Chebyshev/infinity norm
                    grid.set_function_module(
                        xx, yy, max(abs(dx), abs(dy)) not in (2, 4))

    @staticmethod
    def _draw_alignment_pattern(grid):
        """
        Draws the single 5*5 alignment pattern of versions 2 to 4, centered at
        (size - 7, size - 7). Version 1 has none.
        """
        if grid.get_version() == 1:
            return
        center = grid.get_side_length() - 7
        for dy in range(-2, 3):
            for dx in range(-2, 3):
                grid.set_function_module(
                    center + dx, center + dy, max(abs(dx), abs(dy)) != 1)

    @staticmethod
    def _draw_timing_patterns(grid):
        """ Alternating modules on row 6 and column 6 between the finders """
        size = grid.get_side_length()
        for i in range(8, size - 8):
            grid.set_function_module(i, 6, i % 2 == 0)
            grid.set_function_module(6, i, i % 2 == 0)

    @staticmethod
    def _draw_dark_module(grid):
        grid.set_function_module(8, grid.get_side_length() - 8, True)

    @staticmethod
    def _draw_format_bits(grid, mask):
        """
        Draws 2 copies of the 15 format bits, most significant bit first.
        Bit i goes once on column 8 and once on row 8:
            - bits 0-6: column 8 from the bottom up, row 8 from the left
            - bits 7-14: column 8 up to the top, row 8 on the right side
        """
        size = grid.get_side_length()
        bits = get_format_sequence(mask)
        xoffset, yoffset = 0, 0
        for i in range(FORMAT_SEQUENCE_LENGTH):
            if i == 6:
                xoffset = 1  # step over the timing column
            elif i == 7:
                yoffset = 16 - size
                xoffset = size - 15
            elif i == 9:
                yoffset -= 1  # step over the timing row
            grid.set_function_module(8, size - 1 - i + yoffset, bits[i])
            grid.set_function_module(i + xoffset, 8, bits[i])
