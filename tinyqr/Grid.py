"""
Title: tinyqr
Code version: 1.0

Adapted from: Project Nayuki (MIT License)
https://www.nayuki.io/page/qr-code-generator-library
"""

from tinyqr.params import get_matrix_size


class Grid(object):
    """
    The N x N module matrix of a symbol. A module is True (dark), False
    (light) or None while it is still unassigned. The painter and the placer
    mutate the same instance; it is never resized.
    """

    def __init__(self, version):
        self._version = version
        self._side_len = get_matrix_size(version)
        self._modules = [[None] * self._side_len for _ in
                         range(self._side_len)]
        # Indicates function modules that are not subjected to masking.
        self._isfunction = [[False] * self._side_len for _ in
                            range(self._side_len)]

    def get_version(self):
        return self._version

    def get_side_length(self):
        return self._side_len

    def get_module(self, x, y):
        return self._modules[y][x]

    def is_assigned(self, x, y):
        return self._modules[y][x] is not None

    def is_function(self, x, y):
        return self._isfunction[y][x]

    def set_function_module(self, x, y, isdark):
        """
        Sets the color of a module and marks it as a function module.
        Each function module is written exactly once.
        """
        assert type(isdark) is bool
        assert not self.is_assigned(x, y), \
            "Module ({}, {}) painted twice".format(x, y)
        self._modules[y][x] = isdark
        self._isfunction[y][x] = True

    def set_data_module(self, x, y, isdark):
        assert type(isdark) is bool
        assert not self.is_assigned(x, y)
        self._modules[y][x] = isdark

    def get_modules(self):
        """
        Returns the modules as a new boolean matrix, indexed [y][x].
        Unassigned modules read as light.
        """
        return [[cell is True for cell in row] for row in self._modules]
