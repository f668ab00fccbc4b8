"""
Title: tinyqr
Code version: 1.0

Adapted from: Project Nayuki (MIT License)
https://www.nayuki.io/page/qr-code-generator-library
"""

from itertools import chain

from tinyqr.params import (_MASK_PATTERNS,
                           _PENALTIES,
                           FINDER_LIKE_PATTERN,
                           FINDER_LIKE_PATTERN_REVERSED)


def is_masked(mask, x, y):
    """
    Returns True iff the data module at column x, row y is inverted by the
    given mask. Masks outside [0, 7] never invert anything.
    """
    if not (0 <= mask < len(_MASK_PATTERNS)):
        return False
    return _MASK_PATTERNS[mask](x, y) == 0


def apply_mask(mask, x, y, isdark):
    return isdark != is_masked(mask, x, y)


def get_penalty_score(modules):
    """
    Calculates and returns the penalty score of a finished matrix of
    booleans (True for dark), indexed [y][x].

    This is used by the automatic mask choice algorithm to find the mask
    pattern that yields the lowest score.

    The four penalty rules can be summarized as follows:
    -3 for a run of 5 same-colored modules in a row or column, +1 for each
        further module of the run
    -3 for each 2x2 area of same-colored modules in the matrix
    -40 for each pattern that looks similar to the finder patterns
    -10 for each 5% step the dark modules are away from half of the matrix
    """
    return penalty_runs(modules) + penalty_blocks(modules) + \
        penalty_finder_like(modules) + penalty_balance(modules)


def _lines(modules):
    """ Every row, then every column """
    return chain(modules, zip(*modules))


def penalty_runs(modules):
    """ Adjacent modules in row or column having same color """
    result = 0
    for line in _lines(modules):
        runcolor = None
        run = 0
        for cell in line:
            if cell == runcolor:
                run += 1
                if run == 5:
                    result += _PENALTIES[0]
                elif run > 5:
                    result += 1
            else:
                runcolor = cell
                run = 1
    return result


def penalty_blocks(modules):
    """ 2*2 blocks of modules having same color """
    result = 0
    for y in range(len(modules) - 1):
        for x in range(len(modules[y]) - 1):
            if modules[y][x] == modules[y][x + 1] == modules[y + 1][x] == \
                    modules[y + 1][x + 1]:
                result += _PENALTIES[0]
    return result


def penalty_finder_like(modules):
    """ Finder-like patterns in rows and columns, in both directions """
    count = 0
    for line in _lines(modules):
        for pattern in (FINDER_LIKE_PATTERN, FINDER_LIKE_PATTERN_REVERSED):
            count += _count_pattern(pattern, line)
    return count * _PENALTIES[2]


def _count_pattern(pattern, line):
    """
    Runs the matching automaton for pattern over a line bordered by one
    light module on each side, and returns the number of full matches.
    """
    matches = 0
    index = 0
    for cell in chain((False,), line, (False,)):
        index = _next_pattern_index(pattern, index, cell)
        if index == len(pattern):
            matches += 1
            index = 0
    return matches


def _next_pattern_index(pattern, index, cell):
    if cell == pattern[index]:
        return index + 1
    # four light modules were matched before the core; extra light ones
    # keep that prefix instead of restarting
    if not pattern[3] and index == 4:
        return index
    return 0


def penalty_balance(modules):
    """ Balance of dark and light modules """
    total = sum(len(row) for row in modules)
    dark = sum((1 if cell else 0) for row in modules for cell in row)
    percentage = dark * 100.0 / total
    # Count the 5% steps until the percentage turns negative
    steps = 0
    while percentage >= 0:
        percentage -= 5
        steps += 1
    if steps > 10:
        steps -= 1
    return abs(steps - 10) * _PENALTIES[1]
