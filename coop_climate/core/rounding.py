"""
Coop Climate — Rounding
Half-up rounding for reported figures.
"""

import math


def round_half_up(value: float, decimals: int = 0) -> float:
    """
    Round to the given number of decimals, ties toward +infinity.

    round() would give 22.2 for 22.25; reported figures read 22.3.
    """
    factor = 10 ** decimals
    return math.floor(value * factor + 0.5) / factor
