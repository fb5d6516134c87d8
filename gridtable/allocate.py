"""Distribution of horizontal space over table columns.

Every column starts at its minimum width. Whatever is left of the available
width is handed out to flexible columns in proportion to their weights, using
the largest-remainder method so that the integer shares always add up. Columns
that would grow past their maximum are clamped and the excess is handed out
again among the others.
"""

import logging
from fractions import Fraction

from gridtable.errors import InsufficientWidth


logger = logging.getLogger(__name__)


def apportion(amount: int, weights: list):
    if amount < 0:
        raise ValueError('Cannot apportion a negative amount')
    weights = [Fraction(w) for w in weights]
    total = sum(weights)
    if amount == 0 or total == 0:
        return [0] * len(weights)

    exact = [amount * w / total for w in weights]
    shares = [int(e) for e in exact]
    leftover = amount - sum(shares)
    # largest fractional part first, lower index wins ties
    by_remainder = sorted(range(len(exact)), key=lambda i: (shares[i] - exact[i], i))
    for i in by_remainder[:leftover]:
        shares[i] += 1
    return shares


def _can_grow(column, width: int):
    return column.flex_weight > 0 and (column.max_width is None or width < column.max_width)


def allocate(columns: list, total_width: int, overhead: int = 0):
    """Resolve a content width for each column.

    Returns the list of widths and the slack, the part of `total_width` that no
    column could absorb. Raises InsufficientWidth if the minimum widths plus
    `overhead` do not fit.
    """
    widths = [c.min_width for c in columns]
    required = sum(widths) + overhead
    if required > total_width:
        raise InsufficientWidth(required, total_width)

    remaining = total_width - required
    growing = [i for i, c in enumerate(columns) if _can_grow(c, widths[i])]
    while remaining > 0 and growing:
        shares = apportion(remaining, [columns[i].flex_weight for i in growing])
        remaining = 0
        clamped = []
        for i, share in zip(growing, shares):
            widths[i] += share
            max_width = columns[i].max_width
            if max_width is not None and widths[i] >= max_width:
                remaining += widths[i] - max_width
                widths[i] = max_width
                clamped.append(i)
        if remaining:
            logger.debug('Clamped columns %s, redistributing %d', clamped, remaining)
        growing = [i for i in growing if i not in clamped]

    return widths, remaining
