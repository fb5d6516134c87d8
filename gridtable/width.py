"""Display width of terminal text.

Widths are counted in terminal grid columns, not characters or bytes: East
Asian wide characters take two columns, combining marks take none.
"""

import unicodedata
from enum import IntEnum

import wcwidth

from gridtable.errors import InsufficientWidth


class Align(IntEnum):
    LEFT = 0
    CENTER = 1
    RIGHT = 2


def char_width(c: str):
    # wcwidth reports -1 for control characters, which occupy no cell
    return max(wcwidth.wcwidth(c), 0)


def display_width(text: str):
    return sum(char_width(c) for c in text)


def printable(text: str):
    """Flatten `text` to one line of printable characters.

    Line breaks become single spaces, tabs become three spaces and other
    control characters are dropped.
    """
    text = ' '.join(text.splitlines()).replace('\t', '   ')
    return ''.join(c for c in text if unicodedata.category(c) != 'Cc')


def truncate(text: str, width: int):
    """Longest prefix of `text` that fits into `width` columns.

    Never ends in the middle of a wide character; zero-width characters
    following the last kept character are kept with it.
    """
    used = 0
    end = 0
    for i, c in enumerate(text):
        w = char_width(c)
        if used + w > width:
            break
        used += w
        end = i + 1
    return text[:end], used


def pad(text: str, width: int, align: Align, used: int = None):
    if used is None:
        used = display_width(text)
    padding = width - used
    if padding <= 0:
        return text
    if align == Align.LEFT:
        return text + ' ' * padding
    elif align == Align.CENTER:
        left_pad = padding // 2
        return ' ' * left_pad + text + ' ' * (padding - left_pad)
    elif align == Align.RIGHT:
        return ' ' * padding + text
    raise ValueError('Unknown alignment {!r}'.format(align))


def fit_to_width(text: str, width: int, align: Align = Align.LEFT, ellipsis: str = ''):
    if width < 0:
        raise ValueError('Negative target width {}'.format(width))
    used = display_width(text)
    if used > width:
        marker = display_width(ellipsis)
        if ellipsis and marker <= width:
            text, used = truncate(text, width - marker)
            text += ellipsis
            used += marker
        else:
            text, used = truncate(text, width)
    return pad(text, width, align, used)


def justify_between(parts: list, width: int):
    widths = [display_width(p) for p in parts]
    if sum(widths) > width:
        raise InsufficientWidth(sum(widths), width)
    if not parts:
        return ' ' * width
    if len(parts) == 1:
        return pad(parts[0], width, Align.LEFT, widths[0])

    gaps = len(parts) - 1
    each, remainder = divmod(width - sum(widths), gaps)
    result = []
    for i, p in enumerate(parts[:-1]):
        result.append(p)
        result.append(' ' * (each + (1 if i < remainder else 0)))
    result.append(parts[-1])
    return ''.join(result)


def justify_around(parts: list, width: int):
    widths = [display_width(p) for p in parts]
    if sum(widths) > width:
        raise InsufficientWidth(sum(widths), width)
    if not parts:
        return ' ' * width
    if len(parts) == 1:
        return pad(parts[0], width, Align.CENTER, widths[0])

    gaps = len(parts) + 1
    each, remainder = divmod(width - sum(widths), gaps)
    result = []
    for i in range(gaps):
        result.append(' ' * (each + (1 if i < remainder else 0)))
        if i < len(parts):
            result.append(parts[i])
    return ''.join(result)
