from enum import IntEnum

from gridtable.width import display_width


ASCII_STYLE = {
    'corner-top-left': '.',
    'corner-top-right': '.',
    'corner-bottom-left': "'",
    'corner-bottom-right': "'",
    'join-mid': '+',
    'join-top': '-',
    'join-bottom': '-',
    'join-left': '|',
    'join-right': '|',
    'inner-horizontal': '-',
    'inner-vertical': '|',
    'outer-horizontal': '-',
    'outer-vertical': '|',
}


BOX_STYLE = {
    'corner-top-left': '┌',
    'corner-top-right': '┐',
    'corner-bottom-left': '└',
    'corner-bottom-right': '┘',
    'join-mid': '┼',
    'join-top': '┬',
    'join-bottom': '┴',
    'join-left': '├',
    'join-right': '┤',
    'inner-horizontal': '─',
    'inner-vertical': '│',
    'outer-horizontal': '─',
    'outer-vertical': '│',
}


BLANK_STYLE = {key: ' ' for key in BOX_STYLE}


STYLES = {
    'ascii': ASCII_STYLE,
    'box': BOX_STYLE,
    'blank': BLANK_STYLE,
}


class Separator(IntEnum):
    NONE = 0
    COLUMNS = 1
    LINES = 2

    def __str__(self):
        return self.name.lower()

    @classmethod
    def from_str(cls, s: str):
        return cls[s.upper()]


def check_style(style: dict):
    for key in BOX_STYLE:
        if key not in style:
            raise ValueError('Border style lacks glyph "{}"'.format(key))
        if display_width(style[key]) != 1:
            raise ValueError('Border glyph "{}" for {} must be one column wide'.format(style[key], key))
    return style


def overhead(count: int, surround: bool, separator: Separator, style: dict):
    """Columns taken by border glyphs around and between `count` table columns."""
    width = 0
    if separator != Separator.NONE and count > 1:
        width += (count - 1) * display_width(style['inner-vertical'])
    if surround:
        width += 2 * display_width(style['outer-vertical'])
    return width


class BorderComposer:
    def __init__(self, style: dict = BOX_STYLE, surround: bool = False, separator: Separator = Separator.COLUMNS):
        self.style = check_style(style)
        self.surround = surround
        self.separator = separator

    def overhead(self, count: int):
        return overhead(count, self.surround, self.separator, self.style)

    def _line(self, parts: list, filler: str, left: str, inner: str, right: str):
        if filler:
            if parts:
                parts = parts[:-1] + [parts[-1] + filler]
            else:
                parts = [filler]
        line = (self.style[inner] if self.separator != Separator.NONE else '').join(parts)
        if self.surround:
            line = self.style[left] + line + self.style[right]
        return line

    def _rule(self, widths: list, slack: int, left: str, dash: str, inner: str, right: str):
        dash = self.style[dash]
        return self._line([w * dash for w in widths], slack * dash, left, inner, right)

    def top(self, widths: list, slack: int = 0):
        return self._rule(widths, slack, 'corner-top-left', 'outer-horizontal', 'join-top', 'corner-top-right')

    def bottom(self, widths: list, slack: int = 0):
        return self._rule(widths, slack, 'corner-bottom-left', 'outer-horizontal', 'join-bottom',
                          'corner-bottom-right')

    def rule(self, widths: list, slack: int = 0):
        return self._rule(widths, slack, 'join-left', 'inner-horizontal', 'join-mid', 'join-right')

    def row(self, cells: list, slack: int = 0):
        return self._line(cells, slack * ' ', 'outer-vertical', 'inner-vertical', 'outer-vertical')

    def compose(self, rows: list, widths: list, slack: int = 0, rules=()):
        """Assemble the final lines from rendered cells.

        `rows` holds the rendered cell strings of each row, `widths` the width of
        each of those cells. A rule line follows every position listed in
        `rules`, or every row when the separator is LINES, except the last row.
        """
        lines = []
        if self.surround:
            lines.append(self.top(widths, slack))
        for i, cells in enumerate(rows):
            if i > 0 and (self.separator == Separator.LINES or i - 1 in rules):
                lines.append(self.rule(widths, slack))
            lines.append(self.row(cells, slack))
        if self.surround:
            lines.append(self.bottom(widths, slack))
        return lines
