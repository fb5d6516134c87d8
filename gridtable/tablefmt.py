import logging
import math

from gridtable.allocate import allocate
from gridtable.border import BOX_STYLE, BorderComposer, Separator, check_style
from gridtable.errors import InsufficientWidth, RowShapeMismatch, ViewportOutOfRange
from gridtable.width import Align, fit_to_width, printable


logger = logging.getLogger(__name__)


def _check_padding(padding):
    left, right = padding
    if left < 0 or right < 0:
        raise ValueError('Padding must not be negative')
    return left, right


class ColumnSpec:
    def __init__(self, min_width: int = 0, max_width: int = None, flex_weight: float = 1,
                 align: Align = Align.LEFT, padding: tuple = None, priority: int = 0):
        if min_width < 0:
            raise ValueError('Minimum width must not be negative')
        if max_width is not None and max_width < min_width:
            raise ValueError('Maximum width {} is less than minimum width {}'.format(max_width, min_width))
        if not math.isfinite(flex_weight) or flex_weight < 0:
            raise ValueError('Flex weight must be a finite, non-negative number')
        self.min_width = min_width
        self.max_width = max_width
        self.flex_weight = flex_weight
        self.align = Align(align)
        self.padding = _check_padding(padding) if padding is not None else None
        self.priority = priority

    @classmethod
    def fixed(cls, width: int, align: Align = Align.LEFT, **kwargs):
        return cls(width, width, 0, align, **kwargs)

    def __repr__(self):
        return 'ColumnSpec({}, {}, {}, {})'.format(self.min_width, self.max_width, self.flex_weight,
                                                   self.align.name)


ColumnSpec.LEFT = ColumnSpec(align=Align.LEFT)
ColumnSpec.CENTER = ColumnSpec(align=Align.CENTER)
ColumnSpec.RIGHT = ColumnSpec(align=Align.RIGHT)


class Cell:
    def __init__(self, content: str, align: Align = None):
        self.content = content
        self.align = Align(align) if align is not None else None

    def __repr__(self):
        return 'Cell({!r}, {})'.format(self.content, self.align)


class Row:
    def __init__(self, cells: list, aligns: list = None):
        if aligns is None:
            aligns = [None] * len(cells)
        elif len(aligns) != len(cells):
            raise ValueError('Got {} alignments for {} cells'.format(len(aligns), len(cells)))
        self.cells = [c if isinstance(c, Cell) else Cell(str(c), a) for c, a in zip(cells, aligns)]

    def __len__(self):
        return len(self.cells)


class Viewport:
    """A window of rows and columns to render. A count of None extends to the end of the table."""

    def __init__(self, row_offset: int = 0, row_count: int = None, column_offset: int = 0,
                 column_count: int = None):
        if (row_count is not None and row_count < 0) or (column_count is not None and column_count < 0):
            raise ValueError('Viewport counts must not be negative')
        self.row_offset = row_offset
        self.row_count = row_count
        self.column_offset = column_offset
        self.column_count = column_count

    @staticmethod
    def _window(what: str, offset: int, count: int, extent: int):
        if offset < 0 or offset > extent:
            raise ViewportOutOfRange(what, offset, extent)
        end = extent if count is None else min(offset + count, extent)
        return range(offset, end)

    def rows(self, extent: int):
        return self._window('Row', self.row_offset, self.row_count, extent)

    def columns(self, extent: int):
        return self._window('Column', self.column_offset, self.column_count, extent)

    def __repr__(self):
        return 'Viewport({}, {}, {}, {})'.format(self.row_offset, self.row_count, self.column_offset,
                                                 self.column_count)


class Layout:
    """Resolved column widths for one render call.

    `widths` maps column index to the resolved width (content plus padding).
    Columns dropped to make room are listed in `collapsed` and have no width.
    """

    def __init__(self, widths: dict, slack: int, collapsed: list):
        self.widths = widths
        self.slack = slack
        self.collapsed = collapsed

    def __getitem__(self, column: int):
        return self.widths[column]

    def __contains__(self, column: int):
        return column in self.widths


def render_cell(cell: Cell, width: int, align: Align = Align.LEFT, padding_left: int = 0,
                padding_right: int = 0, ellipsis: str = ''):
    content_width = width - padding_left - padding_right
    if content_width < 0:
        raise InsufficientWidth(padding_left + padding_right, width)
    if cell.align is not None:
        align = cell.align
    text = printable(cell.content)
    return ' ' * padding_left + fit_to_width(text, content_width, align, ellipsis) + ' ' * padding_right


class Table:
    OPTIONS = ('padding', 'surround', 'separator', 'style', 'ellipsis', 'collapse')

    def __init__(self, columns: list = None, **options):
        self.columns = list(columns) if columns is not None else []
        self.rows = []
        self.rules = set()
        self.padding = (1, 1)
        self.surround = False
        self.separator = Separator.COLUMNS
        self.style = BOX_STYLE
        self.ellipsis = ''
        self.collapse = False
        self.configure(**options)

    def configure(self, **options):
        for key, value in options.items():
            if key not in self.OPTIONS:
                raise TypeError('Unknown table option "{}"'.format(key))
            if key == 'padding':
                value = _check_padding(value)
            elif key == 'separator':
                value = Separator(value)
            elif key == 'style':
                value = check_style(value)
            setattr(self, key, value)

    def add_column(self, spec: ColumnSpec = None, **kwargs):
        self.columns.append(spec if spec is not None else ColumnSpec(**kwargs))

    def row(self, cells: list, aligns: list = None):
        self.rows.append(Row(cells, aligns))

    def rule(self):
        if not self.rows:
            raise ValueError('A rule must follow a row')
        self.rules.add(len(self.rows) - 1)

    def _padding(self, column: int):
        padding = self.columns[column].padding
        return padding if padding is not None else self.padding

    def _composer(self):
        return BorderComposer(self.style, self.surround, self.separator)

    def _check_shape(self):
        for i, row in enumerate(self.rows):
            if len(row) != len(self.columns):
                raise RowShapeMismatch(i, len(row), len(self.columns))

    def layout(self, total_width: int):
        composer = self._composer()
        indices = list(range(len(self.columns)))
        collapsed = []
        while True:
            overhead = composer.overhead(len(indices)) + sum(sum(self._padding(i)) for i in indices)
            try:
                widths, slack = allocate([self.columns[i] for i in indices], total_width, overhead)
                break
            except InsufficientWidth:
                if not self.collapse or not indices:
                    raise
                drop = min(reversed(indices), key=lambda i: self.columns[i].priority)
                logger.debug('Collapsing column %d to fit into width %d', drop, total_width)
                indices.remove(drop)
                collapsed.append(drop)

        resolved = {i: w + sum(self._padding(i)) for i, w in zip(indices, widths)}
        logger.debug('Layout for width %d: %s, slack %d', total_width, resolved, slack)
        return Layout(resolved, slack, sorted(collapsed))

    def partial_render(self, total_width: int, viewport: Viewport = None):
        """Render a window of the table.

        Column widths are always resolved against all columns and the full
        `total_width`, so a column keeps its width no matter which part of the
        table is scrolled into view.
        """
        if viewport is None:
            viewport = Viewport()
        self._check_shape()
        rows = viewport.rows(len(self.rows))
        columns = viewport.columns(len(self.columns))
        layout = self.layout(total_width)

        visible = [i for i in columns if i in layout]
        widths = [layout[i] for i in visible]
        # slack belongs after the rightmost laid out column
        more_right = any(i >= columns.stop for i in layout.widths)
        slack = 0 if more_right else layout.slack

        rendered = []
        for r in rows:
            cells = self.rows[r].cells
            rendered.append([render_cell(cells[i], layout[i], self.columns[i].align, *self._padding(i),
                                         ellipsis=self.ellipsis) for i in visible])
        rules = {n for n, r in enumerate(rows) if r in self.rules}
        return self._composer().compose(rendered, widths, slack, rules)

    def render(self, total_width: int):
        return self.partial_render(total_width)

    def render_from(self, total_width: int, row_offset: int):
        return self.partial_render(total_width, Viewport(row_offset=row_offset))
