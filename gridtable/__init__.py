__version__ = '0.1.0'

from gridtable.errors import LayoutError, InsufficientWidth, ViewportOutOfRange, RowShapeMismatch
from gridtable.border import ASCII_STYLE, BOX_STYLE, BLANK_STYLE, Separator
from gridtable.tablefmt import Align, ColumnSpec, Cell, Table, Viewport, render_cell
from gridtable.width import display_width, fit_to_width
