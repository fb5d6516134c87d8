import csv
import logging
import shutil
import sys

from gridtable import config
from gridtable.border import STYLES, Separator
from gridtable.errors import LayoutError
from gridtable.tablefmt import Table, ColumnSpec, Viewport
from gridtable.utils import ArgumentParser as BaseArgumentParser
from gridtable.width import Align, display_width, justify_between


class ArgumentParser(BaseArgumentParser):
    def __init__(self):
        super().__init__(description='Lay out delimited text as a table fitted to the terminal width')
        self.add_argument('file', type=str, nargs='?', default=None,
                          help='Input file (default stdin). The first row is the header')
        self.add_argument('-w', '--width', type=int, default=None,
                          help='Total width of the table (default terminal width)')
        self.add_argument('-d', '--delimiter', type=str, default='\t', help='Field delimiter (default tab)')
        self.add_argument('-s', '--style', choices=sorted(STYLES), default=None, help='Border glyphs')
        self.add_argument('--separator', type=Separator.from_str, default=None,
                          help='|'.join(map(str, Separator)))
        self.add_argument('--surround', dest='surround', default=None, action='store_true',
                          help='Draw an outer border')
        self.add_argument('--no-surround', dest='surround', action='store_false')
        self.add_argument('-p', '--padding', type=self._parse_padding, default=None,
                          help='Cell padding as LEFT,RIGHT or a single value for both')
        self.add_argument('-a', '--align', type=self._parse_alignments, default=[],
                          help='Column alignments, e.g. "l,c,r"')
        self.add_argument('--min', type=self._parse_numbers, default=[], help='Minimum column widths')
        self.add_argument('--max', type=self._parse_numbers, default=[], help='Maximum column widths')
        self.add_argument('--weights', type=self._parse_weights, default=[], help='Column flex weights')
        self.add_argument('--priorities', type=self._parse_numbers, default=[],
                          help='Column priorities; the lowest are dropped first with --collapse')
        self.add_argument('--collapse', default=None, action='store_true',
                          help='Drop columns instead of failing when the table does not fit')
        self.add_argument('--ellipsis', type=str, default=None, help='Marker for truncated cells')
        self.add_argument('-r', '--rows', type=self._parse_window, default=(0, None),
                          help='Rows to show as OFFSET:COUNT (the header is row 0)')
        self.add_argument('-k', '--columns', type=self._parse_window, default=(0, None),
                          help='Columns to show as OFFSET:COUNT')
        self.add_argument('--status', default=False, action='store_true',
                          help='Print a status line below the table')
        self.add_argument('-c', '--config', type=str, default=config.DEFAULT_FILE)
        self.add_argument('-v', '--verbose', default=False, action='store_true')


def _nth(values: list, i: int, default):
    if i < len(values) and values[i] is not None:
        return values[i]
    return default


def make_columns(args, count: int):
    return [ColumnSpec(min_width=_nth(args.min, i, 0),
                       max_width=_nth(args.max, i, None),
                       flex_weight=_nth(args.weights, i, 1),
                       align=_nth(args.align, i, Align.LEFT),
                       priority=_nth(args.priorities, i, 0)) for i in range(count)]


def fit_row(cells: list, count: int, delimiter: str):
    # extra fields belong to the last column, e.g. command lines split on spaces
    if len(cells) > count > 0:
        cells = cells[:count - 1] + [delimiter.join(cells[count - 1:])]
    return cells + [''] * (count - len(cells))


def read_rows(args):
    if args.file is None:
        return list(csv.reader(sys.stdin, delimiter=args.delimiter))
    with open(args.file, 'r', newline='') as file:
        return list(csv.reader(file, delimiter=args.delimiter))


def main(argv: list = None):
    parser = ArgumentParser()
    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    try:
        options = config.table_options(config.load(args.config))
    except ValueError as e:
        print('Invalid configuration in {}: {}'.format(args.config, e), file=sys.stderr)
        return 1
    overrides = {'style': STYLES[args.style] if args.style else None, 'separator': args.separator,
                 'surround': args.surround, 'padding': args.padding, 'collapse': args.collapse,
                 'ellipsis': args.ellipsis}
    options.update((k, v) for k, v in overrides.items() if v is not None)

    rows = read_rows(args)
    try:
        columns = make_columns(args, len(rows[0]) if rows else 0)
    except ValueError as e:
        parser.error(str(e))
    table = Table(columns, **options)
    for i, cells in enumerate(rows):
        table.row(fit_row(cells, len(columns), args.delimiter))
        if i == 0:
            table.rule()

    width = args.width if args.width is not None else shutil.get_terminal_size().columns
    viewport = Viewport(args.rows[0], args.rows[1], args.columns[0], args.columns[1])
    try:
        lines = table.partial_render(width, viewport)
        if args.status:
            shown = viewport.rows(len(table.rows))
            status = ['{} columns'.format(len(table.columns)),
                      'rows {}-{} of {}'.format(shown.start + 1, shown.stop, len(table.rows))]
            lines.append(justify_between(status, display_width(lines[0]) if lines else width))
    except LayoutError as e:
        print(e, file=sys.stderr)
        return 1

    for line in lines:
        print(line)
    return 0


if __name__ == '__main__':
    sys.exit(main())
