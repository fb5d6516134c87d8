class LayoutError(Exception):
    pass


class InsufficientWidth(LayoutError):
    def __init__(self, required: int, available: int):
        super().__init__('Table needs at least {} columns, only {} available'.format(required, available))
        self.required = required
        self.available = available


class ViewportOutOfRange(LayoutError):
    def __init__(self, what: str, offset: int, extent: int):
        super().__init__('{} offset {} is outside of the table (extent {})'.format(what, offset, extent))
        self.what = what
        self.offset = offset
        self.extent = extent


class RowShapeMismatch(LayoutError):
    def __init__(self, row: int, cells: int, columns: int):
        super().__init__('Row {} has {} cells, but the table has {} columns'.format(row, cells, columns))
        self.row = row
        self.cells = cells
        self.columns = columns
