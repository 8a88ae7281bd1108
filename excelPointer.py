# excelPointer.py

import logging

import excelColumn
from constants import MIN_COLUMN, MIN_ROW, FORMAT_LIMITS, DEFAULT_FORMAT
from validators import OutOfBoundsError, validate_step, validate_mode

logger = logging.getLogger(__name__)


class ExcelPointer:
    """Cursor over a worksheet grid.

    Tracks the current cell, the furthest column/row ever visited and the
    addressable limits of the workbook format ('xlsx' or 'xls'). Move
    methods return the pointer so calls can be chained:

        p = ExcelPointer()
        p.right(2).down()
        p.coord()  # 'C2'
    """

    def __init__(self, format=DEFAULT_FORMAT):
        fmt = str(format).lower() if format is not None else DEFAULT_FORMAT
        if fmt not in FORMAT_LIMITS:
            if fmt:
                logger.warning(f"Unknown format {format!r}, using {DEFAULT_FORMAT} limits")
            fmt = DEFAULT_FORMAT

        self._format = fmt
        self._max_column_limit, self._max_row_limit = FORMAT_LIMITS[fmt]

        self._column = MIN_COLUMN
        self._row = MIN_ROW
        self._max_column = MIN_COLUMN
        self._max_row = MIN_ROW
        self._coordinate = None

        self._update_coordinate()

    @property
    def column(self):
        return self._column

    @property
    def row(self):
        return self._row

    @property
    def coordinate(self):
        return self._coordinate

    @property
    def max_column(self):
        return self._max_column

    @property
    def max_row(self):
        return self._max_row

    @property
    def format(self):
        return self._format

    @property
    def max_column_limit(self):
        return self._max_column_limit

    @property
    def max_row_limit(self):
        return self._max_row_limit

    def _update_coordinate(self):
        self._coordinate = excelColumn.coord(self._column, self._row)
        self._max_column = max(self._max_column, self._column)
        self._max_row = max(self._max_row, self._row)

    def _refuse(self, message):
        logger.info(f"Refused move from {self._coordinate}: {message}")
        raise OutOfBoundsError(message)

    def right(self, n=1):
        validate_step(n)
        if self._column + n > self._max_column_limit:
            self._refuse(
                f"Column right limit reached ({excelColumn.column(self._max_column_limit)} | {self._max_column_limit})"
            )
        self._column += n
        self._update_coordinate()
        logger.debug(f"right({n}) -> {self._coordinate}")
        return self

    def left(self, n=1):
        validate_step(n)
        if self._column - n < MIN_COLUMN:
            self._refuse(f"Column left limit reached ({excelColumn.column(MIN_COLUMN)} | {MIN_COLUMN})")
        self._column -= n
        self._update_coordinate()
        logger.debug(f"left({n}) -> {self._coordinate}")
        return self

    def down(self, n=1):
        validate_step(n)
        if self._row + n > self._max_row_limit:
            self._refuse(f"Row lower limit reached ({self._max_row_limit})")
        self._row += n
        self._update_coordinate()
        logger.debug(f"down({n}) -> {self._coordinate}")
        return self

    def up(self, n=1):
        validate_step(n)
        if self._row - n < MIN_ROW:
            self._refuse(f"Row upper limit reached ({MIN_ROW})")
        self._row -= n
        self._update_coordinate()
        logger.debug(f"up({n}) -> {self._coordinate}")
        return self

    def enter(self):
        """Move to the first column of the next row."""
        if self._row >= self._max_row_limit:
            self._refuse(f"Row lower limit reached ({self._max_row_limit})")
        self._row += 1
        self._column = MIN_COLUMN
        self._update_coordinate()
        logger.debug(f"enter() -> {self._coordinate}")
        return self

    def tab(self):
        """Return the current coordinate, then step one column right."""
        ret = self._coordinate
        self.right()
        return ret

    def coord(self, mode="string"):
        validate_mode(mode, ("string", "array"))
        if mode == "string":
            return self._coordinate
        return {"column": self._column, "row": self._row}

    def boundary(self, mode="array"):
        validate_mode(mode, ("string", "array"))
        if mode == "string":
            return excelColumn.coord(self._max_column, self._max_row)
        return {"column": self._max_column, "row": self._max_row}

    def position(self):
        return (self._column, self._row)

    def boundary_coord(self):
        return self.boundary("string")

    def get_row(self):
        return self._row

    def get_column(self, mode="int"):
        validate_mode(mode, ("int", "str"))
        if mode == "int":
            return self._column
        return excelColumn.column(self._column)

    def __str__(self):
        return self._coordinate

    def __repr__(self):
        return (
            f"ExcelPointer(format={self._format!r}, coordinate={self._coordinate!r}, "
            f"boundary={self.boundary('string')!r})"
        )
