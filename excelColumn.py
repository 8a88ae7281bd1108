from openpyxl.utils import get_column_letter

from validators import InvalidArgumentError


def column(index):
    """1-based column index to spreadsheet letters (1 -> A, 27 -> AA)."""
    if isinstance(index, bool) or not isinstance(index, int):
        raise InvalidArgumentError(f"Invalid column index: {index!r}")
    try:
        return get_column_letter(index)
    except ValueError as e:
        raise InvalidArgumentError(f"Invalid column index: {index}") from e


def coord(col, row):
    return f"{column(col)}{row}"
