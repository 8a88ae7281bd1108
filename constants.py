from dotenv import load_dotenv
load_dotenv()

import logging
import os

logging.getLogger(__name__).debug("Initializing constants")

MIN_COLUMN = 1
MIN_ROW = 1

# (max columns, max rows) per workbook format
# XLSX: 16384 columns (XFD), 1048576 rows
# XLS (BIFF8): 256 columns (IV), 65536 rows
FORMAT_LIMITS = {
    "xlsx": (16384, 1048576),
    "xls": (256, 65536),
}
DEFAULT_FORMAT = "xlsx"

LOG_LEVEL = (os.environ.get('EXCEL_POINTER_LOG_LEVEL') or 'WARNING').strip().upper()
LOG_DIRECTORY = os.environ.get('EXCEL_POINTER_LOG_DIR') or None

_valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
if LOG_LEVEL not in _valid_levels:
    raise EnvironmentError(f"Invalid EXCEL_POINTER_LOG_LEVEL: {LOG_LEVEL} (expected one of {', '.join(_valid_levels)})")
