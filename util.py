import logging
import os
from datetime import datetime

from constants import LOG_LEVEL, LOG_DIRECTORY

FORMATTER = logging.Formatter('%(asctime)s - %(levelname)s - %(message)s', datefmt='%Y-%m-%d %H:%M:%S')


def _find_handler(logger, log_file_path):
    for handler in logger.handlers:
        if log_file_path is not None:
            if isinstance(handler, logging.FileHandler) and handler.baseFilename == os.path.abspath(log_file_path):
                return handler
        elif type(handler) is logging.StreamHandler:
            return handler
    return None


def configure_logging(level=None, log_directory=None):
    """Attach a handler to the root logger and return it.

    Logs go to a dated file under ``log_directory`` (or EXCEL_POINTER_LOG_DIR)
    when one is set, to stderr otherwise. Calling it again reuses the handler
    already attached for the same destination.
    """
    log_directory = log_directory or LOG_DIRECTORY
    log_file_path = None

    if log_directory:
        os.makedirs(log_directory, exist_ok=True)
        log_file_path = os.path.join(log_directory, datetime.today().strftime('%d-%m-%Y') + '-logs.log')

    logger = logging.getLogger()
    logger.setLevel(level or LOG_LEVEL)

    handler = _find_handler(logger, log_file_path)
    if handler is None:
        if log_file_path is not None:
            handler = logging.FileHandler(log_file_path)
        else:
            handler = logging.StreamHandler()
        logger.addHandler(handler)

    handler.setFormatter(FORMATTER)
    return handler
