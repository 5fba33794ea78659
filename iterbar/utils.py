# iterbar/utils.py
import logging
import os
import shutil
import time

from tqdm.utils import disp_len

import iterbar.config as config

_logger = None

def setup_logging(log_file=config.LOG_FILE, level=logging.INFO):
    global _logger
    logger = logging.getLogger("iterbar")
    logger.setLevel(level)
    # file handler only -> console is reserved for the progress line
    fh = logging.FileHandler(log_file, mode="a", encoding="utf-8")
    fmt = logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
    fh.setFormatter(fmt)
    # remove existing handlers to avoid duplicates
    for h in list(logger.handlers):
        logger.removeHandler(h)
    logger.addHandler(fh)
    _logger = logger
    logger.info("Logging initialized. Log file: %s", os.path.abspath(log_file))
    return logger

def get_logger():
    global _logger
    if _logger is None:
        # library use: stay silent until setup_logging() is called
        logger = logging.getLogger("iterbar")
        if not logger.handlers:
            logger.addHandler(logging.NullHandler())
        _logger = logger
    return _logger

def vprint(*args, **kwargs):
    # verbose print -> goes to logger.debug
    get_logger().debug(" ".join(str(a) for a in args))

def now_ms():
    return time.monotonic_ns() // 1_000_000

def format_duration(milliseconds):
    """Format a millisecond duration as HH:MM:SS, truncating the sub-second part."""
    milliseconds = max(0, int(milliseconds))
    hours = milliseconds // 3600000
    minutes = (milliseconds % 3600000) // 60000
    seconds = (milliseconds % 60000) // 1000
    return f"{hours:02d}:{minutes:02d}:{seconds:02d}"

def glyph_width(glyph):
    # display cells, wide (CJK) characters count as two
    return disp_len(glyph)

def get_terminal_width(fallback=config.TERMINAL_FALLBACK_COLUMNS):
    """
    Column count of the attached terminal.
    Falls back to `fallback` when stderr is not a terminal (pipes, CI).
    """
    try:
        return os.get_terminal_size(2).columns
    except (OSError, ValueError):
        pass
    return shutil.get_terminal_size(fallback=(fallback, 24)).columns
