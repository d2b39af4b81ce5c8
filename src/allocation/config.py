import inspect
import logging
import os
import pathlib
from typing import Optional

import dotenv

ENV_FILE = pathlib.Path(__file__).parent.parent.parent / "env" / "allocation.env"
LOG_FORMAT = "%(asctime)s -- %(levelname)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

dotenv.load_dotenv(dotenv_path=ENV_FILE)


def get_log_level() -> str:
    return os.environ.get("LOG_LEVEL", "INFO").upper()


def get_log_file() -> Optional[str]:
    return os.environ.get("LOG_FILE") or None


def get_logger() -> logging.Logger:
    caller_frame = inspect.stack()[1]
    caller_module = caller_frame.frame.f_globals["__name__"]
    logger = logging.getLogger(caller_module)

    if logger.hasHandlers():
        logger.handlers.clear()

    filename = get_log_file()
    handler: logging.Handler
    if filename:
        handler = logging.FileHandler(filename, mode="a")
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(get_log_level())
    return logger
