"""
logging_config.py - central logging setup for the food ordering API.

Every module logs through ``logging.getLogger(__name__)``; this module only
decides where records go and how they look.
"""

import logging
import sys

from config.settings import LOG_LEVEL, DEBUG

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(name)s - %(message)s"


def setup_logging(level: str = None):
    """
    Configures the root logger once for the whole process.

    Output goes to stdout (container friendly). SQLAlchemy engine echo and the
    uvicorn access log are kept at WARNING unless DEBUG is on.
    """
    level = (level or ("DEBUG" if DEBUG else LOG_LEVEL)).upper()

    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
    )

    if not DEBUG:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
        logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
