"""Process-wide logging setup, called once by the CLI"""

import logging


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(filename)s %(funcName)s:%(lineno)d %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Install a stderr handler on the root logger; a no-op if one is already configured."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
