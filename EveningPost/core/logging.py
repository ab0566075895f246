from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str = "INFO") -> None:
    level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger("EveningPost").setLevel(level)
