# config.py
import logging
import os

# ======= Logging =======
LOG_LEVEL   = os.getenv("CB_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT  = "%(asctime)s [%(levelname)s] %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"

# ======= Command line defaults =======
# 0 prints every solution
MAX_SOLUTIONS = int(os.getenv("CB_MAX_SOLUTIONS", "0"))
# 0 solves instead of printing hints
HINTS         = int(os.getenv("CB_HINTS", "0"))

# ======= Year sweep =======
# Leap year so Feb 29 gets solved too.
SWEEP_YEAR = int(os.getenv("CB_SWEEP_YEAR", "2000"))


class CFG:
    LOG_LEVEL   = LOG_LEVEL
    LOG_FORMAT  = LOG_FORMAT
    LOG_DATEFMT = LOG_DATEFMT

    MAX_SOLUTIONS = MAX_SOLUTIONS
    HINTS         = HINTS

    SWEEP_YEAR = SWEEP_YEAR


def configure_logging() -> None:
    logging.basicConfig(level=CFG.LOG_LEVEL, format=CFG.LOG_FORMAT, datefmt=CFG.LOG_DATEFMT)


__all__ = ["CFG", "configure_logging"]
