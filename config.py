# globals etc.
import logging

logLevel = "WARNING"  # set to "DEBUG" to see the per-object flashlight breakdown
logFormat = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
logDateFormat = "%H:%M:%S"

parallelWorkers = 4  # default thread count for sr_calculator.flashlightStrainsParallel

projectLoggers = [
    "dataset_tools.SR_calculation.flashlight",
    "dataset_tools.SR_calculation.sr_calculator",
]


def setupLogging(level=None):
    level = level or logLevel
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(logFormat, datefmt=logDateFormat))
    for name in projectLoggers:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        if not logger.handlers:
            logger.addHandler(handler)
