# Per-object flashlight strains for a whole map, in the order the strain skill consumes them.
#
# Difficulty calculation algorithm: Copyright (c) ppy Pty Ltd <contact@ppy.sh>. Licensed under the MIT Licence.
#
#
import logging
from concurrent.futures import ThreadPoolExecutor

import config
from dataset_tools.SR_calculation import flashlight

logger = logging.getLogger(__name__)


def flashlightStrains(history, hidden):
    logger.info("evaluating flashlight for %d objects (hidden=%s)", len(history), hidden)
    strains = []
    for obj in history:
        strains.append(flashlight.evaluateDifficultyOf(obj, hidden))
    return strains


# every object in history must be appended before this is called, nothing may be appended while it runs
def flashlightStrainsParallel(history, hidden, workers=None):
    if workers is None:
        workers = config.parallelWorkers
    logger.info("evaluating flashlight for %d objects on %d workers (hidden=%s)", len(history), workers, hidden)
    with ThreadPoolExecutor(max_workers=workers) as executor:
        # map keeps history order and re-raises the first failure when iterated
        return list(executor.map(lambda obj: flashlight.evaluateDifficultyOf(obj, hidden), history))
