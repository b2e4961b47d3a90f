# Difficulty calculation algorithm: Copyright (c) ppy Pty Ltd <contact@ppy.sh>. Licensed under the MIT Licence.
#
# Flashlight: how hard an object is to find and hit from memory when only a small circle around the cursor is visible.
import logging

import numpy as np

from dataset_tools.SR_calculation.OsuDifficultyHitObject import Circle, Slider, Spinner, InvalidHitObjectError

logger = logging.getLogger(__name__)

max_opacity_bonus = 0.4
hidden_bonus = 0.2

min_velocity = 0.5
slider_multiplier = 1.3

min_grid_multiplier = 0.35

history_window = 10  # objects further back than this are assumed to be forgotten
reference_radius = 52.0
small_dist_threshold = 75.0
stack_threshold = 25.0


def checkVariant(hitObject):
    if not isinstance(hitObject.baseObject, (Circle, Slider, Spinner)):
        raise InvalidHitObjectError(f"unsupported hit object type {type(hitObject.baseObject).__name__} at index {hitObject.index}")


def evaluateDistanceOf(current, hidden):
    """
    Distance and visibility part of the flashlight difficulty, before the angle and slider terms.

    Walks back over up to history_window previous objects. Each one adds the jump from it to the current object,
    divided by the total time elapsed since it, scaled up the less visible the current object was at that moment.
    """
    scalingFactor = reference_radius / current.baseObject.radius
    smallDistNerf = 1.0
    cumulativeStrainTime = 0.0

    result = 0.0

    lastObj = current

    # iterating backwards in time from the current object
    for i in range(min(current.index, history_window)):
        currentObj = current.previous(i)
        checkVariant(currentObj)

        if not isinstance(currentObj.baseObject, Spinner):
            jumpDistance = float(np.linalg.norm(current.baseObject.stackedPosition - currentObj.baseObject.endPosition))

            cumulativeStrainTime += lastObj.strainTime

            # objects close enough to sit inside the flashlight circle need no memorisation
            if i == 0:
                smallDistNerf = float(np.minimum(1.0, jumpDistance / small_dist_threshold))

            # only the first object of a stack counts
            stackNerf = float(np.minimum(1.0, (currentObj.lazyJumpDistance / scalingFactor) / stack_threshold))

            opacityBonus = 1.0 + max_opacity_bonus * (1.0 - float(current.opacityAt(currentObj.startTime, hidden)))

            result += stackNerf * opacityBonus * scalingFactor * jumpDistance / cumulativeStrainTime

        lastObj = currentObj

    result = (smallDistNerf * result) ** 2.0

    # no approach circles with hidden
    if hidden:
        result *= 1.0 + hidden_bonus

    logger.debug("object %d: smallDistNerf=%.4f distance=%.6f", current.index, smallDistNerf, result)
    return float(result)


def gridMultiplier(angle):
    # 0, 60, 120 and 180 degrees are common in hexgrid maps; 0, 45, 90, 135 and 180 in squaregrid maps
    hexgridMultiplier = 1.0 - np.cos((180 / 60.0) * angle) ** 20.0
    squaregridMultiplier = 1.0 - np.cos((180 / 45.0) * angle) ** 20.0
    return float((1.0 - min_grid_multiplier) * hexgridMultiplier * squaregridMultiplier + min_grid_multiplier)


def sliderBonusOf(slider, scalingFactor):
    # true travel distance independent of circle size
    pixelTravelDistance = slider.lazyTravelDistance / scalingFactor

    # faster sliders are harder
    sliderBonus = np.maximum(0.0, pixelTravelDistance / slider.travelTime - min_velocity) ** 0.5

    # longer sliders need more memorisation
    sliderBonus *= pixelTravelDistance

    # repeats retrace a path the player has already seen
    if slider.repeatCount > 0:
        sliderBonus /= slider.repeatCount + 1

    return float(sliderBonus)


def evaluateDifficultyOf(current, hidden):
    checkVariant(current)
    if isinstance(current.baseObject, Spinner):
        return 0.0

    result = evaluateDistanceOf(current, hidden)

    if current.angle is not None:
        multiplier = gridMultiplier(current.angle)
        logger.debug("object %d: grid multiplier %.4f at angle %.4f", current.index, multiplier, current.angle)
        result *= multiplier

    sliderBonus = 0.0

    if isinstance(current.baseObject, Slider):
        sliderBonus = sliderBonusOf(current.baseObject, reference_radius / current.baseObject.radius)
        logger.debug("object %d: slider bonus %.6f", current.index, sliderBonus)

    result += sliderBonus * slider_multiplier

    return result
