# Difficulty calculation algorithm: Copyright (c) ppy Pty Ltd <contact@ppy.sh>. Licensed under the MIT Licence.
import numpy as np


class InvalidHitObjectError(ValueError):
    pass


class OsuHitObject:
    def __init__(self, position, startTime, radius, stackOffset=(0, 0)):
        self.position = np.asarray(position, dtype=float)
        self.startTime = float(startTime)
        self.radius = float(radius)
        self.stackOffset = np.asarray(stackOffset, dtype=float)

    @property
    def stackedPosition(self):
        return self.position + self.stackOffset

    @property
    def endPosition(self):
        return self.position


class Circle(OsuHitObject):
    pass


class Slider(OsuHitObject):
    def __init__(self, position, startTime, radius, endPosition, lazyTravelDistance, travelTime, repeatCount=0, stackOffset=(0, 0)):
        super().__init__(position, startTime, radius, stackOffset)
        if repeatCount < 0:
            raise InvalidHitObjectError(f"slider at {startTime}ms has negative repeat count {repeatCount}")
        self._endPosition = np.asarray(endPosition, dtype=float)
        self.lazyTravelDistance = float(lazyTravelDistance)
        self.travelTime = float(travelTime)  # ms spent travelling the lazy path
        self.repeatCount = int(repeatCount)

    @property
    def endPosition(self):
        return self._endPosition

    @property
    def stackedEndPosition(self):
        return self._endPosition + self.stackOffset


class Spinner(OsuHitObject):
    def __init__(self, position, startTime, endTime, radius):
        super().__init__(position, startTime, radius)
        self.endTime = float(endTime)


class OsuDifficultyHitObject:
    """
    A hit object decorated with the geometry the difficulty skills need.

    Every object shares the history list it was appended to, so previous(k)
    reaches earlier objects by index without holding its own copy. Only
    backward access is offered.

    strainTime and lazyJumpDistance are computed by the caller. angle is the
    angle in radians made with the two preceding objects, or None for the
    first two objects of a map. opacityFunc(hitObject, time, hidden) supplies
    the approach opacity curve.
    """

    def __init__(self, baseObject, index, objects, strainTime, lazyJumpDistance=0.0, angle=None, opacityFunc=None):
        self.baseObject = baseObject
        self.index = index
        self._objects = objects
        self.strainTime = strainTime
        self.lazyJumpDistance = lazyJumpDistance
        self.angle = angle
        self._opacityFunc = opacityFunc

    @property
    def startTime(self):
        return self.baseObject.startTime

    def previous(self, backwardsIndex):
        # previous(0) is the object immediately before this one
        if backwardsIndex < 0 or backwardsIndex >= self.index:
            raise IndexError(f"object {self.index} has no previous({backwardsIndex})")
        return self._objects[self.index - (backwardsIndex + 1)]

    def opacityAt(self, time, hidden):
        if self._opacityFunc is None:
            raise InvalidHitObjectError(f"object {self.index} was created without an opacity function")
        return self._opacityFunc(self.baseObject, time, hidden)

    def __repr__(self):
        return f"OsuDifficultyHitObject(index={self.index}, {type(self.baseObject).__name__} at {self.startTime}ms)"


class HitObjectHistory:
    # append-only; objects handed out are never moved or replaced
    def __init__(self):
        self._objects = []

    def append(self, baseObject, strainTime, lazyJumpDistance=0.0, angle=None, opacityFunc=None):
        if not isinstance(baseObject, (Circle, Slider, Spinner)):
            raise InvalidHitObjectError(f"unsupported hit object type {type(baseObject).__name__}")
        obj = OsuDifficultyHitObject(baseObject, len(self._objects), self._objects, strainTime, lazyJumpDistance, angle, opacityFunc)
        self._objects.append(obj)
        return obj

    def __len__(self):
        return len(self._objects)

    def __getitem__(self, index):
        return self._objects[index]

    def __iter__(self):
        return iter(self._objects)
