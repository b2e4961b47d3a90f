from __future__ import annotations

import numpy as np
import pytest

from dataset_tools.SR_calculation.OsuDifficultyHitObject import (
    Circle,
    HitObjectHistory,
    InvalidHitObjectError,
    Slider,
    Spinner,
)


def test_circle_positions() -> None:
    circle = Circle((100, 50), 1000, 40.0, stackOffset=(-3.2, -3.2))

    np.testing.assert_allclose(circle.stackedPosition, [96.8, 46.8])
    np.testing.assert_allclose(circle.endPosition, [100.0, 50.0])
    assert circle.startTime == 1000.0


def test_slider_end_positions() -> None:
    slider = Slider((0, 0), 500, 40.0, (120, 80), 150.0, 200.0, repeatCount=2, stackOffset=(2, 2))

    np.testing.assert_allclose(slider.endPosition, [120.0, 80.0])
    np.testing.assert_allclose(slider.stackedEndPosition, [122.0, 82.0])
    assert slider.repeatCount == 2
    assert slider.travelTime == 200.0


def test_slider_rejects_negative_repeats() -> None:
    with pytest.raises(InvalidHitObjectError):
        Slider((0, 0), 500, 40.0, (120, 80), 150.0, 200.0, repeatCount=-1)


def test_history_assigns_stable_indices() -> None:
    history = HitObjectHistory()
    first = history.append(Circle((0, 0), 0, 40.0), strainTime=50.0)
    second = history.append(Spinner((256, 192), 100, 900, 40.0), strainTime=100.0)
    third = history.append(Circle((10, 0), 1000, 40.0), strainTime=900.0, angle=0.5)

    assert [obj.index for obj in history] == [0, 1, 2]
    assert len(history) == 3
    assert history[1] is second
    assert third.previous(0) is second
    assert third.previous(1) is first
    assert first.angle is None
    assert third.angle == 0.5


def test_previous_never_wraps_or_reads_forward() -> None:
    history = HitObjectHistory()
    first = history.append(Circle((0, 0), 0, 40.0), strainTime=50.0)
    second = history.append(Circle((10, 0), 100, 40.0), strainTime=100.0)

    with pytest.raises(IndexError):
        first.previous(0)
    with pytest.raises(IndexError):
        second.previous(1)
    with pytest.raises(IndexError):
        second.previous(-1)


def test_history_rejects_unknown_objects() -> None:
    history = HitObjectHistory()

    with pytest.raises(InvalidHitObjectError):
        history.append("circle", strainTime=50.0)
    assert len(history) == 0


def test_opacity_is_delegated() -> None:
    history = HitObjectHistory()
    circle = Circle((0, 0), 1000, 40.0)
    obj = history.append(circle, strainTime=50.0, opacityFunc=lambda hitObject, time, hidden: 0.0 if hidden else time / hitObject.startTime)

    assert obj.opacityAt(500.0, False) == 0.5
    assert obj.opacityAt(500.0, True) == 0.0


def test_opacity_without_function_raises() -> None:
    history = HitObjectHistory()
    obj = history.append(Circle((0, 0), 1000, 40.0), strainTime=50.0)

    with pytest.raises(InvalidHitObjectError):
        obj.opacityAt(500.0, False)
