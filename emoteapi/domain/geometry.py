"""
Crop region derivation from facial landmarks
"""
import math
from typing import Sequence

from .errors import InvalidGeometry
from .models import CropRegion, Point

NOSE_INDEX = 2
RIGHT_REFERENCE_INDEX = 4
LEFT_REFERENCE_INDEX = 5
MIN_LANDMARKS = 6

DEFAULT_CROP_MARGIN = 5.0  # Pixels


def crop_region(landmarks: Sequence[Point], margin: float = DEFAULT_CROP_MARGIN) -> CropRegion:
    """Square region centred on the nose tip, sized by the ear-to-ear span.

    half = (left.x - right.x) / 2 + margin

    Raises InvalidGeometry when the landmark set is too short, a
    coordinate is not finite, the left reference is not to the right of the
    right reference, or half is not positive.
    """
    if len(landmarks) < MIN_LANDMARKS:
        raise InvalidGeometry(
            f"Expected at least {MIN_LANDMARKS} landmarks, got {len(landmarks)}"
        )

    nose = landmarks[NOSE_INDEX]
    right = landmarks[RIGHT_REFERENCE_INDEX]
    left = landmarks[LEFT_REFERENCE_INDEX]

    coordinates = (nose.x, nose.y, right.x, left.x)
    if not all(math.isfinite(c) for c in coordinates):
        raise InvalidGeometry(f"Non-finite landmark coordinates: {coordinates}")

    if left.x <= right.x:
        raise InvalidGeometry(f"Degenerate landmarks: left x {left.x} <= right x {right.x}")

    half = (left.x - right.x) / 2 + margin
    if not (math.isfinite(half) and half > 0):
        raise InvalidGeometry(f"Crop half-size must be finite and positive: {half}")

    return CropRegion(
        x=nose.x - half,
        y=nose.y - half,
        width=2 * half,
        height=2 * half,
    )
