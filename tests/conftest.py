import numpy as np
import pytest

from emoteapi.domain.interfaces import (
    EmotionClassifierInterface,
    FaceLocalizerInterface,
    ImageLoaderInterface,
)
from emoteapi.domain.models import DetectedFace, Point

EXAMPLE_PROBABILITIES = [0.01, 0.00, 0.00, 0.95, 0.02, 0.01, 0.01]


def make_landmarks(nose=(50.0, 50.0), right_x=30.0, left_x=70.0):
    """Six keypoints with the nose at index 2 and the references at 4 and 5"""
    nx, ny = nose
    return [
        Point(nx - 10, ny - 10),  # right eye
        Point(nx + 10, ny - 10),  # left eye
        Point(nx, ny),            # nose tip
        Point(nx, ny + 15),       # mouth
        Point(right_x, ny - 5),   # right ear
        Point(left_x, ny - 5),    # left ear
    ]


class FakeLocalizer(FaceLocalizerInterface):
    name = "fake-localizer"

    def __init__(self, faces=None, ready=True, error=None):
        self.faces = faces if faces is not None else []
        self.ready = ready
        self.error = error
        self.calls = 0

    def detect(self, image):
        self.calls += 1
        if self.error:
            raise self.error
        return self.faces

    def is_ready(self):
        return self.ready


class FakeClassifier(EmotionClassifierInterface):
    name = "fake-classifier"

    def __init__(self, output=None, ready=True, error=None):
        self.output = output if output is not None else EXAMPLE_PROBABILITIES
        self.ready = ready
        self.error = error
        self.tensors = []

    def predict(self, tensor):
        self.tensors.append(tensor)
        if self.error:
            raise self.error
        return self.output

    def is_ready(self):
        return self.ready


class FakeImageLoader(ImageLoaderInterface):
    def __init__(self, image=None):
        self.image = image

    def load_from_url(self, url):
        return self.image

    def load_from_bytes(self, data):
        return self.image


@pytest.fixture
def image():
    return np.full((100, 100, 3), 128, dtype=np.uint8)


@pytest.fixture
def face():
    return DetectedFace(landmarks=make_landmarks(), confidence=0.9)
