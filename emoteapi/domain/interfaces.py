"""
Domain interfaces (ports)
"""
from abc import ABC, abstractmethod
from typing import List, Optional
import numpy as np

from .models import DetectedFace


class FaceLocalizerInterface(ABC):
    """Interface for face landmark detection"""

    name = "face-localizer"

    @abstractmethod
    def detect(self, image: np.ndarray) -> List[DetectedFace]:
        """Detect faces in an RGB image array, zero or more results"""
        pass

    @abstractmethod
    def is_ready(self) -> bool:
        """Check if the localizer is ready"""
        pass


class EmotionClassifierInterface(ABC):
    """Interface for the emotion classifier"""

    name = "emotion-classifier"

    @abstractmethod
    def predict(self, tensor: np.ndarray) -> np.ndarray:
        """Return the probability vector for a [1, 48, 48, 1] input"""
        pass

    @abstractmethod
    def is_ready(self) -> bool:
        """Check if the classifier is ready"""
        pass


class ImageLoaderInterface(ABC):
    """Interface for image loading"""

    @abstractmethod
    def load_from_url(self, url: str) -> Optional[np.ndarray]:
        """Load image from URL"""
        pass

    @abstractmethod
    def load_from_bytes(self, data: bytes) -> Optional[np.ndarray]:
        """Load image from bytes"""
        pass
