"""
MediaPipe implementation of the face localizer
"""
import logging
from typing import List

import cv2
import numpy as np
import mediapipe as mp

from emoteapi.config import get_config
from emoteapi.domain.interfaces import FaceLocalizerInterface
from emoteapi.domain.models import DetectedFace, Point

logger = logging.getLogger(__name__)


class MediaPipeFaceLocalizer(FaceLocalizerInterface):
    """Face localizer using MediaPipe face detection.

    Keypoints come in BlazeFace order: right eye, left eye, nose tip,
    mouth centre, right ear tragion, left ear tragion.
    """

    name = "mediapipe-face-detection"

    def __init__(self):
        self.config = get_config()
        self.model = None
        self.is_initialized = False
        self._initialize()

    def _initialize(self):
        """Initialize the MediaPipe face detector"""
        try:
            logger.info(f"Initializing MediaPipe face detection (model_selection={self.config.MODEL_SELECTION})")

            self.model = mp.solutions.face_detection.FaceDetection(
                model_selection=self.config.MODEL_SELECTION,
                min_detection_confidence=self.config.MIN_DETECTION_CONFIDENCE,
            )

            self.is_initialized = True
            logger.info("MediaPipe face detection initialized successfully")

        except Exception as e:
            logger.error(f"Failed to initialize MediaPipe face detection: {e}")
            self.is_initialized = False
            raise

    def detect(self, image: np.ndarray) -> List[DetectedFace]:
        """Detect faces and return their keypoints in pixel coordinates"""
        height, width = image.shape[:2]

        result = self.model.process(self._to_rgb(image))
        if not result.detections:
            return []

        faces: List[DetectedFace] = []
        for detection in result.detections:
            confidence = float(detection.score[0]) if detection.score else 0.0
            if confidence < self.config.MIN_DETECTION_CONFIDENCE:
                continue

            # Relative keypoints to pixels
            landmarks = [
                Point(x=kp.x * width, y=kp.y * height)
                for kp in detection.location_data.relative_keypoints
            ]
            faces.append(DetectedFace(landmarks=landmarks, confidence=confidence))

        logger.debug(f"MediaPipe returned {len(faces)} face(s)")
        return faces

    @staticmethod
    def _to_rgb(image: np.ndarray) -> np.ndarray:
        """MediaPipe wants contiguous 3-channel uint8 RGB"""
        if image.dtype != np.uint8:
            image = np.clip(image, 0, 255).astype(np.uint8)
        if image.ndim == 2 or image.shape[2] == 1:
            image = cv2.cvtColor(image, cv2.COLOR_GRAY2RGB)
        elif image.shape[2] == 4:
            image = cv2.cvtColor(image, cv2.COLOR_RGBA2RGB)
        return np.ascontiguousarray(image)

    def is_ready(self) -> bool:
        """Check if localizer is ready"""
        return self.is_initialized
