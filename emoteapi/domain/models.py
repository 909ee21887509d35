"""
Domain models/entities
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional


STATUS_ANALYZED = "Face detected and emotion analyzed!"
STATUS_NO_FACE = "No faces detected"
STATUS_ERROR = "Error detecting faces"


@dataclass(frozen=True)
class Point:
    """2D landmark in source-image pixel coordinates"""
    x: float
    y: float


@dataclass
class DetectedFace:
    """One face reported by the localizer"""
    landmarks: List[Point]  # 6-point convention: eyes, nose tip, mouth, ear tragions
    confidence: float = 0.0


@dataclass(frozen=True)
class CropRegion:
    """Square crop in source pixels, may extend past the image bounds"""
    x: float
    y: float
    width: float
    height: float

    def to_dict(self) -> dict:
        return {
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
        }


class EmotionLabel(Enum):
    """Classifier output classes, in the order of the probability vector"""
    ANGRY = "Angry"
    DISGUST = "Disgust"
    FEAR = "Fear"
    HAPPY = "Happy"
    NEUTRAL = "Neutral"
    SAD = "Sad"
    SURPRISED = "Surprised"


# Presentation only
EMOTION_GLYPHS: Dict[EmotionLabel, str] = {
    EmotionLabel.ANGRY: "\U0001F620",
    EmotionLabel.DISGUST: "\U0001F922",
    EmotionLabel.FEAR: "\U0001F628",
    EmotionLabel.HAPPY: "\U0001F60A",
    EmotionLabel.NEUTRAL: "\U0001F610",
    EmotionLabel.SAD: "\U0001F622",
    EmotionLabel.SURPRISED: "\U0001F62E",
}


@dataclass(frozen=True)
class EmotionPrediction:
    """Emotion with its probability in percent (0-100)"""
    emotion: EmotionLabel
    probability: float

    @property
    def glyph(self) -> str:
        return EMOTION_GLYPHS[self.emotion]

    def display(self) -> str:
        """Human readable line, e.g. '<glyph> Happy: 95.00%'"""
        return f"{self.glyph} {self.emotion.value}: {self.probability:.2f}%"

    def to_dict(self) -> dict:
        return {
            "emotion": self.emotion.value,
            "probability": self.probability,
            "glyph": self.glyph,
        }


@dataclass
class DetectionResult:
    """Outcome of one detection request, success or failure"""
    success: bool
    state: str
    status: str
    predictions: Optional[List[EmotionPrediction]] = None
    reason: Optional[str] = None  # failure tag, e.g. "NoFaceDetected"
    error: Optional[str] = None
    region: Optional[CropRegion] = None
    processing_time_ms: int = 0

    @property
    def top(self) -> Optional[EmotionPrediction]:
        """Most probable emotion, if any"""
        if not self.predictions:
            return None
        return self.predictions[0]

    def to_dict(self) -> dict:
        """Convert to dictionary for JSON serialization"""
        return {
            "success": self.success,
            "state": self.state,
            "status": self.status,
            "predictions": (
                [p.to_dict() for p in self.predictions]
                if self.predictions is not None else None
            ),
            "reason": self.reason,
            "error": self.error,
            "region": self.region.to_dict() if self.region else None,
            "processing_time_ms": self.processing_time_ms,
        }


@dataclass
class HealthStatus:
    """Service health status"""
    status: str
    localizer: str
    classifier: str
    version: str
    details: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "status": self.status,
            "localizer": self.localizer,
            "classifier": self.classifier,
            "version": self.version,
            **self.details,
        }
