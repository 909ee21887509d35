"""
Domain layer: entities, failure taxonomy, ports and pure geometry
"""
from .models import (
    CropRegion,
    DetectedFace,
    DetectionResult,
    EMOTION_GLYPHS,
    EmotionLabel,
    EmotionPrediction,
    HealthStatus,
    Point,
)
from .errors import (
    ClassifierInvocationError,
    ClassifierOutputShapeError,
    DetectionFailed,
    EmptyCropError,
    InvalidGeometry,
    ModelsNotReady,
    NoFaceDetected,
    PipelineBusy,
    PipelineError,
)
from .geometry import crop_region
from .state import PipelineEvent, PipelineState, transition
