"""
Emotion detection service - application layer
"""
import logging

from emoteapi.domain.interfaces import ImageLoaderInterface
from emoteapi.domain.models import STATUS_ERROR, DetectionResult, HealthStatus
from emoteapi.domain.state import PipelineState
from .emotion_pipeline import EmotionPipeline

logger = logging.getLogger(__name__)


class EmotionDetectionService:
    """Service for detecting emotions in uploaded or linked images"""

    def __init__(
        self,
        pipeline: EmotionPipeline,
        image_loader: ImageLoaderInterface,
    ):
        self.pipeline = pipeline
        self.image_loader = image_loader

    def detect_from_url(self, image_url: str) -> DetectionResult:
        """Detect emotion in an image URL"""
        # Load image
        image = self.image_loader.load_from_url(image_url)
        if image is None:
            return self._load_failure("Failed to load image from URL")

        return self.pipeline.detect(image)

    def detect_from_bytes(self, image_data: bytes) -> DetectionResult:
        """Detect emotion in image bytes"""
        # Load image
        image = self.image_loader.load_from_bytes(image_data)
        if image is None:
            return self._load_failure("Failed to decode image")

        return self.pipeline.detect(image)

    def get_health(self) -> HealthStatus:
        """Get service health status"""
        return self.pipeline.get_health()

    def is_ready(self) -> bool:
        """Check if service is ready"""
        return self.pipeline.is_ready()

    @staticmethod
    def _load_failure(message: str) -> DetectionResult:
        logger.error(message)
        return DetectionResult(
            success=False,
            state=PipelineState.FAILED.value,
            status=STATUS_ERROR,
            reason="DetectionFailed",
            error=message,
        )
