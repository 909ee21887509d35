"""
Emotion detection pipeline - application layer

Runs one request through localize -> crop -> normalize -> classify -> rank.
Every outcome, success or failure, comes back as a DetectionResult.
"""
import logging
import threading
import time
from typing import List, Optional

import numpy as np

from emoteapi import __version__
from emoteapi.domain.errors import (
    ClassifierInvocationError,
    DetectionFailed,
    ModelsNotReady,
    NoFaceDetected,
    PipelineBusy,
    PipelineError,
)
from emoteapi.domain.geometry import DEFAULT_CROP_MARGIN, crop_region
from emoteapi.domain.interfaces import EmotionClassifierInterface, FaceLocalizerInterface
from emoteapi.domain.models import (
    STATUS_ANALYZED,
    STATUS_ERROR,
    STATUS_NO_FACE,
    CropRegion,
    DetectionResult,
    EmotionPrediction,
    HealthStatus,
)
from emoteapi.domain.state import PipelineEvent, PipelineState, transition
from .preprocessing import DEFAULT_INPUT_SIZE, to_model_input
from .ranking import DEFAULT_PROBABILITY_THRESHOLD, rank_predictions

logger = logging.getLogger(__name__)


class EmotionPipeline:
    """Single-face emotion pipeline over injected localizer and classifier.

    Not reentrant: a request made while another is in flight fails with
    PipelineBusy.
    """

    def __init__(
        self,
        localizer: Optional[FaceLocalizerInterface],
        classifier: Optional[EmotionClassifierInterface],
        crop_margin: float = DEFAULT_CROP_MARGIN,
        probability_threshold: float = DEFAULT_PROBABILITY_THRESHOLD,
        input_size: int = DEFAULT_INPUT_SIZE,
    ):
        self.localizer = localizer
        self.classifier = classifier
        self.crop_margin = crop_margin
        self.probability_threshold = probability_threshold
        self.input_size = input_size

        self._state = PipelineState.IDLE
        self._in_flight = threading.Lock()

    @property
    def state(self) -> PipelineState:
        return self._state

    def is_ready(self) -> bool:
        """Both collaborators present and initialized"""
        return (
            self.localizer is not None
            and self.classifier is not None
            and self.localizer.is_ready()
            and self.classifier.is_ready()
        )

    def get_health(self) -> HealthStatus:
        return HealthStatus(
            status="ok" if self.is_ready() else "error",
            localizer=self.localizer.name if self.localizer else "missing",
            classifier=self.classifier.name if self.classifier else "missing",
            version=__version__,
            details={"state": self._state.value},
        )

    def detect(self, image: np.ndarray) -> DetectionResult:
        """Detect the first face in the image and rank its emotions"""
        if not self._in_flight.acquire(blocking=False):
            logger.warning("Rejected detection request: pipeline busy")
            return self._failure(
                PipelineBusy("A detection request is already in flight"),
                state=PipelineState.FAILED,
            )

        start_time = time.time()
        region: Optional[CropRegion] = None
        try:
            if not self.is_ready():
                raise ModelsNotReady("Face localizer or emotion classifier not loaded")
            self._advance(PipelineEvent.REQUEST)

            faces = self._localize(image)
            if not faces:
                raise NoFaceDetected("No faces detected")
            if len(faces) > 1:
                logger.debug(f"{len(faces)} faces detected, using the first")
            self._advance(PipelineEvent.FACE_FOUND)

            region = crop_region(faces[0].landmarks, margin=self.crop_margin)
            self._advance(PipelineEvent.REGION_DERIVED)

            tensor = to_model_input(image, region, size=self.input_size)
            self._advance(PipelineEvent.TENSOR_READY)

            predictions = self._classify(tensor)
            self._advance(PipelineEvent.RANKED)

            processing_time = int((time.time() - start_time) * 1000)
            top = predictions[0] if predictions else None
            logger.info(
                f"Emotion analyzed in {processing_time}ms: "
                f"{top.display() if top else 'no emotion above threshold'}"
            )
            return DetectionResult(
                success=True,
                state=self._state.value,
                status=STATUS_ANALYZED,
                predictions=predictions,
                region=region,
                processing_time_ms=processing_time,
            )

        except PipelineError as e:
            self._advance(PipelineEvent.FAIL)
            return self._failure(e, state=self._state, region=region, start_time=start_time)

        except Exception as e:
            logger.exception(f"Unexpected failure during emotion detection: {e}")
            self._advance(PipelineEvent.FAIL)
            return self._failure(
                DetectionFailed(str(e)), state=self._state, region=region, start_time=start_time,
            )

        finally:
            self._in_flight.release()

    def _advance(self, event: PipelineEvent):
        self._state = transition(self._state, event)

    def _localize(self, image: np.ndarray):
        try:
            return self.localizer.detect(image)
        except PipelineError:
            raise
        except Exception as e:
            raise DetectionFailed(f"Face localizer failed: {e}") from e

    def _classify(self, tensor: np.ndarray) -> List[EmotionPrediction]:
        try:
            probabilities = self.classifier.predict(tensor)
        except Exception as e:
            raise ClassifierInvocationError(f"Emotion classifier failed: {e}") from e

        return rank_predictions(probabilities, threshold=self.probability_threshold)

    def _failure(
        self,
        error: PipelineError,
        state: PipelineState,
        region: Optional[CropRegion] = None,
        start_time: Optional[float] = None,
    ) -> DetectionResult:
        if isinstance(error, NoFaceDetected):
            logger.info("No faces detected")
            status = STATUS_NO_FACE
        else:
            logger.error(f"Detection failed ({error.reason}): {error}")
            status = STATUS_ERROR

        processing_time = int((time.time() - start_time) * 1000) if start_time else 0
        return DetectionResult(
            success=False,
            state=state.value,
            status=status,
            reason=error.reason,
            error=str(error),
            region=region,
            processing_time_ms=processing_time,
        )
