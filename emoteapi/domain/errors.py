"""
Detection failure taxonomy
"""


class PipelineError(Exception):
    """Base class for terminal failures of a detection request"""

    @property
    def reason(self) -> str:
        return type(self).__name__


class ModelsNotReady(PipelineError):
    """Localizer or classifier missing or not initialized"""


class PipelineBusy(PipelineError):
    """Another request is already in flight on this pipeline"""


class NoFaceDetected(PipelineError):
    """The localizer returned no faces (an expected outcome)"""


class InvalidGeometry(PipelineError):
    """Landmarks do not yield a positive square crop"""


class EmptyCropError(PipelineError):
    """Crop has zero area"""


class ClassifierOutputShapeError(PipelineError):
    """Classifier returned a vector that does not have one entry per emotion"""


class ClassifierInvocationError(PipelineError):
    """The classifier call itself failed"""


class DetectionFailed(PipelineError):
    """Unexpected collaborator fault"""
