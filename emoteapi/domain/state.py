"""
Detection request state machine
"""
from enum import Enum


class PipelineState(Enum):
    IDLE = "Idle"
    FACE_LOCALIZING = "FaceLocalizing"
    CROPPING = "Cropping"
    NORMALIZING = "Normalizing"
    CLASSIFYING = "Classifying"
    RANKED = "Ranked"
    FAILED = "Failed"


class PipelineEvent(Enum):
    REQUEST = "request"
    FACE_FOUND = "face_found"
    REGION_DERIVED = "region_derived"
    TENSOR_READY = "tensor_ready"
    RANKED = "ranked"
    FAIL = "fail"


_TRANSITIONS = {
    (PipelineState.IDLE, PipelineEvent.REQUEST): PipelineState.FACE_LOCALIZING,
    (PipelineState.RANKED, PipelineEvent.REQUEST): PipelineState.FACE_LOCALIZING,
    (PipelineState.FAILED, PipelineEvent.REQUEST): PipelineState.FACE_LOCALIZING,
    (PipelineState.FACE_LOCALIZING, PipelineEvent.FACE_FOUND): PipelineState.CROPPING,
    (PipelineState.CROPPING, PipelineEvent.REGION_DERIVED): PipelineState.NORMALIZING,
    (PipelineState.NORMALIZING, PipelineEvent.TENSOR_READY): PipelineState.CLASSIFYING,
    (PipelineState.CLASSIFYING, PipelineEvent.RANKED): PipelineState.RANKED,
}


def transition(state: PipelineState, event: PipelineEvent) -> PipelineState:
    """Next state for (state, event); FAIL is accepted from any state.

    Raises ValueError for any other pair.
    """
    if event is PipelineEvent.FAIL:
        return PipelineState.FAILED
    try:
        return _TRANSITIONS[(state, event)]
    except KeyError:
        raise ValueError(f"Illegal transition: {state.value} on {event.value}") from None
