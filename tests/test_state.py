import pytest

from emoteapi.domain.state import PipelineEvent, PipelineState, transition


def test_happy_path_transitions():
    state = PipelineState.IDLE
    for event in (
        PipelineEvent.REQUEST,
        PipelineEvent.FACE_FOUND,
        PipelineEvent.REGION_DERIVED,
        PipelineEvent.TENSOR_READY,
        PipelineEvent.RANKED,
    ):
        state = transition(state, event)

    assert state is PipelineState.RANKED


@pytest.mark.parametrize("state", list(PipelineState))
def test_fail_from_any_state(state):
    assert transition(state, PipelineEvent.FAIL) is PipelineState.FAILED


def test_terminal_states_accept_new_request():
    assert transition(PipelineState.RANKED, PipelineEvent.REQUEST) is PipelineState.FACE_LOCALIZING
    assert transition(PipelineState.FAILED, PipelineEvent.REQUEST) is PipelineState.FACE_LOCALIZING


def test_in_flight_states_reject_request():
    with pytest.raises(ValueError):
        transition(PipelineState.CLASSIFYING, PipelineEvent.REQUEST)


def test_skipping_a_stage_is_illegal():
    with pytest.raises(ValueError):
        transition(PipelineState.FACE_LOCALIZING, PipelineEvent.TENSOR_READY)
