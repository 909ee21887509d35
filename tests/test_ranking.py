import numpy as np
import pytest

from emoteapi.application.ranking import rank_predictions
from emoteapi.domain.errors import ClassifierOutputShapeError
from emoteapi.domain.models import EmotionLabel

from conftest import EXAMPLE_PROBABILITIES


def _pairs(predictions):
    return [(p.emotion.value, round(p.probability, 2)) for p in predictions]


def test_rank_predictions_example():
    ranked = rank_predictions(EXAMPLE_PROBABILITIES)

    assert _pairs(ranked) == [
        ("Happy", 95.0),
        ("Neutral", 2.0),
        ("Angry", 1.0),
        ("Sad", 1.0),
        ("Surprised", 1.0),
    ]


def test_rank_predictions_ties_keep_label_order():
    ranked = rank_predictions([0.2, 0.1, 0.2, 0.1, 0.2, 0.1, 0.1])

    assert [p.emotion for p in ranked] == [
        EmotionLabel.ANGRY,
        EmotionLabel.FEAR,
        EmotionLabel.NEUTRAL,
        EmotionLabel.DISGUST,
        EmotionLabel.HAPPY,
        EmotionLabel.SAD,
        EmotionLabel.SURPRISED,
    ]


def test_rank_predictions_drops_negligible_values():
    ranked = rank_predictions([1e-7, 2e-6, 0.0, 0.5, 0.5, 0.0, 0.0])

    assert [p.emotion for p in ranked] == [
        EmotionLabel.HAPPY,
        EmotionLabel.NEUTRAL,
        EmotionLabel.DISGUST,
    ]


def test_rank_predictions_custom_threshold():
    ranked = rank_predictions(EXAMPLE_PROBABILITIES, threshold=1.5)

    assert [p.emotion for p in ranked] == [EmotionLabel.HAPPY, EmotionLabel.NEUTRAL]


def test_rank_predictions_accepts_batch_of_one():
    ranked = rank_predictions(np.array([EXAMPLE_PROBABILITIES]))

    assert ranked[0].emotion is EmotionLabel.HAPPY


@pytest.mark.parametrize("output", [
    [0.1] * 6,
    [0.1] * 8,
    [[0.1] * 7, [0.1] * 7],
    [],
    [[0.1] * 7, [0.1]],
    ["happy"] * 7,
    None,
])
def test_rank_predictions_rejects_wrong_shape(output):
    with pytest.raises(ClassifierOutputShapeError):
        rank_predictions(output)


def test_rank_predictions_sorted_filtered_and_idempotent():
    rng = np.random.default_rng(42)
    for _ in range(50):
        vector = rng.dirichlet(np.full(7, 0.3))
        vector[rng.integers(0, 7)] = 0.0

        ranked = rank_predictions(vector)

        probabilities = [p.probability for p in ranked]
        assert all(p > 0.0001 for p in probabilities)
        assert probabilities == sorted(probabilities, reverse=True)
        assert sorted(ranked, key=lambda p: p.probability, reverse=True) == ranked


def test_prediction_display():
    top = rank_predictions(EXAMPLE_PROBABILITIES)[0]

    assert top.display() == "\U0001F60A Happy: 95.00%"
    assert top.to_dict()["emotion"] == "Happy"
