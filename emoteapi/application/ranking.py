"""
Classifier output postprocessing
"""
import logging
from typing import List, Sequence, Union

import numpy as np

from emoteapi.domain.errors import ClassifierOutputShapeError
from emoteapi.domain.models import EmotionLabel, EmotionPrediction

logger = logging.getLogger(__name__)

DEFAULT_PROBABILITY_THRESHOLD = 0.0001  # Percent; drops numerical noise only

EMOTIONS: List[EmotionLabel] = list(EmotionLabel)


def _as_vector(probabilities: Union[np.ndarray, Sequence[float]]) -> np.ndarray:
    try:
        vector = np.asarray(probabilities, dtype=np.float64)
    except (TypeError, ValueError) as e:
        raise ClassifierOutputShapeError(f"Classifier output is not a numeric vector: {e}") from e

    # Batch of one, as returned by model.predict
    if vector.ndim == 2 and vector.shape[0] == 1:
        vector = vector[0]

    if vector.ndim != 1 or vector.shape[0] != len(EMOTIONS):
        raise ClassifierOutputShapeError(
            f"Expected {len(EMOTIONS)} probabilities, got shape {vector.shape}"
        )
    return vector


def rank_predictions(
    probabilities: Union[np.ndarray, Sequence[float]],
    threshold: float = DEFAULT_PROBABILITY_THRESHOLD,
) -> List[EmotionPrediction]:
    """Label, scale to percent, filter and sort a probability vector.

    Entries at or below the threshold are removed before sorting. Sorting is
    stable, so equal probabilities keep label order.
    """
    vector = _as_vector(probabilities)

    predictions = [
        EmotionPrediction(emotion=label, probability=float(prob) * 100)
        for label, prob in zip(EMOTIONS, vector)
    ]
    kept = [p for p in predictions if p.probability > threshold]

    return sorted(kept, key=lambda p: p.probability, reverse=True)
