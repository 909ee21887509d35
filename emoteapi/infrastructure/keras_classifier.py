"""
TensorFlow/Keras implementation of the emotion classifier
"""
import logging

import numpy as np
import tensorflow as tf

from emoteapi.config import get_config
from emoteapi.domain.interfaces import EmotionClassifierInterface

logger = logging.getLogger(__name__)


class KerasEmotionClassifier(EmotionClassifierInterface):
    """Emotion classifier backed by a saved Keras model (48x48 grayscale input)"""

    def __init__(self, model_path: str = None):
        self.config = get_config()
        self.model_path = model_path or self.config.EMOTION_MODEL_PATH
        self.model: tf.keras.Model = None
        self.is_initialized = False
        self._initialize()

    @property
    def name(self) -> str:
        return self.model_path

    def _initialize(self):
        """Load the Keras model from disk"""
        try:
            logger.info(f"Loading emotion model: {self.model_path}")
            self.model = tf.keras.models.load_model(self.model_path, compile=False)
            self.is_initialized = True
            logger.info(f"Emotion model loaded, input shape {self.model.input_shape}")

        except Exception as e:
            logger.error(f"Failed to load emotion model: {e}")
            self.is_initialized = False
            raise

    def predict(self, tensor: np.ndarray) -> np.ndarray:
        """Probability vector for a single [1, 48, 48, 1] tensor"""
        predictions = self.model.predict(tensor, verbose=0)
        return np.asarray(predictions)[0]

    def is_ready(self) -> bool:
        """Check if classifier is ready"""
        return self.is_initialized
