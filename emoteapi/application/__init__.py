"""
Application layer: preprocessing, ranking and the detection pipeline
"""
from .emotion_pipeline import EmotionPipeline
from .emotion_service import EmotionDetectionService
from .preprocessing import extract_region, normalize_region, resize_bilinear, to_model_input
from .ranking import rank_predictions
