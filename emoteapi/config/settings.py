"""
Application configuration settings
"""
import os
from dotenv import load_dotenv

load_dotenv()


class Config:
    """Base configuration"""
    # Flask
    DEBUG = os.getenv("DEBUG", "false").lower() == "true"
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", 5000))

    # Face localizer (MediaPipe face detection)
    MODEL_SELECTION = int(os.getenv("MODEL_SELECTION", 0))  # 0 = short range, 1 = full range
    MIN_DETECTION_CONFIDENCE = float(os.getenv("MIN_DETECTION_CONFIDENCE", 0.5))

    # Emotion classifier (Keras model, 48x48 grayscale input)
    EMOTION_MODEL_PATH = os.getenv("EMOTION_MODEL_PATH", "model/emotion_model.h5")

    # Pipeline settings
    CROP_MARGIN = float(os.getenv("CROP_MARGIN", 5))  # Pixels added to the half-width of the crop
    PROBABILITY_THRESHOLD = float(os.getenv("PROBABILITY_THRESHOLD", 0.0001))  # Percent
    INPUT_SIZE = int(os.getenv("INPUT_SIZE", 48))

    # Image settings
    MAX_IMAGE_SIZE = int(os.getenv("MAX_IMAGE_SIZE", 10 * 1024 * 1024))  # 10MB
    ALLOWED_MIME_TYPES = ["image/jpeg", "image/png", "image/webp", "image/gif", "application/octet-stream"]


class DevelopmentConfig(Config):
    """Development configuration"""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration"""
    DEBUG = False


def get_config():
    """Get configuration based on environment"""
    env = os.getenv("FLASK_ENV", "development")
    if env == "production":
        return ProductionConfig()
    return DevelopmentConfig()
