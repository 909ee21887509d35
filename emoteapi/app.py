"""
Emote API - facial emotion detection service
Main application entry point
"""
import logging
import sys

from flask import Flask
from flask_cors import CORS

from emoteapi.config import get_config
from emoteapi.application.emotion_pipeline import EmotionPipeline
from emoteapi.application.emotion_service import EmotionDetectionService
from emoteapi.api.routes import api, init_routes

logger = logging.getLogger(__name__)


def configure_logging():
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )


def build_service() -> EmotionDetectionService:
    """Load both models and wire them into the detection service"""
    # Imported here so the web layer can be built without the model runtimes
    from emoteapi.infrastructure.image_loader import ImageLoader
    from emoteapi.infrastructure.keras_classifier import KerasEmotionClassifier
    from emoteapi.infrastructure.mediapipe_localizer import MediaPipeFaceLocalizer

    config = get_config()

    logger.info("Loading face localizer and emotion classifier...")
    try:
        localizer = MediaPipeFaceLocalizer()
        classifier = KerasEmotionClassifier()
    except Exception as e:
        logger.error(f"Failed to load models: {e}")
        raise

    pipeline = EmotionPipeline(
        localizer=localizer,
        classifier=classifier,
        crop_margin=config.CROP_MARGIN,
        probability_threshold=config.PROBABILITY_THRESHOLD,
        input_size=config.INPUT_SIZE,
    )
    return EmotionDetectionService(pipeline=pipeline, image_loader=ImageLoader())


def create_app(service: EmotionDetectionService = None) -> Flask:
    """Application factory"""
    config = get_config()

    app = Flask(__name__)
    app.config['DEBUG'] = config.DEBUG

    # Enable CORS
    CORS(app)

    if service is None:
        service = build_service()

    # Initialize routes with service
    init_routes(service)

    # Register blueprint
    app.register_blueprint(api)

    logger.info("Application initialized successfully")
    return app


def main():
    """Main entry point"""
    configure_logging()
    config = get_config()

    logger.info(f"Starting Emote API on {config.HOST}:{config.PORT}")
    logger.info(f"Emotion model: {config.EMOTION_MODEL_PATH}")

    app = create_app()
    app.run(
        host=config.HOST,
        port=config.PORT,
        debug=config.DEBUG,
        threaded=True,
    )


if __name__ == '__main__':
    main()
