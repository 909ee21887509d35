"""
API routes/handlers
"""
import logging
from flask import Blueprint, request, jsonify

from emoteapi.application.emotion_service import EmotionDetectionService
from emoteapi.domain.models import DetectionResult

logger = logging.getLogger(__name__)

# Create blueprint
api = Blueprint('api', __name__)

# Service instance (injected)
emotion_service: EmotionDetectionService = None

# HTTP status per failure tag; anything unlisted is a server error
FAILURE_STATUS_CODES = {
    "NoFaceDetected": 422,
    "InvalidGeometry": 422,
    "EmptyCropError": 422,
    "PipelineBusy": 409,
    "ModelsNotReady": 503,
}


def init_routes(service: EmotionDetectionService):
    """Initialize routes with service dependency"""
    global emotion_service
    emotion_service = service


def _error(message: str, status_code: int):
    return jsonify({
        "success": False,
        "error": message,
        "predictions": None,
    }), status_code


def _respond(result: DetectionResult):
    if result.success:
        return jsonify(result.to_dict())
    return jsonify(result.to_dict()), FAILURE_STATUS_CODES.get(result.reason, 500)


@api.route('/health', methods=['GET'])
def health():
    """Health check endpoint"""
    status = emotion_service.get_health()
    return jsonify(status.to_dict())


@api.route('/detect', methods=['POST'])
def detect_from_bytes():
    """Detect emotion in raw image bytes"""
    if not emotion_service.is_ready():
        return _error("Service not ready", 503)

    image_data = request.get_data()
    if not image_data:
        return _error("No image data in request body", 400)

    return _respond(emotion_service.detect_from_bytes(image_data))


@api.route('/detect-url', methods=['POST'])
def detect_from_url():
    """Detect emotion in an image URL"""
    if not emotion_service.is_ready():
        return _error("Service not ready", 503)

    data = request.get_json(silent=True)
    if not data or 'image_url' not in data:
        return _error("Missing image_url in request body", 400)

    return _respond(emotion_service.detect_from_url(data['image_url']))


@api.route('/ready', methods=['GET'])
def ready():
    """Readiness check endpoint"""
    is_ready = emotion_service.is_ready()
    if is_ready:
        return jsonify({"ready": True})
    return jsonify({"ready": False}), 503
