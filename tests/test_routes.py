from io import BytesIO

import pytest
from PIL import Image

from emoteapi.app import create_app
from emoteapi.application.emotion_pipeline import EmotionPipeline
from emoteapi.application.emotion_service import EmotionDetectionService
from emoteapi.infrastructure.image_loader import ImageLoader

from conftest import FakeClassifier, FakeImageLoader, FakeLocalizer


def _client(localizer, classifier, image_loader=None):
    service = EmotionDetectionService(
        EmotionPipeline(localizer, classifier),
        image_loader or ImageLoader(),
    )
    return create_app(service=service).test_client()


@pytest.fixture
def png():
    buffer = BytesIO()
    Image.new("RGB", (100, 100), (128, 128, 128)).save(buffer, format="PNG")
    return buffer.getvalue()


def test_detect(face, png):
    client = _client(FakeLocalizer([face]), FakeClassifier())

    response = client.post("/detect", data=png, content_type="application/octet-stream")

    assert response.status_code == 200
    body = response.get_json()
    assert body["success"] is True
    assert body["status"] == "Face detected and emotion analyzed!"
    assert body["predictions"][0]["emotion"] == "Happy"


def test_detect_no_face(png):
    client = _client(FakeLocalizer([]), FakeClassifier())

    response = client.post("/detect", data=png)

    assert response.status_code == 422
    body = response.get_json()
    assert body["reason"] == "NoFaceDetected"
    assert body["status"] == "No faces detected"
    assert body["predictions"] is None


def test_detect_classifier_failure(face, png):
    client = _client(FakeLocalizer([face]), FakeClassifier(error=RuntimeError("boom")))

    response = client.post("/detect", data=png)

    assert response.status_code == 500
    assert response.get_json()["reason"] == "ClassifierInvocationError"


def test_detect_missing_body(face):
    client = _client(FakeLocalizer([face]), FakeClassifier())

    response = client.post("/detect")

    assert response.status_code == 400


def test_detect_not_ready(face, png):
    client = _client(FakeLocalizer([face]), FakeClassifier(ready=False))

    assert client.post("/detect", data=png).status_code == 503
    assert client.get("/ready").status_code == 503
    assert client.get("/health").get_json()["status"] == "error"


def test_detect_url(face, image):
    client = _client(FakeLocalizer([face]), FakeClassifier(), FakeImageLoader(image))

    response = client.post("/detect-url", json={"image_url": "http://example.com/face.png"})

    assert response.status_code == 200
    assert response.get_json()["success"] is True


def test_detect_url_missing_url(face):
    client = _client(FakeLocalizer([face]), FakeClassifier())

    response = client.post("/detect-url", json={})

    assert response.status_code == 400


def test_ready_and_health(face):
    client = _client(FakeLocalizer([face]), FakeClassifier())

    assert client.get("/ready").get_json() == {"ready": True}
    assert client.get("/health").get_json()["status"] == "ok"
