"""
Image loader implementation
"""
import logging
from typing import Optional
from io import BytesIO

import numpy as np
import cv2
import requests
from PIL import Image

from emoteapi.config import get_config
from emoteapi.domain.interfaces import ImageLoaderInterface

logger = logging.getLogger(__name__)


class ImageLoader(ImageLoaderInterface):
    """Decodes uploaded or linked images into RGB arrays"""

    def __init__(self, session: Optional[requests.Session] = None):
        self.config = get_config()
        self.session = session or requests.Session()
        self.session.headers.update({
            'User-Agent': 'EmoteAPI/1.0'
        })

    def load_from_url(self, url: str) -> Optional[np.ndarray]:
        """Load image from URL"""
        try:
            logger.info(f"Loading image from URL: {url[:100]}...")

            response = self.session.get(
                url,
                timeout=30,
                stream=True,
            )
            response.raise_for_status()

            content_type = response.headers.get('Content-Type', '').split(';')[0].strip()
            if content_type not in self.config.ALLOWED_MIME_TYPES:
                logger.warning(f"Unexpected content type: {content_type}")

            content_length = int(response.headers.get('Content-Length', 0))
            if content_length > self.config.MAX_IMAGE_SIZE:
                logger.error(f"Image too large: {content_length} bytes")
                return None

            return self.load_from_bytes(response.content)

        except requests.RequestException as e:
            logger.error(f"Failed to download image: {e}")
            return None
        except Exception as e:
            logger.error(f"Failed to load image from URL: {e}")
            return None

    def load_from_bytes(self, data: bytes) -> Optional[np.ndarray]:
        """Load image from bytes"""
        if not data:
            logger.error("Empty image payload")
            return None
        if len(data) > self.config.MAX_IMAGE_SIZE:
            logger.error(f"Image too large: {len(data)} bytes")
            return None

        return self._decode_image(data)

    def _decode_image(self, data: bytes) -> Optional[np.ndarray]:
        """Decode image bytes to an RGB numpy array"""
        try:
            # PIL first (better format support)
            pil_image = Image.open(BytesIO(data))

            # Alpha is dropped, palette and grayscale images expanded
            if pil_image.mode != 'RGB':
                pil_image = pil_image.convert('RGB')

            return np.array(pil_image)

        except Exception as e:
            logger.warning(f"PIL failed, trying OpenCV: {e}")

        # Fallback to OpenCV
        nparr = np.frombuffer(data, np.uint8)
        image = cv2.imdecode(nparr, cv2.IMREAD_COLOR)

        if image is None:
            logger.error("OpenCV failed to decode image")
            return None

        return cv2.cvtColor(image, cv2.COLOR_BGR2RGB)
