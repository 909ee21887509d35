"""
Crop extraction and classifier input normalization
"""
import logging

import numpy as np

from emoteapi.domain.errors import EmptyCropError
from emoteapi.domain.models import CropRegion

logger = logging.getLogger(__name__)

DEFAULT_INPUT_SIZE = 48


def extract_region(image: np.ndarray, region: CropRegion) -> np.ndarray:
    """Copy the square region out of the image as (size, size, channels).

    Coordinates are truncated to integers. Samples that fall outside the
    image are left at zero so the crop stays square.
    """
    if image.ndim == 2:
        image = image[:, :, np.newaxis]

    height, width, channels = image.shape
    x0 = int(region.x)
    y0 = int(region.y)
    size = int(region.width)
    if size <= 0:
        raise EmptyCropError(f"Crop of size {region.width} has no pixels")

    crop = np.zeros((size, size, channels), dtype=image.dtype)

    # Overlap of the crop with the image, in image coordinates
    src_x1, src_x2 = max(x0, 0), min(x0 + size, width)
    src_y1, src_y2 = max(y0, 0), min(y0 + size, height)

    if src_x2 > src_x1 and src_y2 > src_y1:
        crop[src_y1 - y0:src_y2 - y0, src_x1 - x0:src_x2 - x0] = \
            image[src_y1:src_y2, src_x1:src_x2]
    else:
        logger.warning(f"Crop {region} lies entirely outside {width}x{height} image")

    return crop


def resize_bilinear(pixels: np.ndarray, size: int) -> np.ndarray:
    """Bilinear resize of an (H, W, C) array to (size, size, C) float32.

    Uses the legacy sampling grid (no half-pixel centres, corners not
    aligned): source = dst * in / out, neighbours clamped to the edge.
    """
    in_h, in_w = pixels.shape[:2]

    ys = np.arange(size, dtype=np.float32) * (in_h / size)
    xs = np.arange(size, dtype=np.float32) * (in_w / size)

    y0 = np.floor(ys).astype(np.int64)
    x0 = np.floor(xs).astype(np.int64)
    y1 = np.minimum(y0 + 1, in_h - 1)
    x1 = np.minimum(x0 + 1, in_w - 1)

    dy = (ys - y0)[:, np.newaxis, np.newaxis]
    dx = (xs - x0)[np.newaxis, :, np.newaxis]

    # Gather the sampled rows and columns before converting to float
    top_rows = pixels[y0]
    bottom_rows = pixels[y1]
    top_left = top_rows[:, x0].astype(np.float32)
    top_right = top_rows[:, x1].astype(np.float32)
    bottom_left = bottom_rows[:, x0].astype(np.float32)
    bottom_right = bottom_rows[:, x1].astype(np.float32)

    top = top_left + (top_right - top_left) * dx
    bottom = bottom_left + (bottom_right - bottom_left) * dx
    return top + (bottom - top) * dy


def normalize_region(pixels: np.ndarray, size: int = DEFAULT_INPUT_SIZE) -> np.ndarray:
    """Turn a square crop into a [1, size, size, 1] float32 tensor.

    Resize, then average the channels with equal weight. Values keep the
    source range; the classifier was trained on unscaled pixels.
    """
    if pixels.ndim == 2:
        pixels = pixels[:, :, np.newaxis]
    if pixels.size == 0 or pixels.shape[0] == 0 or pixels.shape[1] == 0:
        raise EmptyCropError(f"Cannot normalize empty crop of shape {pixels.shape}")

    resized = resize_bilinear(pixels, size)
    gray = resized.mean(axis=2, dtype=np.float32)
    return gray[np.newaxis, :, :, np.newaxis]


def to_model_input(
    image: np.ndarray,
    region: CropRegion,
    size: int = DEFAULT_INPUT_SIZE,
) -> np.ndarray:
    """Extract the region from the image and normalize it"""
    return normalize_region(extract_region(image, region), size=size)
