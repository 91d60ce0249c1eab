"""Image I/O using OpenCV. Keeps 16-bit samples and alpha."""

import cv2
import numpy as np


def _to_rgb(img: np.ndarray) -> np.ndarray:
    if img.ndim == 2:
        return img
    if img.shape[2] == 4:
        return cv2.cvtColor(img, cv2.COLOR_BGRA2RGBA)
    return cv2.cvtColor(img, cv2.COLOR_BGR2RGB)


def _to_bgr(img: np.ndarray) -> np.ndarray:
    if img.ndim == 2 or img.shape[2] == 1:
        return img
    if img.shape[2] == 4:
        return cv2.cvtColor(img, cv2.COLOR_RGBA2BGRA)
    return cv2.cvtColor(img, cv2.COLOR_RGB2BGR)


def decode_image(data: bytes) -> np.ndarray:
    """Decode encoded bytes as RGB(A) or grey, uint8 or uint16 as stored."""
    buf = np.frombuffer(data, dtype=np.uint8)
    img = cv2.imdecode(buf, cv2.IMREAD_UNCHANGED) if buf.size else None
    if img is None:
        raise ValueError("Could not decode image data")
    return _to_rgb(img)


def encode_png(image: np.ndarray) -> bytes:
    """Encode an RGB(A) or grey array as PNG bytes."""
    ok, buf = cv2.imencode('.png', _to_bgr(image))
    if not ok:
        raise ValueError("Could not encode image as PNG")
    return buf.tobytes()


def read_bytes(path: str) -> bytes:
    with open(path, 'rb') as f:
        return f.read()


def save_image(image: np.ndarray, path: str) -> None:
    """Save RGB(A) image."""
    if not cv2.imwrite(path, _to_bgr(image)):
        raise ValueError(f"Could not save image to {path}")
