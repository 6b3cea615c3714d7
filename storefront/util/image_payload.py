"""Decoding of base64 image payloads sent to the product callables."""

import base64
import binascii
from typing import Any, Dict, Optional, Tuple

from storefront.exceptions import ValidationError

MAX_IMAGE_BYTES = 10 * 1024 * 1024


def decode_image_payload(payload: Optional[Dict[str, Any]]) -> Optional[Tuple[str, bytes, Optional[str]]]:
    """Return ``(filename, data, content_type)`` or None when no image was sent.

    Raises:
        ValidationError: If the payload is malformed, not base64, or too large
    """
    if not payload:
        return None
    if not isinstance(payload, dict) or not payload.get("data"):
        raise ValidationError("Image payload must include base64 data", field="image")

    encoded = payload["data"]
    # Accept data URLs as produced by FileReader.readAsDataURL
    if encoded.startswith("data:") and "," in encoded:
        encoded = encoded.split(",", 1)[1]
    try:
        data = base64.b64decode(encoded, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValidationError("Image data is not valid base64", field="image") from e

    if not data:
        raise ValidationError("Image is empty", field="image")
    if len(data) > MAX_IMAGE_BYTES:
        raise ValidationError("Image is larger than 10 MB", field="image")

    return payload.get("filename") or "image", data, payload.get("contentType")
