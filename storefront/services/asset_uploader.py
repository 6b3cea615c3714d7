"""Product image uploads to Cloud Storage."""

import uuid
from typing import Optional
from urllib.parse import quote, unquote, urlparse

from werkzeug.utils import secure_filename

from storefront.apis.Db import Db
from storefront.config.env_loader import get_emulator_host
from storefront.exceptions import UploadError
from storefront.util.logger import get_logger

logger = get_logger(__name__)

PRODUCT_IMAGE_FOLDER = "products"
DOWNLOAD_TOKEN_KEY = "firebaseStorageDownloadTokens"
DOWNLOAD_HOST = "firebasestorage.googleapis.com"


def build_storage_path(filename: str) -> str:
    """Collision-resistant object path, e.g. ``products/3f2c..._oil.png``."""
    safe_name = secure_filename(filename or "") or "image"
    return f"{PRODUCT_IMAGE_FOLDER}/{uuid.uuid4().hex}_{safe_name}"


def build_download_url(bucket_name: str, path: str, token: str) -> str:
    emulator_host = get_emulator_host("storage")
    base = f"http://{emulator_host}" if emulator_host else f"https://{DOWNLOAD_HOST}"
    return f"{base}/v0/b/{bucket_name}/o/{quote(path, safe='')}?alt=media&token={token}"


def storage_path_from_url(url: str) -> str:
    """Recover the object path from a download URL, ``gs://`` URL or public URL.

    Raises:
        ValueError: If the URL does not point into storage
    """
    parsed = urlparse(url)

    if parsed.scheme == "gs":
        path = parsed.path.lstrip("/")
    elif "/o/" in parsed.path and "/v0/b/" in parsed.path:
        path = unquote(parsed.path.split("/o/", 1)[1])
    elif parsed.netloc == "storage.googleapis.com":
        # https://storage.googleapis.com/<bucket>/<path>
        _, _, path = parsed.path.lstrip("/").partition("/")
        path = unquote(path)
    else:
        raise ValueError(f"Not a storage URL: {url}")

    if not path:
        raise ValueError(f"Storage URL has no object path: {url}")
    return path


class AssetUploader:
    """Uploads binary files to object storage and returns durable URLs."""

    def __init__(self, bucket=None):
        self._bucket = bucket

    @property
    def bucket(self):
        if self._bucket is None:
            self._bucket = Db.bucket()
        return self._bucket

    def upload(self, filename: str, data: bytes, content_type: Optional[str] = None) -> str:
        """Upload ``data`` under a fresh product path.

        Returns:
            Download URL carrying a Firebase download token

        Raises:
            UploadError: If the upload fails for any reason
        """
        path = build_storage_path(filename)
        token = uuid.uuid4().hex
        try:
            blob = self.bucket.blob(path)
            blob.metadata = {DOWNLOAD_TOKEN_KEY: token}
            blob.upload_from_string(data, content_type=content_type)
        except Exception as e:
            logger.error(f"Error uploading image {filename}: {e}")
            raise UploadError() from e

        logger.info(f"Uploaded image to {path}")
        return build_download_url(self.bucket.name, path, token)

    def delete_by_url(self, url: str) -> None:
        """Delete the object a URL points at. Errors propagate to the caller."""
        path = storage_path_from_url(url)
        self.bucket.blob(path).delete()
        logger.info(f"Deleted image {path}")
