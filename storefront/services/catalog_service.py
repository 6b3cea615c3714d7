"""Catalog Store: CRUD over the ``products`` collection."""

from datetime import datetime
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError as PydanticValidationError

from storefront.apis.Db import Db
from storefront.documents.products.Product import Product
from storefront.exceptions import CatalogError, ConflictError, ValidationError
from storefront.models.firestore_types import PLACEHOLDER_ASSETS, ProductDoc, ProductInput, ProductUpdate
from storefront.models.util_types import ProductStatus
from storefront.services.asset_uploader import AssetUploader
from storefront.util.logger import get_logger

logger = get_logger(__name__)

FEATURED_LIMIT = 3


def is_placeholder_asset(image_url: Optional[str]) -> bool:
    return bool(image_url) and any(name in image_url for name in PLACEHOLDER_ASSETS)


def _validated(model, data: Union[Dict[str, Any], Any]):
    if isinstance(data, model):
        return data
    try:
        return model(**data)
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first.get("loc", ()))
        raise ValidationError(f"Invalid product field '{field}': {first.get('msg')}", field=field) from e


class CatalogStore:
    """Owns product records.

    Every failure of the underlying store is logged and collapsed into a
    ``CatalogError`` with a generic per-operation message. Validation and
    conflict errors pass through unchanged.
    """

    def __init__(self, collection_ref=None, uploader: Optional[AssetUploader] = None):
        self._collection_ref = collection_ref
        self.uploader = uploader or AssetUploader()

    @property
    def collection_ref(self):
        if self._collection_ref is None:
            self._collection_ref = Db.get_instance().collections["products"]
        return self._collection_ref

    def add(self, product: Union[Dict[str, Any], ProductInput]) -> str:
        """Create a product with createdAt == updatedAt and return its new id."""
        product_input = _validated(ProductInput, product)
        try:
            document = Product(None, collection_ref=self.collection_ref, fetch=False)
            document.create_doc(product_input.model_dump())
        except Exception as e:
            logger.error(f"Error adding product: {e}")
            raise CatalogError("Failed to add product") from e

        logger.info(f"Added product {document.id}")
        return document.id

    def list(self) -> List[ProductDoc]:
        """All products, newest first."""
        try:
            return Product.query(self.collection_ref)
        except Exception as e:
            logger.error(f"Error fetching products: {e}")
            raise CatalogError("Failed to fetch products") from e

    def list_active(self) -> List[ProductDoc]:
        """Active products, newest first. The status filter runs in Firestore."""
        try:
            return Product.query(self.collection_ref, status=ProductStatus.ACTIVE.value)
        except Exception as e:
            logger.error(f"Error fetching active products: {e}")
            raise CatalogError("Failed to fetch active products") from e

    def list_by_category(self, category: str) -> List[ProductDoc]:
        """Active products of one category, newest first."""
        try:
            return Product.query(self.collection_ref, status=ProductStatus.ACTIVE.value, category=category)
        except Exception as e:
            logger.error(f"Error fetching products by category: {e}")
            raise CatalogError("Failed to fetch products by category") from e

    def featured(self, limit: int = FEATURED_LIMIT) -> List[ProductDoc]:
        return self.list_active()[:limit]

    def update(
        self,
        product_id: str,
        fields: Union[Dict[str, Any], ProductUpdate],
        expected_updated_at: Optional[datetime] = None,
    ) -> None:
        """Merge ``fields`` into a product and refresh updatedAt.

        The id is not checked first. With ``expected_updated_at`` the write is
        conditional and a concurrent change raises ``ConflictError``.
        """
        updates = _validated(ProductUpdate, fields).model_dump(exclude_none=True)
        try:
            document = Product(product_id, collection_ref=self.collection_ref, fetch=False)
            if expected_updated_at is None:
                document.update_doc(updates)
            else:
                document.update_doc_if_unchanged(updates, expected_updated_at)
        except ConflictError:
            raise
        except Exception as e:
            logger.error(f"Error updating product {product_id}: {e}")
            raise CatalogError("Failed to update product") from e

        logger.info(f"Updated product {product_id}: {sorted(updates)}")

    def delete(self, product_id: str, image_url: Optional[str] = None) -> None:
        """Delete a product, then best-effort delete its uploaded image.

        The record delete happens first. Image deletion failures are logged
        and swallowed; placeholder images are never touched.
        """
        try:
            Product(product_id, collection_ref=self.collection_ref, fetch=False).delete()
        except Exception as e:
            logger.error(f"Error deleting product {product_id}: {e}")
            raise CatalogError("Failed to delete product") from e

        logger.info(f"Deleted product {product_id}")

        if image_url and not is_placeholder_asset(image_url):
            try:
                self.uploader.delete_by_url(image_url)
            except Exception as e:
                logger.warning(f"Could not delete image {image_url}: {e}")

    def toggle_status(self, product_id: str, current_status: str) -> str:
        """Flip active <-> inactive and return the new status."""
        new_status = Product.flipped_status(current_status)
        try:
            self.update(product_id, {"status": new_status})
        except Exception as e:
            logger.error(f"Error toggling product status: {e}")
            raise CatalogError("Failed to toggle product status") from e
        return new_status
