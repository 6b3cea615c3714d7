"""Product document class."""

from typing import List, Optional

from storefront.documents.DocumentBase import DocumentBase
from storefront.models.firestore_types import ProductDoc
from storefront.models.util_types import ProductStatus


class Product(DocumentBase[ProductDoc]):
    """Product document in the ``products`` collection."""

    collection_name = "products"
    pydantic_model = ProductDoc
    resource_type = "Product"

    @staticmethod
    def flipped_status(current_status: str) -> str:
        if current_status == ProductStatus.ACTIVE.value:
            return ProductStatus.INACTIVE.value
        return ProductStatus.ACTIVE.value

    @classmethod
    def query(cls, collection_ref, status: Optional[str] = None, category: Optional[str] = None) -> List[ProductDoc]:
        """Run a filtered query, newest first.

        Filters are pushed to Firestore; no client-side matching happens here.
        """
        query = collection_ref
        if category is not None:
            query = query.where("category", "==", category)
        if status is not None:
            query = query.where("status", "==", status)
        snapshots = query.order_by("createdAt", direction="DESCENDING").get()
        return [cls.from_snapshot(snapshot) for snapshot in snapshots]
