"""Role Record document class."""

from typing import Optional

from google.api_core.exceptions import AlreadyExists

from storefront.apis.Db import Db
from storefront.documents.DocumentBase import DocumentBase
from storefront.models.firestore_types import RoleRecordDoc
from storefront.models.util_types import Role


class RoleRecord(DocumentBase[RoleRecordDoc]):
    """Maps an auth uid to exactly one role. Stored in ``users/{uid}``."""

    collection_name = "users"
    pydantic_model = RoleRecordDoc
    resource_type = "Role record"

    def _new_record(self, data: dict) -> RoleRecordDoc:
        return RoleRecordDoc(**{**data, "createdAt": Db.get_created_at()})

    def create_doc(self, data: dict):
        """Write ``{email, role, createdAt}``; Role Records carry no updatedAt."""
        record = self._new_record(data)
        self.get_doc_ref().set(record.model_dump())
        self._doc = record

    def create_if_missing(self, data: dict) -> bool:
        """Create the record unless one exists. Returns False when it already did."""
        record = self._new_record(data)
        try:
            self.get_doc_ref().create(record.model_dump())
        except AlreadyExists:
            return False
        self._doc = record
        return True

    def stored_role(self) -> Optional[Role]:
        """Role held by the stored record, or None when there is no record.

        An unexpected stored value reads as ``none``. Read errors propagate.
        """
        snapshot = self.get_doc_snap()
        if not snapshot.exists:
            return None
        return parse_role((snapshot.to_dict() or {}).get("role"))


def parse_role(value: Optional[str]) -> Role:
    if value in (Role.ADMIN.value, Role.CUSTOMER.value):
        return Role(value)
    return Role.NONE
