"""Document base class for Firestore operations."""

from datetime import datetime
from typing import Type, Optional, TypeVar, Generic
from pydantic import BaseModel
from google.api_core.exceptions import FailedPrecondition
from google.cloud.firestore import Client
from google.cloud.firestore_v1.collection import CollectionReference

from storefront.apis.Db import Db
from storefront.exceptions import ConflictError, NotFoundError, ProjectError

DocLike = TypeVar('DocLike', bound=BaseModel)


def remove_none_values(d):
    """Recursively remove None values from dictionaries."""
    if isinstance(d, dict):
        return {k: remove_none_values(v) for k, v in d.items() if v is not None}
    elif isinstance(d, list):
        return [remove_none_values(v) for v in d if v is not None]
    else:
        return d


def ignore_none(func):
    """Decorator to remove None values from the data argument."""

    def wrapper(self, data, *args, **kwargs):
        return func(self, remove_none_values(data), *args, **kwargs)

    return wrapper


class DocumentBase(Generic[DocLike]):
    """Typed wrapper around one Firestore document.

    Subclasses set ``collection_name`` and ``pydantic_model``. A collection
    reference can be injected, otherwise it comes from the ``Db`` registry.
    """
    collection_name: str = None  # type: ignore
    pydantic_model: Type[DocLike] = None  # type: ignore
    resource_type: str = "Document"
    _doc: Optional[DocLike] = None

    def __init__(
        self,
        id: Optional[str],
        doc: Optional[dict] = None,
        collection_ref: Optional[CollectionReference] = None,
        fetch: bool = True,
    ):
        """
        Initialize the document.
        :param id: Id of the document; a new id is allocated when falsy.
        :param doc: Known document data, skips the fetch.
        :param collection_ref: Collection to use instead of the Db registry.
        :param fetch: Load the document now. False gives a bare reference for writes.
        """
        if not self.pydantic_model:
            raise ProjectError("pydantic_model is not set", code="INTERNAL")
        self.collection_ref = collection_ref or Db.get_instance().collections[self.collection_name]
        self.id = id or self.collection_ref.document().id

        if doc:
            self._doc = self.pydantic_model(**{**doc, "id": self.id})
        elif fetch:
            self._init_doc()

    def _init_doc(self):
        snapshot = self.get_doc_snap()
        if not snapshot.exists:
            raise NotFoundError(self.resource_type, self.id)
        self._doc = self.from_snapshot(snapshot)

    @classmethod
    def from_snapshot(cls, snapshot) -> DocLike:
        return cls.pydantic_model(**{**snapshot.to_dict(), "id": snapshot.id})

    @property
    def doc(self) -> DocLike:
        if self._doc:
            return self._doc
        else:
            raise ProjectError("Document is not loaded", code="INTERNAL")

    def create_doc(self, data: dict):
        """Write a new document with createdAt == updatedAt."""
        now = Db.get_created_at()
        new_data = {
            **data,
            "createdAt": now,
            "updatedAt": now,
        }
        self.get_doc_ref().set(new_data)
        self._doc = self.pydantic_model(**{**new_data, "id": self.id})

    @ignore_none
    def update_doc(self, data: dict):
        """Merge fields into the stored document and refresh updatedAt.

        Existence is not checked first; Firestore rejects the write if the
        document is missing.
        """
        data["updatedAt"] = Db.get_created_at()
        self.get_doc_ref().update(data)
        self._doc = None

    @ignore_none
    def update_doc_if_unchanged(self, data: dict, expected_updated_at: datetime):
        """Update only if the stored updatedAt still equals ``expected_updated_at``."""
        doc_ref = self.get_doc_ref()
        snapshot = doc_ref.get()
        if not snapshot.exists:
            raise NotFoundError(self.resource_type, self.id)
        if snapshot.to_dict().get("updatedAt") != expected_updated_at:
            raise ConflictError(self.resource_type, self.id)

        data["updatedAt"] = Db.get_created_at()
        # Precondition closes the window between the read and the write
        try:
            doc_ref.update(data, option=Client.write_option(last_update_time=snapshot.update_time))
        except FailedPrecondition as e:
            raise ConflictError(self.resource_type, self.id) from e
        self._doc = None

    def delete(self):
        self.get_doc_ref().delete()
        self._doc = None

    def get_doc_ref(self):
        return self.collection_ref.document(self.id)

    def get_doc_snap(self):
        return self.get_doc_ref().get()
