"""Role Records and cleanup for emulator product flow tests."""

import uuid

import pytest


class ProductFlowSetup:
    """Seeded admin and customer identities for one test."""

    def __init__(self, db, admin_uid: str, customer_uid: str, customer_email: str):
        self.db = db
        self.admin_uid = admin_uid
        self.customer_uid = customer_uid
        self.customer_email = customer_email

    def admin_headers(self):
        return {"User-Id": self.admin_uid}

    def customer_headers(self):
        return {"User-Id": self.customer_uid, "User-Email": self.customer_email}


@pytest.fixture(scope="function")
def product_flow_setup() -> ProductFlowSetup:
    """Write Role Records straight to the Firestore emulator and clean up afterwards."""
    from storefront.apis.Db import Db
    from storefront.models.firestore_types import RoleRecordDoc

    db = Db.get_instance()
    suffix = uuid.uuid4().hex[:8]
    admin_uid = f"admin-{suffix}"
    customer_uid = f"customer-{suffix}"
    customer_email = "customer3@example.com"

    for uid, email, role in ((admin_uid, f"{admin_uid}@example.com", "admin"),
                             (customer_uid, customer_email, "customer")):
        record = RoleRecordDoc(email=email, role=role, createdAt=db.get_created_at())
        db.collections["users"].document(uid).set(record.model_dump())

    existing = {snapshot.id for snapshot in db.collections["products"].get()}

    yield ProductFlowSetup(db, admin_uid, customer_uid, customer_email)

    db.collections["users"].document(admin_uid).delete()
    db.collections["users"].document(customer_uid).delete()
    for snapshot in db.collections["products"].get():
        if snapshot.id not in existing:
            snapshot.reference.delete()
