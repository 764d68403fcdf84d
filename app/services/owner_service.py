from sqlalchemy.orm import Session

from database.models.owner_model import Owner
from schemas.owner_schema import OwnerCreate, OwnerLogin, OwnerUpdate
from services.base_service import BaseService
from utils.exceptions import AuthError, ValidationError
from utils.logging import get_logger
from utils.validation import missing_fields

logger = get_logger(__name__)


class OwnerService(BaseService):
    required_fields = ("OwnerID", "name", "phone", "email", "address")
    validation_message = "All fields are required"
    not_found_message = "Owner not found"

    def __init__(self):
        super().__init__(Owner)

    def create_owner(self, db: Session, owner_in: OwnerCreate) -> Owner:
        return self.create(db, owner_in, "Failed to add owner")

    def update_owner(self, db: Session, owner_id: int, owner_in: OwnerUpdate) -> Owner:
        if missing_fields(owner_in, ("name", "phone", "email", "address")):
            raise ValidationError(self.validation_message)
        return self.update(db, owner_id, owner_in.model_dump(), "Failed to update owner")

    def delete_owner(self, db: Session, owner_id: int) -> None:
        self.delete(db, owner_id, "Failed to delete owner")

    def login(self, db: Session, credentials: OwnerLogin) -> Owner:
        if missing_fields(credentials, ("name", "ownerID")):
            raise ValidationError("Name and OwnerID are required")

        owner = (
            db.query(Owner)
            .filter(Owner.OwnerID == credentials.ownerID, Owner.name == credentials.name)
            .first()
        )
        if owner is None:
            logger.info("owner_login_failed", owner_id=credentials.ownerID)
            raise AuthError("Invalid owner credentials")
        return owner
