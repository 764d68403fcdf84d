from typing import Dict
from sqlalchemy.orm import Session

from database.models.property_model import Property, Room
from database.transaction import unit_of_work
from schemas.property_schema import PropertyCreate, PropertyUpdate
from services.base_service import BaseService
from utils.exceptions import NotFoundError
from utils.logging import get_logger

logger = get_logger(__name__)


class PropertyService(BaseService):
    required_fields = ("name", "location", "TotalRooms", "OwnerID")
    validation_message = "Missing required fields"
    not_found_message = "Property not found"
    conflict_message = "Invalid OwnerID provided"

    def __init__(self):
        super().__init__(Property)

    def create_property(self, db: Session, property_in: PropertyCreate) -> Property:
        return self.create(db, property_in, "Failed to add property")

    def update_property(
        self, db: Session, property_id: int, property_in: PropertyUpdate
    ) -> Property:
        self.validate(property_in)
        return self.update(
            db, property_id, property_in.model_dump(), "Failed to update property"
        )

    def delete_property(self, db: Session, property_id: int) -> Dict[str, int]:
        """Delete a property and every room that belongs to it in one transaction."""
        with unit_of_work(db, "Failed to delete property"):
            if self.get(db, property_id) is None:
                raise NotFoundError(self.not_found_message)

            rooms_deleted = (
                db.query(Room)
                .filter(Room.PropertyID == property_id)
                .delete(synchronize_session=False)
            )
            property_deleted = (
                db.query(Property)
                .filter(Property.PropertyID == property_id)
                .delete(synchronize_session=False)
            )
            if not property_deleted:
                raise NotFoundError("Property could not be deleted")

        logger.info(
            "property_deleted", property_id=property_id, rooms_deleted=rooms_deleted
        )
        return {"roomsDeleted": rooms_deleted, "propertyDeleted": property_deleted}
