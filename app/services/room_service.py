from typing import List
from sqlalchemy.orm import Session

from database.models.property_model import Room
from schemas.property_schema import RoomCreate, RoomUpdate
from services.base_service import BaseService


class RoomService(BaseService):
    required_fields = ("BedCount", "RentAmount", "RoomType", "PropertyID")
    validation_message = "Missing required fields"
    not_found_message = "Room not found"
    conflict_message = "Invalid PropertyID provided"

    def __init__(self):
        super().__init__(Room)

    def create_room(self, db: Session, room_in: RoomCreate) -> Room:
        if room_in.OccupiedBeds is None:
            room_in.OccupiedBeds = 0
        return self.create(db, room_in, "Failed to add room")

    def get_rooms_by_property(self, db: Session, property_id: int) -> List[Room]:
        return (
            db.query(Room)
            .filter(Room.PropertyID == property_id)
            .order_by(Room.RoomID)
            .all()
        )

    def update_room(self, db: Session, room_id: int, room_in: RoomUpdate) -> Room:
        self.validate(room_in)
        values = room_in.model_dump()
        if values["OccupiedBeds"] is None:
            values["OccupiedBeds"] = 0
        return self.update(db, room_id, values, "Failed to update room")

    def delete_room(self, db: Session, room_id: int) -> None:
        self.delete(db, room_id, "Failed to delete room")
