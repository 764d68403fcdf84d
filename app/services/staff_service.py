from typing import List
from sqlalchemy.orm import Session

from database.models.staff_model import Staff
from enums.availability_status import AvailabilityStatus
from schemas.staff_schema import StaffCreate, StaffUpdate
from services.base_service import BaseService
from utils.exceptions import ValidationError
from utils.validation import missing_fields


class StaffService(BaseService):
    required_fields = ("StaffID", "name", "role", "contact")
    validation_message = "Missing required fields"
    not_found_message = "Staff not found"

    def __init__(self):
        super().__init__(Staff)

    def get_available_staff(self, db: Session) -> List[Staff]:
        return (
            db.query(Staff)
            .filter(Staff.AvailabilityStatus == AvailabilityStatus.AVAILABLE.value)
            .order_by(Staff.name)
            .all()
        )

    def create_staff(self, db: Session, staff_in: StaffCreate) -> Staff:
        if not staff_in.AvailabilityStatus:
            staff_in.AvailabilityStatus = AvailabilityStatus.AVAILABLE.value
        return self.create(db, staff_in, "Failed to add staff")

    def update_staff(self, db: Session, staff_id: int, staff_in: StaffUpdate) -> Staff:
        if missing_fields(staff_in, ("name", "role", "contact")):
            raise ValidationError(self.validation_message)
        values = staff_in.model_dump()
        if not values["AvailabilityStatus"]:
            values["AvailabilityStatus"] = AvailabilityStatus.AVAILABLE.value
        return self.update(db, staff_id, values, "Failed to update staff")

    def delete_staff(self, db: Session, staff_id: int) -> None:
        self.delete(db, staff_id, "Failed to delete staff")
