from datetime import date
from typing import List
from sqlalchemy.orm import Session

from database.models.feedback_model import Feedback
from schemas.feedback_schema import FeedbackCreate
from services.base_service import BaseService


class FeedbackService(BaseService):
    required_fields = ("Category", "Message", "Rating", "TenantID")
    validation_message = "All fields are required"
    not_found_message = "Feedback not found"
    conflict_message = "Invalid TenantID provided"

    def __init__(self):
        super().__init__(Feedback)

    def create_feedback(self, db: Session, feedback_in: FeedbackCreate) -> Feedback:
        self.validate(feedback_in)
        db_feedback = Feedback(**feedback_in.model_dump(), DateSubmitted=date.today())
        return self.create(db, db_feedback, "Database error adding feedback")

    def delete_feedback(self, db: Session, feedback_id: int) -> None:
        self.delete(db, feedback_id, "Failed to delete feedback")

    def get_feedback_for_tenant(self, db: Session, tenant_id: int) -> List[Feedback]:
        return (
            db.query(Feedback)
            .filter(Feedback.TenantID == tenant_id)
            .order_by(Feedback.FeedbackID)
            .all()
        )
