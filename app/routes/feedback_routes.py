from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.init import get_db
from schemas.feedback_schema import FeedbackCreate, FeedbackResponse
from services.feedback_service import FeedbackService
from responses.success import created_response, data_response, success_response
from responses.error import error_response, internal_server_error
from utils.exceptions import AppError
from utils.logging import get_logger

router = APIRouter(prefix="/Feedback", tags=["Feedback"])
logger = get_logger(__name__)

feedback_service = FeedbackService()


@router.get("")
def get_feedback(db: Session = Depends(get_db)):
    try:
        feedback = feedback_service.get_all(db)
        return data_response([FeedbackResponse.model_validate(f) for f in feedback])
    except Exception:
        logger.exception("fetch_feedback_failed")
        return internal_server_error("Failed to fetch feedback")


@router.post("")
def create_feedback(payload: FeedbackCreate, db: Session = Depends(get_db)):
    try:
        feedback = feedback_service.create_feedback(db, payload)
        return created_response("Feedback added successfully", FeedbackID=feedback.FeedbackID)
    except AppError as e:
        return error_response(e)
    except Exception:
        logger.exception("create_feedback_failed")
        return internal_server_error("Database error adding feedback")


@router.delete("/{feedback_id}")
def delete_feedback(feedback_id: int, db: Session = Depends(get_db)):
    try:
        feedback_service.delete_feedback(db, feedback_id)
        return success_response("Feedback deleted successfully")
    except AppError as e:
        return error_response(e)
    except Exception:
        logger.exception("delete_feedback_failed", feedback_id=feedback_id)
        return internal_server_error("Failed to delete feedback")
