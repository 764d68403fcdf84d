from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.init import get_db
from schemas.staff_schema import StaffCreate, StaffResponse, StaffUpdate
from services.staff_service import StaffService
from responses.success import created_response, data_response, success_response
from responses.error import error_response, internal_server_error
from utils.exceptions import AppError
from utils.logging import get_logger

router = APIRouter(prefix="/Staff", tags=["Staff"])
logger = get_logger(__name__)

staff_service = StaffService()


@router.get("")
def get_available_staff(db: Session = Depends(get_db)):
    """Only staff that can currently be assigned, by name."""
    try:
        staff = staff_service.get_available_staff(db)
        return data_response([StaffResponse.model_validate(s) for s in staff])
    except Exception:
        logger.exception("fetch_staff_failed")
        return internal_server_error("Failed to fetch staff")


@router.post("")
def create_staff(payload: StaffCreate, db: Session = Depends(get_db)):
    try:
        staff = staff_service.create_staff(db, payload)
        return created_response("Staff added", id=staff.StaffID)
    except AppError as e:
        return error_response(e)
    except Exception:
        logger.exception("create_staff_failed")
        return internal_server_error("Failed to add staff")


@router.put("/{staff_id}")
def update_staff(staff_id: int, payload: StaffUpdate, db: Session = Depends(get_db)):
    try:
        staff_service.update_staff(db, staff_id, payload)
        return success_response("Staff updated successfully")
    except AppError as e:
        return error_response(e)
    except Exception:
        logger.exception("update_staff_failed", staff_id=staff_id)
        return internal_server_error("Failed to update staff")


@router.delete("/{staff_id}")
def delete_staff(staff_id: int, db: Session = Depends(get_db)):
    try:
        staff_service.delete_staff(db, staff_id)
        return success_response("Staff deleted successfully")
    except AppError as e:
        return error_response(e)
    except Exception:
        logger.exception("delete_staff_failed", staff_id=staff_id)
        return internal_server_error("Failed to delete staff")
