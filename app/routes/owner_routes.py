from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.init import get_db
from schemas.owner_schema import OwnerCreate, OwnerLogin, OwnerResponse, OwnerUpdate
from services.owner_service import OwnerService
from responses.success import created_response, data_response, success_response
from responses.error import error_response, internal_server_error
from utils.exceptions import AppError
from utils.logging import get_logger

router = APIRouter(prefix="/Owner", tags=["Owner"])
logger = get_logger(__name__)

owner_service = OwnerService()


@router.get("")
def get_owners(db: Session = Depends(get_db)):
    try:
        owners = owner_service.get_all(db)
        return data_response([OwnerResponse.model_validate(o) for o in owners])
    except Exception:
        logger.exception("fetch_owners_failed")
        return internal_server_error("Failed to fetch owners")


@router.post("/login")
def login_owner(credentials: OwnerLogin, db: Session = Depends(get_db)):
    """Plain id + name match, no token is issued."""
    try:
        owner = owner_service.login(db, credentials)
        return data_response({"owner": OwnerResponse.model_validate(owner)})
    except AppError as e:
        return error_response(e)
    except Exception:
        logger.exception("owner_login_error")
        return internal_server_error("Database error during owner login")


@router.post("")
def create_owner(payload: OwnerCreate, db: Session = Depends(get_db)):
    try:
        owner = owner_service.create_owner(db, payload)
        return created_response("Owner added successfully", id=owner.OwnerID)
    except AppError as e:
        return error_response(e)
    except Exception:
        logger.exception("create_owner_failed")
        return internal_server_error("Failed to add owner")


@router.put("/{owner_id}")
def update_owner(owner_id: int, payload: OwnerUpdate, db: Session = Depends(get_db)):
    try:
        owner_service.update_owner(db, owner_id, payload)
        return success_response("Owner updated successfully")
    except AppError as e:
        return error_response(e)
    except Exception:
        logger.exception("update_owner_failed", owner_id=owner_id)
        return internal_server_error("Failed to update owner")


@router.delete("/{owner_id}")
def delete_owner(owner_id: int, db: Session = Depends(get_db)):
    try:
        owner_service.delete_owner(db, owner_id)
        return success_response("Owner deleted successfully")
    except AppError as e:
        return error_response(e)
    except Exception:
        logger.exception("delete_owner_failed", owner_id=owner_id)
        return internal_server_error("Failed to delete owner")
