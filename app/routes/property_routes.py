from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.init import get_db
from schemas.property_schema import PropertyCreate, PropertyResponse, PropertyUpdate
from services.property_service import PropertyService
from responses.success import created_response, data_response, success_response
from responses.error import error_response, internal_server_error
from utils.exceptions import AppError
from utils.logging import get_logger

router = APIRouter(prefix="/Property", tags=["Property"])
logger = get_logger(__name__)

property_service = PropertyService()


@router.get("")
def get_properties(db: Session = Depends(get_db)):
    try:
        properties = property_service.get_all(db)
        return data_response([PropertyResponse.model_validate(p) for p in properties])
    except Exception:
        logger.exception("fetch_properties_failed")
        return internal_server_error("Failed to fetch properties")


@router.post("")
def create_property(payload: PropertyCreate, db: Session = Depends(get_db)):
    try:
        property_obj = property_service.create_property(db, payload)
        return created_response(
            "Property added successfully", PropertyID=property_obj.PropertyID
        )
    except AppError as e:
        return error_response(e)
    except Exception:
        logger.exception("create_property_failed")
        return internal_server_error("Failed to add property")


@router.put("/{property_id}")
def update_property(
    property_id: int, payload: PropertyUpdate, db: Session = Depends(get_db)
):
    try:
        property_service.update_property(db, property_id, payload)
        return success_response("Property updated successfully")
    except AppError as e:
        return error_response(e)
    except Exception:
        logger.exception("update_property_failed", property_id=property_id)
        return internal_server_error("Failed to update property")


@router.delete("/{property_id}")
def delete_property(property_id: int, db: Session = Depends(get_db)):
    """Delete a property together with all of its rooms."""
    try:
        result = property_service.delete_property(db, property_id)
        return success_response(
            "Property and associated rooms deleted successfully",
            deletedId=property_id,
            **result,
        )
    except AppError as e:
        return error_response(e)
    except Exception:
        logger.exception("delete_property_failed", property_id=property_id)
        return internal_server_error("Failed to delete property")
