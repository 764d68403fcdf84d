from typing import Optional
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.init import get_db
from schemas.service_request_schema import (
    ServiceRequestCreate,
    ServiceRequestResolve,
    ServiceRequestUpdate,
)
from services.service_request_service import ServiceRequestService
from responses.success import created_response, data_response, success_response
from responses.error import error_response, internal_server_error
from utils.exceptions import AppError
from utils.logging import get_logger

router = APIRouter(prefix="/ServiceRequest", tags=["ServiceRequest"])
logger = get_logger(__name__)

service_request_service = ServiceRequestService()


@router.get("")
def get_service_requests(
    ownerId: Optional[int] = None,
    tenantId: Optional[int] = None,
    db: Session = Depends(get_db),
):
    """List requests, optionally for one owner's tenants or for one tenant."""
    try:
        requests = service_request_service.get_requests(db, ownerId, tenantId)
        return data_response(requests)
    except Exception:
        logger.exception("fetch_service_requests_failed")
        return internal_server_error("Failed to fetch service requests")


@router.post("")
def create_service_request(payload: ServiceRequestCreate, db: Session = Depends(get_db)):
    try:
        request = service_request_service.create_request(db, payload)
        return created_response(
            "Service request added successfully", RequestID=request.RequestID
        )
    except AppError as e:
        return error_response(e)
    except Exception:
        logger.exception("create_service_request_failed")
        return internal_server_error("Failed to add service request")


@router.put("/{request_id}")
def update_service_request(
    request_id: int, payload: ServiceRequestUpdate, db: Session = Depends(get_db)
):
    try:
        service_request_service.update_request(db, request_id, payload)
        return success_response("Service request updated successfully")
    except AppError as e:
        return error_response(e)
    except Exception:
        logger.exception("update_service_request_failed", request_id=request_id)
        return internal_server_error("Failed to update service request")


@router.patch("/{request_id}/resolve")
def resolve_service_request(
    request_id: int, payload: ServiceRequestResolve, db: Session = Depends(get_db)
):
    try:
        service_request_service.resolve_request(db, request_id, payload)
        return success_response("Service request resolved")
    except AppError as e:
        return error_response(e)
    except Exception:
        logger.exception("resolve_service_request_failed", request_id=request_id)
        return internal_server_error("Failed to update service request")
