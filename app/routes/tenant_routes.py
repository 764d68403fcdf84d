from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session, sessionmaker

from database.init import get_db, get_session_factory
from schemas.tenant_schema import (
    TenantCreate,
    TenantLogin,
    TenantStatusUpdate,
    TenantUpdate,
)
from services.payment_service import PaymentService
from services.tenant_service import TenantService
from responses.success import created_response, data_response, success_response
from responses.error import error_response, internal_server_error
from utils.exceptions import AppError
from utils.logging import get_logger

router = APIRouter(prefix="/Tenant", tags=["Tenant"])
logger = get_logger(__name__)

tenant_service = TenantService()
payment_service = PaymentService()


@router.get("")
def get_tenants(db: Session = Depends(get_db)):
    try:
        return data_response(tenant_service.get_tenants(db))
    except Exception:
        logger.exception("fetch_tenants_failed")
        return internal_server_error("Failed to fetch tenants")


@router.post("/login")
def login_tenant(credentials: TenantLogin, db: Session = Depends(get_db)):
    try:
        tenant = tenant_service.login(db, credentials)
        return data_response({"tenant": tenant})
    except AppError as e:
        return error_response(e)
    except Exception:
        logger.exception("tenant_login_error")
        return internal_server_error("Database error during tenant login")


@router.post("")
def create_tenant(payload: TenantCreate, db: Session = Depends(get_db)):
    """Create a tenant with its name, phones and emails in one transaction."""
    try:
        tenant = tenant_service.create_tenant(db, payload)
        return created_response("Tenant added successfully", tenant=tenant)
    except AppError as e:
        return error_response(e)
    except Exception:
        logger.exception("create_tenant_failed")
        return internal_server_error("Failed to create tenant")


@router.get("/{tenant_id}/TotalDue")
def get_total_due(tenant_id: int, db: Session = Depends(get_db)):
    try:
        total_due = payment_service.get_total_due(db, tenant_id)
        return data_response({"TotalDue": total_due})
    except Exception:
        logger.exception("total_due_failed", tenant_id=tenant_id)
        return internal_server_error("Error fetching total rent due")


@router.get("/{tenant_id}/all")
async def get_all_tenant_data(
    tenant_id: int,
    session_factory: sessionmaker = Depends(get_session_factory),
):
    """Tenant view with the tenant's payments, requests and feedback."""
    try:
        data = await tenant_service.get_all_tenant_data(session_factory, tenant_id)
        return data_response(data)
    except AppError as e:
        return error_response(e)
    except Exception:
        logger.exception("fetch_tenant_data_failed", tenant_id=tenant_id)
        return internal_server_error("Failed to fetch tenant data")


@router.get("/{tenant_id}")
def get_tenant(tenant_id: int, db: Session = Depends(get_db)):
    try:
        return data_response(tenant_service.get_tenant_or_404(db, tenant_id))
    except AppError as e:
        return error_response(e)
    except Exception:
        logger.exception("fetch_tenant_failed", tenant_id=tenant_id)
        return internal_server_error("Failed to fetch tenant")


@router.put("/{tenant_id}")
def update_tenant(tenant_id: int, payload: TenantUpdate, db: Session = Depends(get_db)):
    try:
        tenant = tenant_service.update_tenant(db, tenant_id, payload)
        return success_response("Tenant updated successfully", tenant=tenant)
    except AppError as e:
        return error_response(e)
    except Exception:
        logger.exception("update_tenant_failed", tenant_id=tenant_id)
        return internal_server_error("Failed to update tenant")


@router.patch("/{tenant_id}/status")
def update_payment_status(
    tenant_id: int, payload: TenantStatusUpdate, db: Session = Depends(get_db)
):
    try:
        tenant_service.update_payment_status(db, tenant_id, payload)
        return success_response("PaymentStatus updated")
    except AppError as e:
        return error_response(e)
    except Exception:
        logger.exception("update_payment_status_failed", tenant_id=tenant_id)
        return internal_server_error("Failed to update payment status")


@router.delete("/{tenant_id}")
def delete_tenant(tenant_id: int, db: Session = Depends(get_db)):
    try:
        tenant_service.delete_tenant(db, tenant_id)
        return success_response("Tenant deleted successfully")
    except AppError as e:
        return error_response(e)
    except Exception:
        logger.exception("delete_tenant_failed", tenant_id=tenant_id)
        return internal_server_error("Failed to delete tenant")
