from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from database.init import get_db
from schemas.payment_schema import PaymentCreate, PaymentResponse
from services.payment_service import PaymentService
from responses.success import data_response, success_response
from responses.error import error_response, internal_server_error
from utils.exceptions import AppError
from utils.logging import get_logger

router = APIRouter(prefix="/Payment", tags=["Payment"])
logger = get_logger(__name__)

payment_service = PaymentService()


@router.get("")
def get_payments(db: Session = Depends(get_db)):
    try:
        payments = payment_service.get_all(db)
        return data_response([PaymentResponse.model_validate(p) for p in payments])
    except Exception:
        logger.exception("fetch_payments_failed")
        return internal_server_error("Failed to fetch payments")


@router.post("")
def create_payment(payload: PaymentCreate, db: Session = Depends(get_db)):
    """Record a full payment of the tenant's total due and mark the tenant Paid."""
    try:
        amount = payment_service.record_full_payment(db, payload)
        return success_response("Payment successful", amount=amount)
    except AppError as e:
        return error_response(e)
    except Exception:
        logger.exception("record_payment_failed", tenant_id=payload.TenantID)
        return internal_server_error("Failed to record payment")
