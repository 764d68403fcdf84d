from datetime import datetime
from decimal import Decimal
from typing import List

from sqlalchemy import Numeric, func, select
from sqlalchemy.orm import Session

from database.models.payment_model import Payment
from database.models.tenant_model import Tenant
from database.transaction import unit_of_work
from enums.payment_status import PaymentStatus
from schemas.payment_schema import PaymentCreate
from services.base_service import BaseService
from utils.exceptions import NotFoundError, ValidationError
from utils.logging import get_logger
from utils.validation import missing_fields

logger = get_logger(__name__)


class PaymentService(BaseService):
    not_found_message = "Payment not found"
    conflict_message = "Invalid TenantID provided"

    def __init__(self):
        super().__init__(Payment)

    def get_payments_for_tenant(self, db: Session, tenant_id: int) -> List[Payment]:
        return (
            db.query(Payment)
            .filter(Payment.TenantID == tenant_id)
            .order_by(Payment.PaymentID)
            .all()
        )

    def get_total_due(self, db: Session, tenant_id: int) -> Decimal:
        """Outstanding rent as computed by the GetTotalRentDue stored function."""
        due = func.GetTotalRentDue(tenant_id, type_=Numeric(10, 2))
        total = db.execute(select(due)).scalar()
        return total if total is not None else Decimal("0")

    def record_full_payment(self, db: Session, payment_in: PaymentCreate) -> Decimal:
        """
        Pay off everything a tenant owes.

        The payment row and the tenant's status flip are committed together;
        if the status update fails the payment row is rolled back.

        Returns:
            The amount recorded
        """
        if missing_fields(payment_in, ("TenantID", "PaymentMode")):
            raise ValidationError("TenantID and PaymentMode are required")

        tenant_id = payment_in.TenantID
        with unit_of_work(db, "Failed to record payment", self.conflict_message):
            total_due = self.get_total_due(db, tenant_id)
            db.add(
                Payment(
                    TenantID=tenant_id,
                    Amount=total_due,
                    Date=datetime.now(),
                    PaymentMode=payment_in.PaymentMode,
                    Status=PaymentStatus.PAID.value,
                )
            )
            db.flush()
            self._mark_tenant_paid(db, tenant_id)

        logger.info("payment_recorded", tenant_id=tenant_id, amount=str(total_due))
        return total_due

    def _mark_tenant_paid(self, db: Session, tenant_id: int) -> None:
        updated = (
            db.query(Tenant)
            .filter(Tenant.TenantID == tenant_id)
            .update({Tenant.PaymentStatus: PaymentStatus.PAID.value}, synchronize_session=False)
        )
        if not updated:
            raise NotFoundError("Tenant not found")
