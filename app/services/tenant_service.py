"""
Tenant aggregate: the core ``Tenant`` row, its ``Tenant_Name`` row and the
``tenant_Phone`` / ``tenant_Email`` sets. All four are written together in one
transaction and read back as a single assembled view.
"""

import asyncio
from collections import defaultdict
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from sqlalchemy.orm import Session, sessionmaker
from starlette.concurrency import run_in_threadpool

from database.models import Tenant, TenantEmail, TenantName, TenantPhone
from database.transaction import unit_of_work
from schemas.feedback_schema import FeedbackResponse
from schemas.payment_schema import PaymentResponse
from schemas.service_request_schema import ServiceRequestResponse
from schemas.tenant_schema import (
    TenantCreate,
    TenantDetailResponse,
    TenantLogin,
    TenantResponse,
    TenantStatusUpdate,
    TenantUpdate,
)
from services.feedback_service import FeedbackService
from services.payment_service import PaymentService
from services.service_request_service import ServiceRequestService
from utils.exceptions import AuthError, NotFoundError, ValidationError
from utils.logging import get_logger
from utils.names import full_name
from utils.validation import missing_fields, unique

logger = get_logger(__name__)

CONTACT_SEPARATOR = ", "

Contacts = Dict[int, Tuple[List[str], List[str]]]


class TenantService:
    def __init__(self):
        self.payment_service = PaymentService()
        self.service_request_service = ServiceRequestService()
        self.feedback_service = FeedbackService()

    # Reads

    def _load_contacts(self, db: Session, tenant_ids: Optional[Iterable[int]] = None) -> Contacts:
        """Distinct phones and emails per tenant, sorted for a stable join."""
        contacts: Contacts = defaultdict(lambda: ([], []))

        phones = db.query(TenantPhone.TenantID, TenantPhone.tenant_Phone).distinct()
        emails = db.query(TenantEmail.TenantID, TenantEmail.tenant_Email).distinct()
        if tenant_ids is not None:
            tenant_ids = list(tenant_ids)
            phones = phones.filter(TenantPhone.TenantID.in_(tenant_ids))
            emails = emails.filter(TenantEmail.TenantID.in_(tenant_ids))

        for tenant_id, phone in phones.order_by(TenantPhone.TenantID, TenantPhone.tenant_Phone):
            contacts[tenant_id][0].append(phone)
        for tenant_id, email in emails.order_by(TenantEmail.TenantID, TenantEmail.tenant_Email):
            contacts[tenant_id][1].append(email)
        return contacts

    @staticmethod
    def _assemble(
        tenant: Tenant,
        name: Optional[TenantName],
        phones: List[str],
        emails: List[str],
        response_model=TenantResponse,
    ) -> TenantResponse:
        joined_phones = CONTACT_SEPARATOR.join(phones)
        joined_emails = CONTACT_SEPARATOR.join(emails)
        fields = dict(
            TenantID=tenant.TenantID,
            FirstName=name.FirstName if name else None,
            MiddleName=name.MiddleName if name else None,
            LastName=name.LastName if name else None,
            CheckInDate=tenant.CheckInDate,
            CheckOutDate=tenant.CheckOutDate,
            PaymentStatus=tenant.PaymentStatus,
            RoomID=tenant.RoomID,
            OwnerID=tenant.OwnerID,
            Phones=joined_phones,
            Emails=joined_emails,
            Contact=joined_phones,
            Email=joined_emails,
        )
        if response_model is TenantDetailResponse:
            fields["FullName"] = full_name(
                fields["FirstName"], fields["MiddleName"], fields["LastName"]
            )
        return response_model(**fields)

    def _query_tenants(self, db: Session):
        return (
            db.query(Tenant, TenantName)
            .outerjoin(TenantName, Tenant.TenantID == TenantName.TenantID)
            .order_by(Tenant.TenantID)
        )

    def get_tenants(self, db: Session) -> List[TenantResponse]:
        rows = self._query_tenants(db).all()
        contacts = self._load_contacts(db)
        return [
            self._assemble(tenant, name, *contacts[tenant.TenantID])
            for tenant, name in rows
        ]

    def get_tenant(
        self, db: Session, tenant_id: int, response_model=TenantResponse
    ) -> Optional[TenantResponse]:
        row = self._query_tenants(db).filter(Tenant.TenantID == tenant_id).first()
        if row is None:
            return None
        tenant, name = row
        contacts = self._load_contacts(db, [tenant_id])
        return self._assemble(tenant, name, *contacts[tenant_id], response_model=response_model)

    def get_tenant_detail(self, db: Session, tenant_id: int) -> Optional[TenantDetailResponse]:
        return self.get_tenant(db, tenant_id, response_model=TenantDetailResponse)

    def get_tenant_or_404(self, db: Session, tenant_id: int) -> TenantResponse:
        tenant = self.get_tenant(db, tenant_id)
        if tenant is None:
            raise NotFoundError("Tenant not found")
        return tenant

    async def get_all_tenant_data(self, session_factory: sessionmaker, tenant_id: int) -> dict:
        """
        Tenant view plus the tenant's payments, service requests and feedback.

        The four reads are independent, so each runs on its own pooled session
        in the threadpool and they are awaited together.
        """

        def fetch(reader: Callable[[Session, int], object]):
            with session_factory() as db:
                return reader(db, tenant_id)

        tenant, payments, requests, feedbacks = await asyncio.gather(
            run_in_threadpool(fetch, self.get_tenant_detail),
            run_in_threadpool(fetch, self._payments_for),
            run_in_threadpool(fetch, self._requests_for),
            run_in_threadpool(fetch, self._feedbacks_for),
        )
        logger.debug(
            "tenant_data_fetched",
            tenant_id=tenant_id,
            found=tenant is not None,
            payments=len(payments),
            requests=len(requests),
            feedbacks=len(feedbacks),
        )
        if tenant is None:
            raise NotFoundError("Tenant not found")

        return {
            "tenant": tenant,
            "payments": payments,
            "requests": requests,
            "feedbacks": feedbacks,
        }

    def _payments_for(self, db: Session, tenant_id: int) -> List[PaymentResponse]:
        return [
            PaymentResponse.model_validate(p)
            for p in self.payment_service.get_payments_for_tenant(db, tenant_id)
        ]

    def _requests_for(self, db: Session, tenant_id: int) -> List[ServiceRequestResponse]:
        return [
            ServiceRequestResponse.model_validate(r)
            for r in self.service_request_service.get_requests_for_tenant(db, tenant_id)
        ]

    def _feedbacks_for(self, db: Session, tenant_id: int) -> List[FeedbackResponse]:
        return [
            FeedbackResponse.model_validate(f)
            for f in self.feedback_service.get_feedback_for_tenant(db, tenant_id)
        ]

    def login(self, db: Session, credentials: TenantLogin) -> TenantResponse:
        if missing_fields(credentials, ("name", "tenantID")):
            raise ValidationError("Name and TenantID are required")

        tenant = self.get_tenant(db, credentials.tenantID)
        if tenant is None or full_name(
            tenant.FirstName, tenant.MiddleName, tenant.LastName
        ) != credentials.name:
            logger.info("tenant_login_failed", tenant_id=credentials.tenantID)
            raise AuthError("Invalid tenant credentials")
        return tenant

    # Writes

    def _insert_contacts(
        self, db: Session, tenant_id: int, phones: List[str], emails: List[str]
    ) -> None:
        db.add_all(TenantPhone(TenantID=tenant_id, tenant_Phone=p) for p in phones)
        db.add_all(TenantEmail(TenantID=tenant_id, tenant_Email=e) for e in emails)
        db.flush()

    def _delete_contacts(self, db: Session, tenant_id: int) -> None:
        db.query(TenantPhone).filter(TenantPhone.TenantID == tenant_id).delete(
            synchronize_session=False
        )
        db.query(TenantEmail).filter(TenantEmail.TenantID == tenant_id).delete(
            synchronize_session=False
        )

    def create_tenant(self, db: Session, tenant_in: TenantCreate) -> TenantResponse:
        phones = unique(tenant_in.phones)
        emails = unique(tenant_in.emails)
        if (
            missing_fields(tenant_in, ("firstName", "lastName", "CheckInDate", "RoomID", "OwnerID"))
            or not phones
            or not emails
        ):
            raise ValidationError(
                "Missing required fields: firstName, lastName, phones, emails, "
                "CheckInDate, RoomID, OwnerID"
            )

        with unit_of_work(db, "Failed to create tenant", "Invalid RoomID or OwnerID"):
            db_tenant = Tenant(
                CheckInDate=tenant_in.CheckInDate,
                CheckOutDate=tenant_in.CheckOutDate,
                PaymentStatus=tenant_in.PaymentStatus,
                RoomID=tenant_in.RoomID,
                OwnerID=tenant_in.OwnerID,
            )
            db.add(db_tenant)
            db.flush()
            tenant_id = db_tenant.TenantID

            db.add(
                TenantName(
                    TenantID=tenant_id,
                    FirstName=tenant_in.firstName,
                    MiddleName=tenant_in.middleName,
                    LastName=tenant_in.lastName,
                )
            )
            db.flush()
            self._insert_contacts(db, tenant_id, phones, emails)

        logger.info("tenant_created", tenant_id=tenant_id)
        return self.get_tenant_or_404(db, tenant_id)

    def update_tenant(
        self, db: Session, tenant_id: int, tenant_in: TenantUpdate
    ) -> TenantResponse:
        """Replace core fields, name and both contact sets of a tenant."""
        if missing_fields(tenant_in, ("firstName", "lastName", "CheckInDate", "RoomID")):
            raise ValidationError("Missing required fields for update")

        phones = unique(tenant_in.phones)
        emails = unique(tenant_in.emails)

        with unit_of_work(db, "Failed to update tenant", "Invalid RoomID or OwnerID"):
            db_tenant = db.get(Tenant, tenant_id)
            if db_tenant is None:
                raise NotFoundError("Tenant not found")

            db_tenant.CheckInDate = tenant_in.CheckInDate
            db_tenant.CheckOutDate = tenant_in.CheckOutDate
            db_tenant.PaymentStatus = tenant_in.PaymentStatus
            db_tenant.RoomID = tenant_in.RoomID
            if tenant_in.OwnerID:
                db_tenant.OwnerID = tenant_in.OwnerID

            db_name = db.get(TenantName, tenant_id)
            if db_name is None:
                db_name = TenantName(TenantID=tenant_id)
                db.add(db_name)
            db_name.FirstName = tenant_in.firstName
            db_name.MiddleName = tenant_in.middleName
            db_name.LastName = tenant_in.lastName
            db.flush()

            self._delete_contacts(db, tenant_id)
            self._insert_contacts(db, tenant_id, phones, emails)

        logger.info("tenant_updated", tenant_id=tenant_id)
        return self.get_tenant_or_404(db, tenant_id)

    def update_payment_status(
        self, db: Session, tenant_id: int, status_in: TenantStatusUpdate
    ) -> None:
        if not status_in.PaymentStatus:
            raise ValidationError("PaymentStatus required")

        with unit_of_work(db, "Failed to update payment status"):
            updated = (
                db.query(Tenant)
                .filter(Tenant.TenantID == tenant_id)
                .update({Tenant.PaymentStatus: status_in.PaymentStatus}, synchronize_session=False)
            )
            if not updated:
                raise NotFoundError("Tenant not found")

    def delete_tenant(self, db: Session, tenant_id: int) -> None:
        """Remove phones, emails, name and finally the core record."""
        with unit_of_work(db, "Failed to delete tenant"):
            self._delete_contacts(db, tenant_id)
            db.query(TenantName).filter(TenantName.TenantID == tenant_id).delete(
                synchronize_session=False
            )
            deleted = (
                db.query(Tenant)
                .filter(Tenant.TenantID == tenant_id)
                .delete(synchronize_session=False)
            )
            if not deleted:
                raise NotFoundError("Tenant not found")

        logger.info("tenant_deleted", tenant_id=tenant_id)
