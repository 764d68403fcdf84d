from datetime import date
from typing import List, Optional
from sqlalchemy.orm import Session

from database.models import ServiceRequest, Staff, Tenant, TenantName
from enums.service_request_status import ServiceRequestStatus
from schemas.service_request_schema import (
    ServiceRequestCreate,
    ServiceRequestListItem,
    ServiceRequestResolve,
    ServiceRequestUpdate,
)
from services.base_service import BaseService
from utils.exceptions import ValidationError
from utils.names import full_name


class ServiceRequestService(BaseService):
    required_fields = ("Category", "Description", "TenantID", "DateRaised")
    validation_message = "Missing required fields"
    not_found_message = "Service request not found"
    conflict_message = "Invalid TenantID provided"

    def __init__(self):
        super().__init__(ServiceRequest)

    def get_requests(
        self,
        db: Session,
        owner_id: Optional[int] = None,
        tenant_id: Optional[int] = None,
    ) -> List[ServiceRequestListItem]:
        """Requests newest first, enriched with tenant and staff details.

        ``owner_id`` takes precedence over ``tenant_id`` when both are given.
        """
        query = (
            db.query(ServiceRequest, Tenant, TenantName, Staff)
            .join(Tenant, ServiceRequest.TenantID == Tenant.TenantID)
            .outerjoin(TenantName, Tenant.TenantID == TenantName.TenantID)
            .outerjoin(Staff, ServiceRequest.StaffID == Staff.StaffID)
        )
        if owner_id:
            query = query.filter(Tenant.OwnerID == owner_id)
        elif tenant_id:
            query = query.filter(ServiceRequest.TenantID == tenant_id)

        rows = query.order_by(
            ServiceRequest.DateRaised.desc(), ServiceRequest.RequestID.desc()
        ).all()

        return [
            ServiceRequestListItem(
                RequestID=request.RequestID,
                Category=request.Category,
                Description=request.Description,
                Status=request.Status,
                DateRaised=request.DateRaised,
                DateResolved=request.DateResolved,
                TenantID=request.TenantID,
                TenantName=(
                    full_name(name.FirstName, name.MiddleName, name.LastName)
                    if name
                    else None
                ),
                RoomID=tenant.RoomID,
                OwnerID=tenant.OwnerID,
                StaffID=staff.StaffID if staff else None,
                StaffName=staff.name if staff else None,
                StaffContact=staff.contact if staff else None,
                StaffRole=staff.role if staff else None,
            )
            for request, tenant, name, staff in rows
        ]

    def get_requests_for_tenant(self, db: Session, tenant_id: int) -> List[ServiceRequest]:
        return (
            db.query(ServiceRequest)
            .filter(ServiceRequest.TenantID == tenant_id)
            .order_by(ServiceRequest.RequestID)
            .all()
        )

    def create_request(self, db: Session, request_in: ServiceRequestCreate) -> ServiceRequest:
        self.validate(request_in)
        db_request = ServiceRequest(
            **request_in.model_dump(),
            Status=ServiceRequestStatus.PENDING.value,
        )
        return self.create(db, db_request, "Failed to add service request")

    def update_request(
        self, db: Session, request_id: int, request_in: ServiceRequestUpdate
    ) -> ServiceRequest:
        values = {}
        if request_in.Status:
            values["Status"] = request_in.Status
        # StaffID sent as null unassigns the staff member
        if "StaffID" in request_in.model_fields_set:
            values["StaffID"] = request_in.StaffID
        if request_in.Status == ServiceRequestStatus.COMPLETED.value:
            values["DateResolved"] = date.today()

        if not values:
            raise ValidationError("No fields to update")

        return self.update(
            db,
            request_id,
            values,
            "Failed to update service request",
            "Invalid StaffID provided",
        )

    def resolve_request(
        self, db: Session, request_id: int, resolve_in: ServiceRequestResolve
    ) -> ServiceRequest:
        if not resolve_in.DateResolved:
            raise ValidationError("Resolution date is required")

        values = {
            "Status": ServiceRequestStatus.COMPLETED.value,
            "DateResolved": resolve_in.DateResolved,
            "StaffID": resolve_in.StaffID,
        }
        return self.update(
            db,
            request_id,
            values,
            "Failed to update service request",
            "Invalid StaffID provided",
        )
