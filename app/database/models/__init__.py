from .owner_model import Owner
from .property_model import Property, Room
from .tenant_model import Tenant, TenantName, TenantPhone, TenantEmail
from .staff_model import Staff
from .payment_model import Payment
from .service_request_model import ServiceRequest
from .feedback_model import Feedback

__all__ = [
    "Owner",
    "Property",
    "Room",
    "Tenant",
    "TenantName",
    "TenantPhone",
    "TenantEmail",
    "Staff",
    "Payment",
    "ServiceRequest",
    "Feedback",
]
