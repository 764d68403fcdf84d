from enum import Enum


class PaymentStatus(str, Enum):
    """Payment status of a tenant and of a payment row"""

    PENDING = "Pending"
    PAID = "Paid"

    def __str__(self):
        return self.value
