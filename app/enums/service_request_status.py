from enum import Enum


class ServiceRequestStatus(str, Enum):
    """Lifecycle of a maintenance request"""

    PENDING = "Pending"
    IN_PROGRESS = "In Progress"
    COMPLETED = "Completed"

    def __str__(self):
        return self.value
