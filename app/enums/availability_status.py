from enum import Enum


class AvailabilityStatus(str, Enum):
    AVAILABLE = "Available"
    UNAVAILABLE = "Unavailable"

    def __str__(self):
        return self.value
