from typing import Optional


def full_name(first: Optional[str], middle: Optional[str], last: Optional[str]) -> str:
    """
    Join name parts with single spaces, skipping only missing (None) parts.

    An empty middle name still contributes its separator, so
    ``full_name("Asha", "", "Rao") == "Asha  Rao"``. This matches how the
    stored name is compared at login.
    """
    return " ".join(part for part in (first, middle, last) if part is not None)
