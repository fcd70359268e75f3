from enum import Enum


class UserRole(str, Enum):
    """Roles known to the application.

    ``role`` is stored as free text and any non-empty value is accepted
    on registration; only ``admin`` carries extra meaning (admin guard).
    """

    ADMIN = "admin"
    USER = "user"
