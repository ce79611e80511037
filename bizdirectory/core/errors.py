from sqlalchemy.exc import IntegrityError


class DirectoryError(Exception):
    """Base class for errors raised by the data access layer"""


class ConstraintViolation(DirectoryError):
    """A unique key (tax ID, admin username) is already taken"""

    def __init__(self, field: str, message: str = "duplicate value"):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message


def is_unique_violation(e: IntegrityError) -> bool:
    """Tell unique-key violations apart from other integrity failures"""
    error_msg = (str(e.orig) if getattr(e, "orig", None) is not None else str(e)).lower()
    return "unique" in error_msg or "duplicate key" in error_msg
