from .enums import FieldType, UserRole
from .user import User
from .venue import Venue
from .field import Field
from .booking import Booking
from .membership import Membership

__all__ = [
    "FieldType",
    "UserRole",
    "User",
    "Venue",
    "Field",
    "Booking",
    "Membership",
]
