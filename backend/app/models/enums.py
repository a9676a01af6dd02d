import enum


class UserRole(str, enum.Enum):
    USER = "user"
    OWNER = "owner"


class FieldType(str, enum.Enum):
    SOCCER = "soccer"
    MINI_SOCCER = "mini soccer"
    FUTSAL = "futsal"
    BASKETBALL = "basketball"
    VOLLEYBALL = "volleyball"
