"""User Schema: directory entry as served by GET /users.

Invariants:
    - Address fields are always strings after from_row(): trimmed, null -> ""
"""

from pydantic import BaseModel

IDENTITY_FIELDS: tuple[str, ...] = ("id", "name", "username", "email", "phone")
ADDRESS_FIELDS: tuple[str, ...] = ("street", "city", "state", "zipcode")


def normalize_address_part(value: str | None) -> str:
    return value.strip() if value else ""


class User(BaseModel):
    """Public user record."""
    id: str
    name: str
    username: str
    email: str
    phone: str
    street: str = ""
    city: str = ""
    state: str = ""
    zipcode: str = ""

    @classmethod
    def from_row(cls, row: object) -> "User":
        """Build from an ORM row, normalizing the optional address fields."""
        data = {field: getattr(row, field) for field in IDENTITY_FIELDS}
        data.update(
            {
                field: normalize_address_part(getattr(row, field))
                for field in ADDRESS_FIELDS
            },
        )
        return cls.model_validate(data)


class UserCount(BaseModel):
    count: int
