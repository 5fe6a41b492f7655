"""User and session models."""

from typing import Optional

from pydantic import Field, field_validator

from tradiestop.models.base import BaseDataModel
from tradiestop.models.enums import Role


class User(BaseDataModel):
    """A marketplace account.

    Attributes:
        id: Login identifier chosen at signup
        role: Client, Tradie or Admin
        name: Display name
        image_url: Avatar URL (or data URL)
        joined_date: Display string of the signup date
        password: Only present in the signup response
        suspended: Whether an admin suspended the account

    Example:
        >>> user = User.model_validate({
        ...     "id": "client-1", "role": "Client", "name": "Alice",
        ...     "imageUrl": "https://img/a.png", "joinedDate": "2024-01-10",
        ... })
        >>> user.role
        <Role.CLIENT: 'Client'>
    """

    id: str = Field(..., min_length=1)
    role: Role
    name: str = Field(..., min_length=1)
    image_url: str = ""
    joined_date: str = ""
    password: Optional[str] = Field(default=None, repr=False)
    suspended: bool = False

    @field_validator("id", "name")
    @classmethod
    def validate_not_empty(cls, v: str, info) -> str:
        """Reject whitespace-only identifiers and names."""
        if not v.strip():
            raise ValueError(f"{info.field_name} cannot be empty or whitespace")
        return v.strip()


class Session(User):
    """The logged-in user plus the bearer token issued by ``/auth/login``."""

    token: str = Field(..., min_length=1, repr=False)

    def to_user(self) -> User:
        """Drop the token, returning the plain user record."""
        return User.model_validate(self.model_dump(exclude={"token"}))


class SignupForm(BaseDataModel):
    """Fields of the signup page and the admin "Add user" form.

    ``confirm_password`` is None for the admin form, which has no
    confirmation field. ``profession`` is only used for tradies.
    """

    user_id: str = ""
    name: str = ""
    password: str = Field(default="", repr=False)
    confirm_password: Optional[str] = Field(default=None, repr=False)
    role: Role = Role.CLIENT
    profession: Optional[str] = None

    def to_signup_body(self) -> dict:
        """Body of ``POST /auth/signup``."""
        body = {
            "id": self.user_id.strip(),
            "name": self.name.strip(),
            "password": self.password,
            "role": self.role.value,
        }
        if self.role == Role.TRADIE and self.profession:
            body["profession"] = self.profession
        return body
