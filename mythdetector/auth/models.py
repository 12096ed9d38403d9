"""
User and session models.
"""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, Field

from mythdetector.models import utcnow


def normalize_email(email: Optional[str]) -> str:
    return (email or "").strip().lower()


class User(BaseModel):
    """Registered user."""
    email: str = Field(..., min_length=1)
    password_hash: str = Field(..., min_length=1)
    registered_at: datetime = Field(default_factory=utcnow)

    @property
    def display_name(self) -> str:
        return self.email.split("@")[0]


class SessionContext(BaseModel):
    """
    Logged-in identity passed explicitly to whatever needs it.
    identity is the attribution string used for upload history.
    """
    token: str = Field(..., min_length=1)
    identity: str = Field(..., min_length=1)
    login_time: datetime = Field(default_factory=utcnow)

    @property
    def display_name(self) -> str:
        return self.identity.split("@")[0]


class UserResponse(BaseModel):
    """Profile response for API."""
    email: str
    display_name: str
    login_time: datetime
    registered_at: Optional[datetime] = None

    @classmethod
    def from_session(cls, session: SessionContext, user: Optional[User] = None) -> "UserResponse":
        return cls(
            email=session.identity,
            display_name=session.display_name,
            login_time=session.login_time,
            registered_at=user.registered_at if user else None,
        )
