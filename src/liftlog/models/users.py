"""Identity models."""

from dataclasses import dataclass
from datetime import datetime

from .templates import _parse_timestamp


@dataclass
class User:
    """An authenticated account."""

    id: int
    email: str
    full_name: str = ""
    created_at: datetime | None = None

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "email": self.email,
            "full_name": self.full_name,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "User":
        return cls(
            id=data["id"],
            email=data["email"],
            full_name=data.get("full_name") or "",
            created_at=_parse_timestamp(data.get("created_at")),
        )


@dataclass
class AuthSession:
    """A signed-in session as persisted by the CLI."""

    user: User
    access_token: str
    expires_at: datetime

    def is_expired(self, now: datetime | None = None) -> bool:
        return (now or datetime.now()) >= self.expires_at

    def to_dict(self) -> dict:
        return {
            "user": self.user.to_dict(),
            "access_token": self.access_token,
            "expires_at": self.expires_at.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "AuthSession":
        return cls(
            user=User.from_dict(data["user"]),
            access_token=data["access_token"],
            expires_at=datetime.fromisoformat(data["expires_at"]),
        )


@dataclass(frozen=True)
class Identity:
    """Caller identity passed explicitly into authoring operations."""

    user_id: int
    email: str = ""

    @classmethod
    def of(cls, user: User) -> "Identity":
        return cls(user_id=user.id, email=user.email)
