"""Sign-up, sign-in and current-session lookup."""

import json
import secrets
from datetime import datetime, timedelta
from pathlib import Path

import structlog
from passlib.context import CryptContext

from ..config import get_settings
from ..errors import AuthError, ValidationError
from ..models.users import AuthSession, Identity, User
from ..store.base import RowStore, StoreError, eq

logger = structlog.get_logger(__name__)

pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

MIN_PASSWORD_LENGTH = 6


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, password_hash: str) -> bool:
    return pwd_context.verify(password, password_hash)


def get_session_path(data_dir: Path | None = None) -> Path:
    settings = get_settings()
    return (data_dir or settings.data_dir) / settings.session_filename


class IdentityService:
    """Identity backed by the users/profiles/auth_sessions tables.

    The active session is kept in a small JSON file so it survives between
    CLI invocations.
    """

    def __init__(self, store: RowStore, session_path: Path | None = None, ttl_hours: int | None = None):
        self.store = store
        self.session_path = session_path or get_session_path()
        self.ttl = timedelta(hours=ttl_hours or get_settings().session_ttl_hours)

    async def sign_up(
        self, email: str, password: str, full_name: str = "", remember: bool = True
    ) -> AuthSession:
        """Register a new account and sign it in."""
        email = self._normalize_email(email)
        if len(password or "") < MIN_PASSWORD_LENGTH:
            raise ValidationError(f"Password should be at least {MIN_PASSWORD_LENGTH} characters")

        try:
            row = await self.store.insert(
                "users", {"email": email, "password_hash": hash_password(password)}
            )
        except StoreError as e:
            if "unique" in e.message.lower():
                raise AuthError("User already registered", table="users") from e
            raise AuthError(e.message, table="users") from e

        try:
            await self.store.insert(
                "profiles", {"id": row["id"], "email": email, "full_name": full_name.strip()}
            )
        except StoreError as e:
            # The account exists either way; a duplicate profile is harmless
            if "unique" not in e.message.lower():
                logger.error("profile_create_failed", user_id=row["id"], error=e.message)

        logger.info("user_registered", user_id=row["id"])
        return await self.sign_in(email, password, remember=remember)

    async def sign_in(self, email: str, password: str, remember: bool = True) -> AuthSession:
        """Check credentials and open a session.

        With remember=False the session is only returned, not written to the
        session file (the web API hands the token to the caller instead).
        """
        email = self._normalize_email(email)
        row = await self.store.select_one("users", filters=[eq("email", email)])
        if row is None or not verify_password(password or "", row["password_hash"]):
            logger.warning("sign_in_failed", email=email)
            raise AuthError("Invalid login credentials", table="users")

        token = secrets.token_urlsafe(32)
        expires_at = datetime.now() + self.ttl
        await self.store.insert(
            "auth_sessions",
            {"user_id": row["id"], "access_token": token, "expires_at": expires_at},
        )

        session = AuthSession(user=await self._load_user(row), access_token=token, expires_at=expires_at)
        if remember:
            self._write_session(session)
        logger.info("signed_in", user_id=row["id"])
        return session

    async def sign_out(self) -> None:
        session = self._read_session()
        if session is not None:
            await self.store.delete("auth_sessions", filters=[eq("access_token", session.access_token)])
            logger.info("signed_out", user_id=session.user.id)
        if self.session_path.exists():
            self.session_path.unlink()

    async def current_session(self) -> AuthSession | None:
        """The persisted session if its token is still valid."""
        session = self._read_session()
        if session is None:
            return None
        if session.is_expired():
            self._clear_session()
            return None
        row = await self.store.select_one(
            "auth_sessions", filters=[eq("access_token", session.access_token)]
        )
        if row is None:
            self._clear_session()
            return None
        return session

    async def current_user(self) -> User | None:
        session = await self.current_session()
        return session.user if session else None

    async def require_identity(self) -> Identity:
        """Identity of the signed-in user; AuthError when nobody is."""
        user = await self.current_user()
        if user is None:
            raise AuthError("Not signed in. Run 'liftlog auth login' first.")
        return Identity.of(user)

    async def identity_for_token(self, token: str) -> Identity:
        """Identity behind a bearer token; AuthError if unknown or expired."""
        row = await self.store.select_one("auth_sessions", filters=[eq("access_token", token)])
        if row is None or _parse_expiry(row["expires_at"]) <= datetime.now():
            raise AuthError("Invalid or expired token", table="auth_sessions")
        user_row = await self.store.select_one("users", filters=[eq("id", row["user_id"])])
        if user_row is None:
            raise AuthError("Invalid or expired token", table="users")
        return Identity(user_id=user_row["id"], email=user_row["email"])

    async def _load_user(self, user_row: dict) -> User:
        profile = await self.store.select_one("profiles", filters=[eq("id", user_row["id"])])
        return User.from_dict(
            {
                "id": user_row["id"],
                "email": user_row["email"],
                "full_name": profile.get("full_name") if profile else "",
                "created_at": user_row.get("created_at"),
            }
        )

    def _normalize_email(self, email: str) -> str:
        email = (email or "").strip().lower()
        if "@" not in email or email.startswith("@") or email.endswith("@"):
            raise ValidationError("Enter a valid email address")
        return email

    def _read_session(self) -> AuthSession | None:
        if not self.session_path.exists():
            return None
        try:
            return AuthSession.from_dict(json.loads(self.session_path.read_text()))
        except (ValueError, KeyError) as e:
            logger.warning("session_file_unreadable", path=str(self.session_path), error=str(e))
            self._clear_session()
            return None

    def _write_session(self, session: AuthSession) -> None:
        self.session_path.parent.mkdir(parents=True, exist_ok=True)
        self.session_path.write_text(json.dumps(session.to_dict(), indent=2))

    def _clear_session(self) -> None:
        if self.session_path.exists():
            self.session_path.unlink()


def _parse_expiry(value) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime.fromisoformat(str(value))
