"""Exception types shared across liftlog."""


class LiftlogError(Exception):
    """Base class for all liftlog errors."""


class ValidationError(LiftlogError):
    """Input rejected before any backend call was made."""


class BackendError(LiftlogError):
    """A row-store or identity call failed.

    The backend's own message is kept verbatim so it can be shown to the user.
    """

    def __init__(self, message: str, *, table: str | None = None):
        super().__init__(message)
        self.message = message
        self.table = table


class NotFoundError(LiftlogError):
    """A requested template, session or trainer does not exist."""


class AuthError(BackendError):
    """Sign-up, sign-in or session lookup failed."""


class GenerationError(LiftlogError):
    """The completion API returned nothing usable."""


# Known backend phrases and the hint shown in their place
FRIENDLY_MESSAGES: list[tuple[tuple[str, ...], str]] = [
    (
        ("already registered", "already exists", "duplicate"),
        "That email is already registered. Try signing in instead.",
    ),
    (
        ("429", "rate limit"),
        "Too many attempts. Wait 10 minutes and try again.",
    ),
    (
        ("invalid login", "invalid credentials"),
        "Email or password is incorrect.",
    ),
]


def friendly_message(error: Exception | str) -> str:
    """Map a raw backend message to user-facing text.

    Unknown messages are returned unchanged.
    """
    message = error if isinstance(error, str) else str(error)
    lowered = message.lower()
    for phrases, hint in FRIENDLY_MESSAGES:
        if any(phrase in lowered for phrase in phrases):
            return hint
    return message
