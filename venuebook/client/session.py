import json
import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from pathlib import Path

from venuebook.client.api import ApiClient, RemoteCallError

logger = logging.getLogger(__name__)

#Mirrors the server token lifetime
SESSION_LIFETIME_DAYS = 7


class NotAuthorized(Exception):
    pass


@dataclass(frozen=True)
class SessionUser:
    name: str
    role: str


class SessionContext:
    """
    Logged-in state for one client: the API token, the user profile and
    when the session lapses.

    Created by login(), torn down by logout(). While active the token is
    attached to the ApiClient so every component sharing that client makes
    authenticated calls.
    """

    def __init__(self, api: ApiClient, token: str, user: SessionUser, expires_at: datetime):
        self.api = api
        self.token = token
        self.user = user
        self.expires_at = expires_at
        api.token = token

    @classmethod
    def login(cls, api: ApiClient, email: str, password: str, now: datetime | None = None):
        data = api.post("/auth/login", json={"email": email, "password": password})

        if not data.get("success") or not data.get("token"):
            raise RemoteCallError(data.get("message") or "Login failed")

        now = now or datetime.now(timezone.utc)
        user = SessionUser(name=data["user"]["name"], role=data["user"]["role"])

        logger.info("Logged in as %s (%s)", user.name, user.role)
        return cls(api, data["token"], user, now + timedelta(days=SESSION_LIFETIME_DAYS))

    def logout(self, path: str | Path | None = None) -> None:
        if self.api.token == self.token:
            self.api.token = None
        self.token = None
        self.user = None

        if path is not None:
            Path(path).unlink(missing_ok=True)

    def is_active(self, now: datetime | None = None) -> bool:
        now = now or datetime.now(timezone.utc)
        return self.token is not None and now < self.expires_at

    @property
    def is_admin(self) -> bool:
        return self.is_active() and self.user.role == "admin"

    def require_admin(self) -> None:
        if not self.is_admin:
            raise NotAuthorized("Admin session required")

    # -----------------------------
    # Persistence (cookie stand-in)
    # -----------------------------
    def save(self, path: str | Path) -> None:
        data = {
            "token": self.token,
            "user": {"name": self.user.name, "role": self.user.role},
            "expires_at": self.expires_at.isoformat(),
        }
        Path(path).write_text(json.dumps(data))

    @classmethod
    def restore(cls, api: ApiClient, path: str | Path, now: datetime | None = None):
        path = Path(path)
        if not path.exists():
            return None

        try:
            data = json.loads(path.read_text())
            expires_at = datetime.fromisoformat(data["expires_at"])
            if expires_at.tzinfo is None:
                raise ValueError("expires_at has no timezone")
            user = SessionUser(**data["user"])
            token = data["token"]
        except (ValueError, KeyError, TypeError):
            logger.warning("Discarding unreadable session file %s", path)
            path.unlink(missing_ok=True)
            return None

        now = now or datetime.now(timezone.utc)
        if now >= expires_at:
            path.unlink(missing_ok=True)
            return None

        return cls(api, token, user, expires_at)
