"""Password and token authentication."""

from datetime import datetime, timedelta, timezone
from typing import Optional
import logging

import bcrypt
import jwt

from ..domain.errors import AuthenticationError, ConfigurationError, ConflictError, InvalidRequestError
from ..domain.models import User, UserRole
from ..domain.protocols import UserStore

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    """Hash a password with a fresh bcrypt salt."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=10)).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Check a password against a stored bcrypt hash."""
    if not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        return False


class AuthService:
    """Registers users, issues tokens and resolves tokens to users."""

    def __init__(
        self,
        users: UserStore,
        *,
        secret: Optional[str],
        algorithm: str = "HS256",
        expiration_minutes: int = 24 * 60,
    ) -> None:
        self._users = users
        self._secret = secret
        self._algorithm = algorithm
        self._expiration = timedelta(minutes=expiration_minutes)

    async def register(
        self,
        name: str,
        email: str,
        password: str,
        *,
        role: UserRole = UserRole.MEMBER,
    ) -> User:
        """Create a new user account."""
        if not name or not email or not password:
            raise InvalidRequestError("Name, email and password are required")

        email = email.strip().lower()
        if await self._users.get_by_email(email):
            raise ConflictError("Email already exists")

        user = User(
            id=User.generate_id(),
            name=name.strip(),
            email=email,
            role=role,
            password_hash=hash_password(password),
        )
        created = await self._users.create(user)
        logger.info(f"Registered user {created.id} with role {role.value}")
        return created

    async def login(self, email: str, password: str) -> tuple[str, User]:
        """Verify credentials and issue a token.

        Returns:
            Tuple of (token, user)

        Raises:
            InvalidRequestError: email or password missing
            AuthenticationError: credentials do not match
        """
        if not email or not password:
            raise InvalidRequestError("Email and password are required")

        user = await self._users.get_by_email(email.strip().lower())
        if user is None or not verify_password(password, user.password_hash):
            logger.info("Failed login attempt")
            raise AuthenticationError("Email or password is incorrect")

        token = self.issue_token(user)
        logger.info(f"Login successful for user {user.id}")
        return token, user

    def issue_token(self, user: User) -> str:
        """Sign a token identifying the user."""
        now = datetime.now(timezone.utc)
        payload = {
            "sub": user.id,
            "name": user.name,
            "email": user.email,
            "role": user.role.value,
            "iat": now,
            "exp": now + self._expiration,
        }
        return jwt.encode(payload, self._require_secret(), algorithm=self._algorithm)

    async def authenticate(self, token: str) -> User:
        """Resolve a token to the current state of its user.

        Role and destination access are re-read from the store rather than
        trusted from the token.
        """
        if not token:
            raise AuthenticationError("Access denied. No token provided.")

        try:
            payload = jwt.decode(token, self._require_secret(), algorithms=[self._algorithm])
        except jwt.ExpiredSignatureError:
            raise AuthenticationError("Token expired")
        except jwt.InvalidTokenError:
            raise AuthenticationError("Invalid token")

        user = await self._users.get(str(payload.get("sub", "")))
        if user is None:
            raise AuthenticationError("Invalid token")
        return user

    def _require_secret(self) -> str:
        if not self._secret:
            raise ConfigurationError("Server configuration error")
        return self._secret
