import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Protocol

from ..auth.interfaces import PasswordHasher
from ..storage import DocumentStore

logger = logging.getLogger(__name__)

USERS_COLLECTION = "users"


@dataclass(frozen=True)
class User:
    """Stored user record."""

    id: int
    username: str
    password_hash: str
    password_salt: str

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "User":
        return cls(
            id=record["id"],
            username=record["username"],
            password_hash=record["passwordHash"],
            password_salt=record["passwordSalt"],
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "username": self.username,
            "passwordHash": self.password_hash,
            "passwordSalt": self.password_salt,
        }

    def public(self) -> Dict[str, Any]:
        """User fields safe to return to clients (no hash or salt)."""
        return {"id": self.id, "username": self.username}


class UserError(str, Enum):
    """Named failures of user operations."""

    DUPLICATE_USER = "duplicate_user"


@dataclass
class AddUserResult:
    """Outcome of adding a user."""

    ok: bool
    user: Optional[User] = None
    error: Optional[UserError] = None


class UserService(Protocol):
    """Protocol for user directories."""

    def exists(self, username: str) -> bool:
        ...

    def get_user_by_username(self, username: str) -> Optional[User]:
        ...

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        ...

    def add(self, username: str, password: str) -> AddUserResult:
        ...

    def authorize(self, username: str, password: str) -> bool:
        ...


class UserModule:
    def __init__(self, store: DocumentStore, hasher: PasswordHasher):
        """
        Initialize user module.

        Args:
            store: Document store holding the ``users`` collection
            hasher: Password hasher used for new users and authorization
        """
        self.store = store
        self.hasher = hasher

    def _users(self) -> List[Dict[str, Any]]:
        return self.store.get(USERS_COLLECTION)

    def _find(self, **criteria: Any) -> Optional[Dict[str, Any]]:
        for record in self._users():
            if all(record.get(key) == value for key, value in criteria.items()):
                return record
        return None

    def exists(self, username: str) -> bool:
        """Check if user identified by username exists."""
        return self._find(username=username) is not None

    def get_user_by_username(self, username: str) -> Optional[User]:
        record = self._find(username=username)
        return User.from_record(record) if record else None

    def get_user_by_id(self, user_id: int) -> Optional[User]:
        record = self._find(id=user_id)
        return User.from_record(record) if record else None

    def add(self, username: str, password: str) -> AddUserResult:
        """
        Add a new user.

        Args:
            username: Unique username
            password: Plaintext password, stored only as a salted hash

        Returns:
            AddUserResult with the created user, or DUPLICATE_USER if the
            username is taken

        Logic:
        1. Reject existing usernames
        2. Assign id as number of users + 1
        3. Generate salt and hash the password
        4. Append the record and persist the store
        """
        if self.exists(username):
            logger.info(f"User '{username}' already exists")
            return AddUserResult(ok=False, error=UserError.DUPLICATE_USER)

        users = self._users()
        salt = self.hasher.new_salt()
        user = User(
            id=len(users) + 1,
            username=username,
            password_hash=self.hasher.hash(password, salt),
            password_salt=salt,
        )

        users.append(user.to_record())
        self.store.write()

        logger.info(f"Created user '{username}' with id {user.id}")
        return AddUserResult(ok=True, user=user)

    def authorize(self, username: str, password: str) -> bool:
        """
        Authorize existing user by username and password.

        Returns:
            True if the password matches the stored hash, False otherwise
            (including unknown usernames)
        """
        user = self.get_user_by_username(username)
        if not user:
            return False

        return self.hasher.verify(password, user.password_salt, user.password_hash)
