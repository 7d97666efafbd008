"""
services/account_service.py
----------------------------
Registration and login for gallery accounts.
"""

from typing import Optional

from models.user import User
from repositories.user_repo import UserRepository
from security.credentials import CredentialVerifier, PlaintextVerifier
from utils.logger import get_logger

logger = get_logger(__name__)


class AccountService:
    """Creates accounts and checks credentials through a pluggable verifier."""

    def __init__(self, repo: UserRepository, verifier: Optional[CredentialVerifier] = None):
        self.repo = repo
        self.verifier = verifier or PlaintextVerifier()

    def register(self, username: str, password: str) -> User:
        """
        Create a new account. The same username may be registered more than once.

        Raises:
            StoreConnectionError: If the database is unreachable.
            StoreError: If the insert fails.
        """
        user = User(username=username, password=self.verifier.encode(password))
        return self.repo.add(user)

    def login(self, username: str, password: str) -> Optional[User]:
        """
        Find the account matching these credentials.

        Returns:
            The first matching User (lowest id), or None.
        """
        for user in self.repo.find_by_username(username):
            if self.verifier.verify(password, user.password):
                logger.info(f"User #{user.id} ({username}) logged in")
                return user
        logger.warning(f"Failed login attempt for {username!r}")
        return None

    def authenticate(self, username: str, password: str) -> bool:
        """True iff a stored account matches both username and password exactly."""
        return self.login(username, password) is not None
