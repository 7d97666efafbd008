"""
security/credentials.py
------------------------
Pluggable credential checks for account login.

The account service never compares passwords itself; it asks a
``CredentialVerifier``. ``PlaintextVerifier`` is the reference strategy
and stores and compares passwords as given.
"""

from abc import ABC, abstractmethod


class CredentialVerifier(ABC):
    """Strategy for storing and checking account passwords."""

    @abstractmethod
    def verify(self, provided: str, stored: str) -> bool:
        """
        Check a login attempt against a stored credential.

        Args:
            provided: Password typed by the user.
            stored: Value held in ``users.password``.

        Returns:
            True if the credentials match.
        """

    def encode(self, password: str) -> str:
        """Return the value to persist for a newly registered password."""
        return password


class PlaintextVerifier(CredentialVerifier):
    """Exact, case-sensitive equality against the stored plaintext."""

    def verify(self, provided: str, stored: str) -> bool:
        return provided == stored
