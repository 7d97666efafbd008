"""
models/user.py
--------------
Domain model for gallery accounts.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class User:
    """
    A registered account.

    Attributes:
        username: Login name. Not guaranteed unique.
        password: Stored credential, in whatever form the verifier encodes it.
        id: Database primary key (None for new records).
    """
    username: str
    password: str = field(repr=False)
    id: Optional[int] = None
