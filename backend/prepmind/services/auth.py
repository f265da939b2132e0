from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class AuthContext:
    """
    The signed-in user, as vouched for by the external identity provider.

    Passed explicitly to everything that acts on a user's behalf instead of
    being looked up from ambient state.
    """
    uid: str
    email: Optional[str] = None
    display_name: Optional[str] = None
