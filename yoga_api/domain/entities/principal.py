"""
Authenticated Principal

Request-scoped identity built from a User at authentication time.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class AuthenticatedPrincipal:
    """
    Identity attached to an authenticated request.

    Never persisted. The password hash is kept for the login handshake
    only and excluded from repr.
    """

    id: int
    username: str
    first_name: str
    last_name: str
    admin: bool = False
    password: str = field(default="", repr=False, compare=False)

    @classmethod
    def from_user(cls, user) -> "AuthenticatedPrincipal":
        return cls(
            id=user.id,
            username=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            admin=user.admin,
            password=user.password,
        )
