"""Role enumeration and the capability checks built on it."""

from enum import Enum


class Role(str, Enum):
    """Authorization level of a user account."""

    USER = "user"
    ADMIN = "admin"

    @property
    def is_admin(self) -> bool:
        return self is Role.ADMIN

    def can_assign(self, target: "Role") -> bool:
        """True if an actor with this role may give an account the target role."""
        return self.is_admin or target is Role.USER

    def can_manage(self, actor_id: int, owner_id: int) -> bool:
        """True if an actor with this role may modify the account owner_id."""
        return self.is_admin or actor_id == owner_id
