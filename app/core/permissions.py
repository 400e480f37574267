"""
Roles, caller identity and the ownership gate.

Permission decisions are made here and nowhere else; routes ask
can_create / can_mutate with the resource's AccessPolicy.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, FrozenSet, Optional

from bson import ObjectId
from bson.errors import InvalidId


class Role(str, Enum):
    user = "user"
    entrepreneur = "entrepreneur"
    admin = "admin"


ELEVATED_ROLES: FrozenSet[Role] = frozenset({Role.admin})


@dataclass(frozen=True)
class UserIdentity:
    """Equality-comparable user id (wraps the stored ObjectId)."""
    value: ObjectId

    @classmethod
    def parse(cls, raw: Any) -> Optional["UserIdentity"]:
        """Build from an ObjectId or its hex string; None if malformed."""
        if isinstance(raw, UserIdentity):
            return raw
        if isinstance(raw, ObjectId):
            return cls(raw)
        try:
            return cls(ObjectId(str(raw)))
        except (InvalidId, TypeError):
            return None

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True)
class Caller:
    """The authenticated user making the request."""
    identity: UserIdentity
    role: Role
    name: str = ""
    email: str = ""

    @property
    def is_elevated(self) -> bool:
        return self.role in ELEVATED_ROLES


@dataclass(frozen=True)
class AccessPolicy:
    """
    Who may create and who may update/delete records of one resource.

    create_roles / mutate_roles of None means any authenticated user.
    check_ownership=False skips the owner comparison on update/delete.
    """
    create_roles: Optional[FrozenSet[Role]] = None
    mutate_roles: Optional[FrozenSet[Role]] = None
    check_ownership: bool = True


def has_role(caller: Caller, roles: Optional[FrozenSet[Role]]) -> bool:
    return roles is None or caller.role in roles


def is_owner_or_elevated(owner: Any, caller: Caller) -> bool:
    """Ownership gate: caller owns the record or holds an elevated role."""
    if caller.is_elevated:
        return True
    owner_id = UserIdentity.parse(owner)
    return owner_id is not None and owner_id == caller.identity


def can_create(policy: AccessPolicy, caller: Caller) -> bool:
    return has_role(caller, policy.create_roles)


def can_mutate(policy: AccessPolicy, caller: Caller, owner: Any) -> bool:
    """Role check, then (when the policy asks for it) the ownership gate."""
    if not has_role(caller, policy.mutate_roles):
        return False
    if not policy.check_ownership:
        return True
    return is_owner_or_elevated(owner, caller)
