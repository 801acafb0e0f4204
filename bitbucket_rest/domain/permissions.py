"""Repository permission grants for users and groups."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from bitbucket_rest.domain.common import Error, page_fields


class Permission(str, Enum):
    """Permission levels accepted by the repository permission endpoints."""

    REPO_READ = "REPO_READ"
    REPO_WRITE = "REPO_WRITE"
    REPO_ADMIN = "REPO_ADMIN"


@dataclass(frozen=True)
class User:
    name: Optional[str] = None
    email_address: Optional[str] = None
    id: Optional[int] = None
    display_name: Optional[str] = None
    active: bool = False
    slug: Optional[str] = None
    type: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "User":
        return cls(
            name=data.get("name"),
            email_address=data.get("emailAddress"),
            id=data.get("id"),
            display_name=data.get("displayName"),
            active=data.get("active", False),
            slug=data.get("slug"),
            type=data.get("type"),
        )


@dataclass(frozen=True)
class Group:
    name: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Group":
        return cls(name=data.get("name"))


@dataclass(frozen=True)
class Permissions:
    """A grant of ``permission`` to exactly one of ``user`` or ``group``."""

    permission: Optional[str] = None
    user: Optional[User] = None
    group: Optional[Group] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Permissions":
        user = data.get("user")
        group = data.get("group")
        return cls(
            permission=data.get("permission"),
            user=User.from_json(user) if user else None,
            group=Group.from_json(group) if group else None,
        )


@dataclass(frozen=True)
class PermissionsPage:
    start: int = 0
    limit: int = 0
    size: int = 0
    next_page_start: Optional[int] = None
    is_last_page: bool = True
    values: List[Permissions] = field(default_factory=list)
    errors: List[Error] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "PermissionsPage":
        return cls(
            values=[Permissions.from_json(p) for p in data.get("values") or []],
            **page_fields(data),
        )

    @classmethod
    def on_error(cls, errors: List[Error]) -> "PermissionsPage":
        return cls(errors=errors)
