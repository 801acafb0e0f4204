"""Domain entities for Bitbucket Server projects."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from bitbucket_rest.domain.common import Error, Links, page_fields, parse_errors


@dataclass(frozen=True)
class Project:
    """Immutable project entity."""

    key: Optional[str] = None
    id: Optional[int] = None
    name: Optional[str] = None
    description: Optional[str] = None
    public: bool = False
    type: Optional[str] = None
    links: Optional[Links] = None
    errors: List[Error] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Project":
        return cls(
            key=data.get("key"),
            id=data.get("id"),
            name=data.get("name"),
            description=data.get("description"),
            public=data.get("public", False),
            type=data.get("type"),
            links=Links.from_json(data.get("links")),
            errors=parse_errors(data),
        )

    @classmethod
    def on_error(cls, errors: List[Error]) -> "Project":
        return cls(errors=errors)


@dataclass(frozen=True)
class ProjectPage:
    start: int = 0
    limit: int = 0
    size: int = 0
    next_page_start: Optional[int] = None
    is_last_page: bool = True
    values: List[Project] = field(default_factory=list)
    errors: List[Error] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "ProjectPage":
        return cls(
            values=[Project.from_json(p) for p in data.get("values") or []],
            **page_fields(data),
        )

    @classmethod
    def on_error(cls, errors: List[Error]) -> "ProjectPage":
        return cls(errors=errors)
