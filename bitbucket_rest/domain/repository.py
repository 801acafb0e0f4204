"""Domain entities for Bitbucket Server repositories."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from bitbucket_rest.domain.common import Error, Links, page_fields, parse_errors
from bitbucket_rest.domain.project import Project


@dataclass(frozen=True)
class Repository:
    """Immutable repository entity."""

    slug: Optional[str] = None
    id: Optional[int] = None
    name: Optional[str] = None
    scm_id: Optional[str] = None
    state: Optional[str] = None
    status_message: Optional[str] = None
    forkable: bool = False
    project: Optional[Project] = None
    public: bool = False
    links: Optional[Links] = None
    errors: List[Error] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Repository":
        project = data.get("project")
        return cls(
            slug=data.get("slug"),
            id=data.get("id"),
            name=data.get("name"),
            scm_id=data.get("scmId"),
            state=data.get("state"),
            status_message=data.get("statusMessage"),
            forkable=data.get("forkable", False),
            project=Project.from_json(project) if project else None,
            public=data.get("public", False),
            links=Links.from_json(data.get("links")),
            errors=parse_errors(data),
        )

    @classmethod
    def on_error(cls, errors: List[Error]) -> "Repository":
        return cls(errors=errors)


@dataclass(frozen=True)
class RepositoryPage:
    """One page of repositories within a project."""

    start: int = 0
    limit: int = 0
    size: int = 0
    next_page_start: Optional[int] = None
    is_last_page: bool = True
    values: List[Repository] = field(default_factory=list)
    errors: List[Error] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "RepositoryPage":
        return cls(
            values=[Repository.from_json(r) for r in data.get("values") or []],
            **page_fields(data),
        )

    @classmethod
    def on_error(cls, errors: List[Error]) -> "RepositoryPage":
        return cls(errors=errors)
