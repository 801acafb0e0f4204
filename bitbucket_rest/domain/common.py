"""Value records shared by every Bitbucket Server response entity."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class Error:
    """A single entry from a Bitbucket ``{"errors": [...]}`` body."""

    context: Optional[str]
    message: Optional[str]
    exception_name: Optional[str]

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Error":
        return cls(
            context=data.get("context"),
            message=data.get("message"),
            exception_name=data.get("exceptionName"),
        )


@dataclass(frozen=True)
class Link:
    href: str
    name: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Link":
        return cls(href=data.get("href"), name=data.get("name"))


@dataclass(frozen=True)
class Links:
    """The ``self`` and ``clone`` links attached to projects and repositories."""

    self_links: List[Link] = field(default_factory=list)
    clone_links: List[Link] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Optional[Dict[str, Any]]) -> Optional["Links"]:
        if not data:
            return None
        return cls(
            self_links=[Link.from_json(link) for link in data.get("self", [])],
            clone_links=[Link.from_json(link) for link in data.get("clone", [])],
        )


def parse_errors(data: Optional[Dict[str, Any]]) -> List[Error]:
    """Extract the error list from a decoded response body."""
    if not data:
        return []
    return [Error.from_json(err) for err in data.get("errors") or []]


def page_fields(data: Dict[str, Any]) -> Dict[str, Any]:
    """
    Common keyword arguments for the paged wrappers.

    Bitbucket reports ``size`` as the number of values in this page and
    ``nextPageStart`` only when ``isLastPage`` is false.
    """
    return {
        "start": data.get("start", 0),
        "limit": data.get("limit", 0),
        "size": data.get("size", len(data.get("values") or [])),
        "next_page_start": data.get("nextPageStart"),
        "is_last_page": data.get("isLastPage", True),
        "errors": parse_errors(data),
    }
