"""Repository hook descriptors."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from bitbucket_rest.domain.common import Error, page_fields, parse_errors


@dataclass(frozen=True)
class HookDetails:
    """
    Static description of a hook plugin.

    ``key`` is the composite ``"pluginKey:moduleKey"`` identifier used in
    hook URLs. ``config_form_key`` is None for hooks that need no settings.
    """

    key: Optional[str] = None
    name: Optional[str] = None
    type: Optional[str] = None
    description: Optional[str] = None
    version: Optional[str] = None
    config_form_key: Optional[str] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "HookDetails":
        return cls(
            key=data.get("key"),
            name=data.get("name"),
            type=data.get("type"),
            description=data.get("description"),
            version=data.get("version"),
            config_form_key=data.get("configFormKey"),
        )


@dataclass(frozen=True)
class Hook:
    details: Optional[HookDetails] = None
    enabled: bool = False
    configured: bool = False
    errors: List[Error] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Hook":
        details = data.get("details")
        return cls(
            details=HookDetails.from_json(details) if details else None,
            enabled=data.get("enabled", False),
            configured=data.get("configured", False),
            errors=parse_errors(data),
        )

    @classmethod
    def on_error(cls, errors: List[Error]) -> "Hook":
        return cls(errors=errors)


@dataclass(frozen=True)
class HookPage:
    start: int = 0
    limit: int = 0
    size: int = 0
    next_page_start: Optional[int] = None
    is_last_page: bool = True
    values: List[Hook] = field(default_factory=list)
    errors: List[Error] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "HookPage":
        return cls(
            values=[Hook.from_json(h) for h in data.get("values") or []],
            **page_fields(data),
        )

    @classmethod
    def on_error(cls, errors: List[Error]) -> "HookPage":
        return cls(errors=errors)
