"""Typed wrappers over unstructured resource documents."""

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field

from xready.core.domain.conditions import Condition, Readiness


def nested_field(obj: Mapping[str, Any], *fields: str) -> tuple[Any, bool]:
    """Look up a nested field.

    Returns:
        (value, True) if every key along the path exists, (None, False) otherwise.

    Raises:
        ValueError: an intermediate value is not a map.
    """
    value: Any = obj
    for i, key in enumerate(fields):
        if not isinstance(value, Mapping):
            path = ".".join(fields[:i])
            raise ValueError(f"{path} is {type(value).__name__}, not a map")
        if key not in value:
            return None, False
        value = value[key]
    return value, True


def nested_slice(obj: Mapping[str, Any], *fields: str) -> tuple[list[Any] | None, bool]:
    """Look up a nested list.

    Raises:
        ValueError: the path is malformed or the value is not a list.
    """
    value, found = nested_field(obj, *fields)
    if not found or value is None:
        return None, False
    if not isinstance(value, list):
        raise ValueError(f"{'.'.join(fields)} is {type(value).__name__}, not a list")
    return value, True


class CompositeResource(BaseModel):
    """Composite (parent) resource."""

    resource: dict[str, Any] = Field(default_factory=dict)
    connection_details: dict[str, str] = Field(default_factory=dict)

    @property
    def api_version(self) -> str:
        value = self.resource.get("apiVersion")
        return value if isinstance(value, str) else ""

    @property
    def kind(self) -> str:
        value = self.resource.get("kind")
        return value if isinstance(value, str) else ""

    @property
    def name(self) -> str:
        try:
            value, _ = nested_field(self.resource, "metadata", "name")
        except ValueError:
            return ""
        return value if isinstance(value, str) else ""

    def set_conditions(self, *conditions: Condition) -> None:
        """Set conditions by type.

        An existing condition of the same type is replaced, other conditions
        are kept, new types are appended.
        """
        status = self.resource.get("status")
        if not isinstance(status, dict):
            status = {}
            self.resource["status"] = status

        existing = status.get("conditions")
        entries: list[Any] = list(existing) if isinstance(existing, list) else []

        for condition in conditions:
            rendered = condition.to_dict()
            for i, entry in enumerate(entries):
                if isinstance(entry, Mapping) and entry.get("type") == condition.type:
                    entries[i] = rendered
                    break
            else:
                entries.append(rendered)

        status["conditions"] = entries


class ObservedChild(BaseModel):
    """Observed composed resource."""

    name: str
    resource: dict[str, Any] = Field(default_factory=dict)

    def raw_conditions(self) -> tuple[list[Any] | None, bool]:
        """Unparsed ``status.conditions`` list.

        Raises:
            ValueError: status or conditions is malformed.
        """
        return nested_slice(self.resource, "status", "conditions")


class DesiredChild(BaseModel):
    """Desired composed resource with its readiness flag."""

    name: str
    resource: dict[str, Any] = Field(default_factory=dict)
    ready: Readiness = Readiness.UNSPECIFIED
