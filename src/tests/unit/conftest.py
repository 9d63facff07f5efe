"""Shared fixtures for unit tests."""

from collections.abc import Callable, Iterator
from datetime import UTC, datetime
from typing import Any

import pytest

from xready.app.config import get_settings
from xready.core.models.resource import CompositeResource, DesiredChild, ObservedChild

NOW = datetime(2024, 5, 1, 12, 0, 0, tzinfo=UTC)


@pytest.fixture(autouse=True)
def clear_settings_cache() -> Iterator[None]:
    """Settings are cached per process; tests may change env."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def now() -> datetime:
    return NOW


@pytest.fixture
def parent() -> CompositeResource:
    return CompositeResource(
        resource={
            "apiVersion": "example.org/v1alpha1",
            "kind": "XDatabase",
            "metadata": {"name": "my-db"},
        }
    )


ConditionFactory = Callable[..., dict[str, Any]]
ObservedFactory = Callable[[str, Any], ObservedChild]
DesiredFactory = Callable[..., DesiredChild]


@pytest.fixture
def cond() -> ConditionFactory:
    """Unstructured condition entry factory."""

    def _cond(
        type: str = "Ready",
        status: Any = "True",
        reason: str = "Available",
        message: str = "",
    ) -> dict[str, Any]:
        return {"type": type, "status": status, "reason": reason, "message": message}

    return _cond


@pytest.fixture
def make_observed() -> ObservedFactory:
    """Observed composed resource with the given status.conditions value."""

    def _make(name: str, conditions: Any) -> ObservedChild:
        return ObservedChild(
            name=name,
            resource={"apiVersion": "v1", "kind": "Thing", "status": {"conditions": conditions}},
        )

    return _make


@pytest.fixture
def make_desired() -> DesiredFactory:
    def _make(name: str, **kwargs: Any) -> DesiredChild:
        return DesiredChild(name=name, resource={"apiVersion": "v1", "kind": "Thing"}, **kwargs)

    return _make
