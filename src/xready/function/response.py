"""Build a RunFunctionResponse."""

from collections.abc import Mapping
from copy import deepcopy

from xready.core.errors import XReadyError
from xready.core.models.function import (
    ResourceEnvelope,
    ResponseMeta,
    RunFunctionRequest,
    RunFunctionResponse,
    State,
)
from xready.core.models.resource import CompositeResource, DesiredChild

DEFAULT_TTL_SECONDS = 60.0


def format_ttl(seconds: float) -> str:
    """Protobuf JSON duration ("60s", "1.5s")."""
    return f"{seconds:g}s"


def to(req: RunFunctionRequest, ttl_seconds: float = DEFAULT_TTL_SECONDS) -> RunFunctionResponse:
    """Start a response that passes the request's desired state through."""
    desired = req.desired.model_copy(deep=True) if req.desired else State()
    return RunFunctionResponse(
        meta=ResponseMeta(tag=req.meta.tag, ttl=format_ttl(ttl_seconds)),
        desired=desired,
        context=deepcopy(req.context),
    )


def fatal(rsp: RunFunctionResponse, err: XReadyError) -> None:
    rsp.results.append(err.to_result())


def set_desired_composite_resource(rsp: RunFunctionResponse, xr: CompositeResource) -> None:
    rsp.desired.composite = ResourceEnvelope(
        resource=deepcopy(xr.resource),
        connection_details=dict(xr.connection_details),
    )


def set_desired_composed_resources(
    rsp: RunFunctionResponse, desired: Mapping[str, DesiredChild]
) -> None:
    """Write composed resources by name; other desired resources are kept."""
    resources = dict(rsp.desired.resources or {})
    for name, child in desired.items():
        resources[name] = ResourceEnvelope(
            resource=deepcopy(child.resource),
            ready=child.ready,
        )
    rsp.desired.resources = resources
