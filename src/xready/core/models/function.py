"""Composition function request/response models (JSON form).

Field names follow the pipeline's camelCase wire form through aliases,
so models can be built from and dumped to the exchanged documents:

    req = RunFunctionRequest.model_validate(payload)
    rsp.model_dump(by_alias=True, exclude_none=True, mode="json")
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from xready.core.domain.conditions import Readiness
from xready.core.errors import Result


class ResourceEnvelope(BaseModel):
    """A resource as carried in observed or desired state."""

    model_config = ConfigDict(populate_by_name=True)

    resource: dict[str, Any] | None = None
    connection_details: dict[str, str] = Field(
        default_factory=dict, alias="connectionDetails"
    )
    ready: Readiness = Readiness.UNSPECIFIED


class State(BaseModel):
    """Observed or desired state: composite plus composed resources.

    ``resources`` is None when the mapping is absent from the request,
    which is different from an empty mapping.
    """

    composite: ResourceEnvelope | None = None
    resources: dict[str, ResourceEnvelope] | None = None


class RequestMeta(BaseModel):
    tag: str = ""


class ResponseMeta(BaseModel):
    tag: str = ""
    # Protobuf JSON duration, e.g. "60s"
    ttl: str = "60s"


class RunFunctionRequest(BaseModel):
    meta: RequestMeta = Field(default_factory=RequestMeta)
    observed: State | None = None
    desired: State | None = None
    input: dict[str, Any] | None = None
    context: dict[str, Any] | None = None


class RunFunctionResponse(BaseModel):
    meta: ResponseMeta = Field(default_factory=ResponseMeta)
    desired: State = Field(default_factory=State)
    results: list[Result] = Field(default_factory=list)
    context: dict[str, Any] | None = None
