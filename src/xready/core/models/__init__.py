"""Resource and function request/response models."""

from xready.core.models.function import (
    RequestMeta,
    ResourceEnvelope,
    ResponseMeta,
    RunFunctionRequest,
    RunFunctionResponse,
    State,
)
from xready.core.models.resource import (
    CompositeResource,
    DesiredChild,
    ObservedChild,
    nested_field,
    nested_slice,
)

__all__ = [
    "CompositeResource",
    "DesiredChild",
    "ObservedChild",
    "RequestMeta",
    "ResourceEnvelope",
    "ResponseMeta",
    "RunFunctionRequest",
    "RunFunctionResponse",
    "State",
    "nested_field",
    "nested_slice",
]
