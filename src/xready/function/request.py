"""Extract typed resources from a RunFunctionRequest.

Missing observed composite, observed composed resources or desired
composed resources is fatal for the run. Returned objects are deep copies:
callers may mutate them freely.
"""

from copy import deepcopy

from xready.core.errors import (
    DesiredResourcesMissingError,
    ObservedCompositeMissingError,
    ObservedResourcesMissingError,
)
from xready.core.models.function import RunFunctionRequest
from xready.core.models.resource import CompositeResource, DesiredChild, ObservedChild

_SOURCE = "RunFunctionRequest"


def get_observed_composite_resource(req: RunFunctionRequest) -> CompositeResource:
    composite = req.observed.composite if req.observed else None
    if composite is None or composite.resource is None:
        raise ObservedCompositeMissingError(
            f"cannot get observed composite resource from {_SOURCE}: "
            "observed state has no composite resource"
        )
    return CompositeResource(
        resource=deepcopy(composite.resource),
        connection_details=dict(composite.connection_details),
    )


def get_observed_composed_resources(req: RunFunctionRequest) -> dict[str, ObservedChild]:
    resources = req.observed.resources if req.observed else None
    if resources is None:
        raise ObservedResourcesMissingError(
            f"cannot get observed composed resources from {_SOURCE}: "
            "observed state has no composed resources"
        )
    return {
        name: ObservedChild(name=name, resource=deepcopy(envelope.resource or {}))
        for name, envelope in resources.items()
    }


def get_desired_composed_resources(req: RunFunctionRequest) -> dict[str, DesiredChild]:
    resources = req.desired.resources if req.desired else None
    if resources is None:
        raise DesiredResourcesMissingError(
            f"cannot get desired composed resources from {_SOURCE}: "
            "desired state has no composed resources"
        )
    return {
        name: DesiredChild(
            name=name,
            resource=deepcopy(envelope.resource or {}),
            ready=envelope.ready,
        )
        for name, envelope in resources.items()
    }


def get_desired_composite_resource(req: RunFunctionRequest) -> CompositeResource:
    """Desired composite, or an empty one when earlier steps set none."""
    composite = req.desired.composite if req.desired else None
    if composite is None or composite.resource is None:
        return CompositeResource()
    return CompositeResource(
        resource=deepcopy(composite.resource),
        connection_details=dict(composite.connection_details),
    )
