"""Fixtures for function runner tests."""

from typing import Any

import pytest


@pytest.fixture
def payload() -> dict[str, Any]:
    """RunFunctionRequest in JSON form with one ready and one failing resource."""
    return {
        "meta": {"tag": "tag-123"},
        "observed": {
            "composite": {
                "resource": {
                    "apiVersion": "example.org/v1alpha1",
                    "kind": "XDatabase",
                    "metadata": {"name": "my-db"},
                    "spec": {"size": "small"},
                },
                "connectionDetails": {"password": "c2VjcmV0"},
            },
            "resources": {
                "bucket": {
                    "resource": {
                        "apiVersion": "s3.aws.upbound.io/v1beta1",
                        "kind": "Bucket",
                        "status": {
                            "conditions": [
                                {"type": "Synced", "status": "True", "reason": "ReconcileSuccess"},
                                {"type": "Ready", "status": "True", "reason": "Available"},
                            ]
                        },
                    }
                },
                "instance": {
                    "resource": {
                        "apiVersion": "rds.aws.upbound.io/v1beta1",
                        "kind": "Instance",
                        "status": {
                            "conditions": [
                                {
                                    "type": "Synced",
                                    "status": "False",
                                    "reason": "ReconcileError",
                                    "message": "quota exceeded",
                                },
                            ]
                        },
                    }
                },
            },
        },
        "desired": {
            "composite": {
                "resource": {
                    "apiVersion": "example.org/v1alpha1",
                    "kind": "XDatabase",
                    "status": {"endpoint": "db.example.org"},
                }
            },
            "resources": {
                "bucket": {"resource": {"apiVersion": "s3.aws.upbound.io/v1beta1", "kind": "Bucket"}},
                "instance": {
                    "resource": {"apiVersion": "rds.aws.upbound.io/v1beta1", "kind": "Instance"}
                },
                "pending": {
                    "resource": {"apiVersion": "v1", "kind": "ConfigMap"},
                    "ready": "READY_FALSE",
                },
            },
        },
        "context": {"apiextensions.crossplane.io/environment": {"region": "eu-west-1"}},
    }
