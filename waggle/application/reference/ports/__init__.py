"""Reference ports."""

from waggle.application.reference.ports.reference_gateway import ReferenceQueryGateway

__all__ = ["ReferenceQueryGateway"]
