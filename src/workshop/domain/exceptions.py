"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the orchestrator and the CLI layer can catch them uniformly.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class StoreError(DomainException):
    """A round trip to the product store failed.

    Covers transport failures, server-side rejections and missing rows
    alike; callers never need to tell them apart.
    """
