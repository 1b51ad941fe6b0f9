"""
Domain errors

All failures in this package are caller configuration bugs: they are
raised eagerly, at construction or call time, and never retried.
"""

from typing import Optional


class DomainError(Exception):
    """Base class for domain-specific errors"""
    def __init__(
        self,
        code: str,
        message: str,
        details: Optional[dict] = None,
    ):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)


class InvalidConfigurationError(DomainError):
    """Pixel counts, step sizes or locations that cannot describe a layout"""
    def __init__(self, message: str, **details):
        super().__init__(
            code="INVALID_CONFIGURATION",
            message=message,
            details=details,
        )


class OutOfRangeError(DomainError):
    """Fewer pixel locations supplied than pixels declared"""
    def __init__(self, expected: int, actual: int):
        super().__init__(
            code="OUT_OF_RANGE",
            message=f"Expected at least {expected} pixel locations, got {actual}",
            details={
                "expected": expected,
                "actual": actual,
            },
        )
