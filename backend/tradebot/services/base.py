"""
Base Service Interface

All engine services inherit from this base class.
Services are synchronous pure computations: no I/O, no shared state.
"""

from abc import ABC, abstractmethod


class BaseService(ABC):
    """
    Base class for all services.

    Each service:
    - Has a name used in logs and errors
    - Never raises for degenerate input (returns a safe fallback instead)
    - Can check its health
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Service name for logging."""
        pass

    def health_check(self) -> bool:
        """Engine services are always healthy (pure computation)."""
        return True


class ServiceError(Exception):
    """Base exception for service errors."""

    def __init__(self, service_name: str, message: str, details: dict = None):
        self.service_name = service_name
        self.message = message
        self.details = details or {}
        super().__init__(f"[{service_name}] {message}")


class InsufficientDataError(ServiceError):
    """Series shorter than a required window."""
    pass


class ComputationError(ServiceError):
    """Numeric edge case (empty returns, division by zero, non-finite result)."""
    pass
