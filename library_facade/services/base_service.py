"""
Base service interface for external collaborators.
"""
from abc import ABC
from typing import Any, Dict, Optional


class BaseService(ABC):
    """Base class for all external service integrations.

    This abstract class defines the lifecycle shared by the library's
    collaborators: an optional configuration mapping validated at
    construction, and a ``close`` hook that releases whatever the
    service holds. Callers that acquire a service for an operation
    release it with ``close`` when the operation ends.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """Initialize the service with configuration.

        Args:
            config: Configuration dictionary for the service
        """
        self.config = config or {}
        self._validate_config()

    def _validate_config(self) -> None:
        """Validate the service configuration.

        Raises:
            ValueError: If configuration is invalid
        """
        pass

    def close(self) -> None:
        """Release any resources held by the service."""
        pass
