"""Base service class with common functionality."""
from typing import TypeVar, Generic, Optional, List
from pydantic import BaseModel, ConfigDict

from drinklist.utils.logger import get_logger
from drinklist.domain.types import Draft
from .errors import DrinkListError, ValidationFailure

# Generic type for service results
T = TypeVar('T')


class Result(BaseModel, Generic[T]):
    """Generic result type for service operations."""
    success: bool
    data: Optional[T] = None
    error: str = ""
    suggestions: List[str] = []
    metadata: dict = {}

    model_config = ConfigDict(arbitrary_types_allowed=True)

    @classmethod
    def ok(cls, data: T, **metadata) -> 'Result[T]':
        """Create a successful result."""
        return cls(success=True, data=data, metadata=metadata)

    @classmethod
    def from_error(cls, error: DrinkListError) -> 'Result[T]':
        """Create a failed result from a DrinkListError."""
        return cls(
            success=False,
            error=error.message,
            suggestions=error.suggestions,
            metadata={'error_type': type(error).__name__, **error.metadata}
        )

    @property
    def error_type(self) -> Optional[str]:
        """Name of the error class behind a failed result."""
        return self.metadata.get('error_type')


class BaseService:
    """Base class for all services."""

    def __init__(self):
        self.logger = get_logger(self.__class__.__name__)

    def _log_action(
        self,
        action: str,
        status: str = "success",
        **kwargs
    ) -> None:
        """
        Log a service action.

        Args:
            action: Name of the action
            status: Status of the action
            **kwargs: Additional log data
        """
        self.logger.info(f"{action}: {status}", **kwargs)

    def _validate_required(self, draft: Draft) -> None:
        """
        Check that the draft's required fields are filled.

        Args:
            draft: Draft to check

        Raises:
            ValidationFailure: If name, percentage or volume is blank
        """
        missing = draft.missing_fields()
        if missing:
            self.logger.debug("Draft validation failed", missing_fields=missing)
            raise ValidationFailure(
                f"Missing required fields: {', '.join(missing)}",
                suggestions=["Fill in the drink name, percentage and amount"],
                metadata={'missing_fields': missing}
            )
