"""Error types raised inside DrinkList services."""
from typing import Optional, List, Dict, Any


class DrinkListError(Exception):
    """Base class for DrinkList errors."""
    def __init__(
        self,
        message: str,
        suggestions: Optional[List[str]] = None,
        metadata: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.suggestions = suggestions or []
        self.metadata = metadata or {}
        super().__init__(message)


class ValidationFailure(DrinkListError):
    """Draft values cannot be stored as they are."""
    pass


class EditInProgress(ValidationFailure):
    """A new record was submitted while another one is being edited."""
    pass


class RecordNotFound(DrinkListError):
    """No stored record has the requested id."""
    pass
