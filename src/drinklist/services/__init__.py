"""Services package for DrinkList."""
from .base_service import Result
from .errors import DrinkListError, ValidationFailure, EditInProgress, RecordNotFound
from .drink_store import DrinkListStore

__all__ = [
    'Result',
    'DrinkListError',
    'ValidationFailure',
    'EditInProgress',
    'RecordNotFound',
    'DrinkListStore',
]
