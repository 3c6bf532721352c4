"""In-memory drink list store."""
import itertools
from typing import Callable, List, Optional, Sequence, Tuple, Union

from drinklist.config.settings import get_settings
from drinklist.domain.types import (
    AdvisoryWarning,
    DrinkCategory,
    DrinkId,
    DrinkRecord,
    Draft,
    EditMode,
    StoreSnapshot,
)
from .base_service import BaseService, Result
from .errors import DrinkListError, EditInProgress, RecordNotFound, ValidationFailure


Listener = Callable[[StoreSnapshot], None]


class DrinkListStore(BaseService):
    """
    Owns the list of drinks, the draft being typed and the warning banner.

    Every mutation swaps in a new tuple or model instead of changing the
    current one, so snapshots handed out earlier never change under the
    reader. Listeners registered with subscribe() get a fresh snapshot
    after each change.
    """

    def __init__(
        self,
        thresholds: Optional[Sequence[int]] = None,
        precision: Optional[int] = None
    ):
        """
        Initialize the store.

        Args:
            thresholds: Drink counts that arm the warning
                (default: WARNING_THRESHOLDS setting)
            precision: Decimal places of the alcohol total
                (default: TOTAL_PRECISION setting)
        """
        super().__init__()
        settings = get_settings()
        self.thresholds = frozenset(
            settings.WARNING_THRESHOLDS if thresholds is None else thresholds
        )
        self.precision = settings.TOTAL_PRECISION if precision is None else precision

        self._records: Tuple[DrinkRecord, ...] = ()
        self._draft = Draft()
        self._warning = AdvisoryWarning()
        self._ids = itertools.count(1)
        self._listeners: List[Listener] = []

    # Read model

    @property
    def records(self) -> Tuple[DrinkRecord, ...]:
        return self._records

    @property
    def draft(self) -> Draft:
        return self._draft

    @property
    def warning(self) -> AdvisoryWarning:
        return self._warning

    @property
    def count(self) -> int:
        return len(self._records)

    @property
    def mode(self) -> EditMode:
        return self._draft.mode

    def get(self, drink_id: DrinkId) -> Optional[DrinkRecord]:
        """Get a stored record by id, None if there is none."""
        index = self._find_index(drink_id)
        return None if index is None else self._records[index]

    def total_alcohol_ml(self) -> float:
        """
        Total pure alcohol over all records, in millilitres.

        A record whose percentage or volume is not a number turns the
        total into NaN.
        """
        total = sum((record.alcohol_ml for record in self._records), 0.0)
        return round(total, self.precision)

    def snapshot(self) -> StoreSnapshot:
        """Capture the current state."""
        return StoreSnapshot(
            records=self._records,
            draft=self._draft,
            warning=self._warning,
            total_alcohol_ml=self.total_alcohol_ml()
        )

    # Subscriptions

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """
        Register a listener called with a snapshot after every change.

        Args:
            listener: Callable taking a StoreSnapshot

        Returns:
            A callable that removes the listener again
        """
        if listener not in self._listeners:
            self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snapshot)
            except Exception:
                self.logger.exception(
                    "Store listener failed",
                    listener=getattr(listener, '__qualname__', repr(listener))
                )

    # Draft events

    def change_name(self, text: str) -> Result[Draft]:
        return self._update_draft(name=text or "")

    def change_percentage(self, text: str) -> Result[Draft]:
        return self._update_draft(percentage=text or "")

    def change_volume(self, text: str) -> Result[Draft]:
        return self._update_draft(volume_ml=text or "")

    def change_category(
        self,
        category: Union[DrinkCategory, str, None]
    ) -> Result[Draft]:
        """
        Set the draft's category.

        Args:
            category: Category or its name, blank for UNDEFINED

        Returns:
            Result containing the updated draft or error
        """
        try:
            parsed = DrinkCategory.parse(category)
        except ValueError as e:
            self.logger.debug("Category rejected", category=category)
            return Result.from_error(ValidationFailure(
                str(e),
                suggestions=[c.value for c in DrinkCategory.choices()],
                metadata={'category': category}
            ))
        return self._update_draft(category=parsed)

    def _update_draft(self, **fields) -> Result[Draft]:
        self._draft = self._draft.model_copy(update=fields)
        self._notify()
        return Result.ok(self._draft)

    # Record operations

    def add(self, draft: Optional[Draft] = None) -> Result[DrinkRecord]:
        """
        Store a new record built from a draft.

        Args:
            draft: Draft to store (default: the store's current draft).
                Refused while the store itself is editing a record.

        Returns:
            Result containing the new record or error
        """
        draft = self._draft if draft is None else draft
        try:
            editing_id = (
                self._draft.editing_id if self._draft.is_editing else draft.editing_id
            )
            if editing_id is not None:
                raise EditInProgress(
                    "Cannot add a drink while another one is being edited",
                    suggestions=["Save or cancel the current edit first"],
                    metadata={'editing_id': editing_id}
                )
            self._validate_required(draft)
            record = DrinkRecord(
                id=DrinkId(next(self._ids)),
                name=draft.name,
                category=draft.category,
                percentage=draft.percentage,
                volume_ml=draft.volume_ml
            )
        except DrinkListError as e:
            self.logger.debug("Add rejected", error=e.message)
            return Result.from_error(e)

        self._records = self._records + (record,)
        self._draft = Draft()

        count = len(self._records)
        warning_armed = count in self.thresholds
        if warning_armed:
            self._warning = AdvisoryWarning(visible=True, drink_count=count)
            self._log_action("arm_warning", drink_count=count)

        self._log_action(
            "add_drink",
            drink_id=record.id,
            drink_name=record.name,
            count=count
        )
        self._notify()
        return Result.ok(record, warning_armed=warning_armed)

    def begin_edit(self, drink_id: DrinkId) -> Result[DrinkRecord]:
        """
        Load a stored record into the draft for editing.

        Calling this while another record is being edited re-targets the
        draft and drops whatever was typed for the previous one.

        Args:
            drink_id: ID of the record to edit

        Returns:
            Result containing the record being edited or error
        """
        try:
            record = self._records[self._index_of(drink_id)]
        except RecordNotFound as e:
            self.logger.debug("Edit rejected", drink_id=drink_id)
            return Result.from_error(e)

        if self._draft.is_editing and self._draft.editing_id != drink_id:
            self.logger.debug(
                "Discarding unsaved edit",
                previous_id=self._draft.editing_id
            )
        self._draft = Draft.from_record(record)
        self._log_action("begin_edit", drink_id=drink_id)
        self._notify()
        return Result.ok(record)

    def save_edit(self, draft: Optional[Draft] = None) -> Result[DrinkRecord]:
        """
        Replace the record under edit with the draft's values.

        The record keeps its id and its position in the list. The store's
        own draft is cleared only when it was editing that same record.

        Args:
            draft: Draft to save (default: the store's current draft)

        Returns:
            Result containing the updated record or error
        """
        draft = self._draft if draft is None else draft
        try:
            if not draft.is_editing:
                raise ValidationFailure(
                    "No drink is being edited",
                    suggestions=["Choose a drink to edit first"]
                )
            self._validate_required(draft)
            index = self._index_of(draft.editing_id)
            record = DrinkRecord(
                id=draft.editing_id,
                name=draft.name,
                category=draft.category,
                percentage=draft.percentage,
                volume_ml=draft.volume_ml
            )
        except DrinkListError as e:
            self.logger.debug("Save rejected", error=e.message)
            return Result.from_error(e)

        records = list(self._records)
        records[index] = record
        self._records = tuple(records)
        # A draft passed in for another record leaves the typed one alone
        if self._draft.editing_id == record.id:
            self._draft = Draft()

        self._log_action("save_edit", drink_id=record.id, drink_name=record.name)
        self._notify()
        return Result.ok(record)

    def cancel_edit(self) -> Result[Draft]:
        """Leave editing mode and clear the draft, keeping the records."""
        if self._draft.is_editing:
            self._log_action("cancel_edit", drink_id=self._draft.editing_id)
        self._draft = Draft()
        self._notify()
        return Result.ok(self._draft)

    def remove(self, drink_id: DrinkId) -> Result[Optional[DrinkRecord]]:
        """
        Remove a record. Removing an unknown id does nothing.

        Args:
            drink_id: ID of the record to remove

        Returns:
            Result containing the removed record, or None if nothing matched
        """
        index = self._find_index(drink_id)
        if index is None:
            self.logger.debug("Nothing to remove", drink_id=drink_id)
            return Result.ok(None)

        record = self._records[index]
        self._records = self._records[:index] + self._records[index + 1:]

        self._log_action("remove_drink", drink_id=drink_id, count=len(self._records))
        self._notify()
        return Result.ok(record)

    def dismiss_warning(self) -> Result[AdvisoryWarning]:
        """Hide the warning until the next threshold is reached."""
        if self._warning.visible:
            self._warning = AdvisoryWarning(
                visible=False,
                drink_count=self._warning.drink_count
            )
            self._log_action("dismiss_warning", drink_count=self._warning.drink_count)
            self._notify()
        return Result.ok(self._warning)

    # Lookup helpers

    def _find_index(self, drink_id: DrinkId) -> Optional[int]:
        for index, record in enumerate(self._records):
            if record.id == drink_id:
                return index
        return None

    def _index_of(self, drink_id: DrinkId) -> int:
        index = self._find_index(drink_id)
        if index is None:
            raise RecordNotFound(
                f"Drink {drink_id} not found",
                metadata={'drink_id': drink_id}
            )
        return index
