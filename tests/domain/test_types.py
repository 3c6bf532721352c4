"""Tests for DrinkList domain types."""
import math
import pytest
from pydantic import ValidationError

from drinklist.domain.types import (
    AdvisoryWarning,
    DrinkCategory,
    DrinkRecord,
    Draft,
    EditMode,
    StoreSnapshot,
    to_number,
)


@pytest.mark.parametrize("value,expected", [
    (None, DrinkCategory.UNDEFINED),
    ("", DrinkCategory.UNDEFINED),
    ("  ", DrinkCategory.UNDEFINED),
    ("Beer", DrinkCategory.BEER),
    ("whiskey", DrinkCategory.WHISKEY),
    (" LIQUOR ", DrinkCategory.LIQUOR),
    ("Coctail", DrinkCategory.COCKTAIL),
    (DrinkCategory.RUM, DrinkCategory.RUM),
])
def test_category_parse(value, expected):
    """Test parsing categories from user input."""
    assert DrinkCategory.parse(value) is expected


def test_category_parse_unknown():
    """Test that an unknown category is rejected."""
    with pytest.raises(ValueError):
        DrinkCategory.parse("Sake")


def test_category_choices():
    """Test that the fallback is not offered as a choice."""
    choices = DrinkCategory.choices()
    assert DrinkCategory.UNDEFINED not in choices
    assert [c.value for c in choices] == [
        "Beer", "Wine", "Whiskey", "Vodka", "Rum", "Cocktail", "Liquor"
    ]


def test_record_alcohol():
    """Test the alcohol amount of a single record."""
    record = DrinkRecord(id=1, name="Lager", percentage="5", volume_ml="500")
    assert record.alcohol_ml == 25
    assert record.category == DrinkCategory.UNDEFINED


def test_record_alcohol_not_a_number():
    """Test that non-numeric text gives NaN."""
    record = DrinkRecord(id=1, name="Mystery", percentage="a lot", volume_ml="500")
    assert math.isnan(record.alcohol_ml)


def test_record_rejects_blank_name():
    """Test that a record cannot be built with a blank name."""
    with pytest.raises(ValidationError):
        DrinkRecord(id=1, name="  ", percentage="5", volume_ml="500")


def test_record_is_frozen():
    """Test that stored records cannot be changed in place."""
    record = DrinkRecord(id=1, name="Lager", percentage="5", volume_ml="500")
    with pytest.raises(ValidationError):
        record.name = "Stout"


def test_draft_defaults():
    """Test that a new draft is empty and composing."""
    draft = Draft()
    assert draft.mode == EditMode.COMPOSING
    assert not draft.is_editing
    assert draft.missing_fields() == ["name", "percentage", "volume_ml"]


def test_draft_from_record():
    """Test loading a record into a draft."""
    record = DrinkRecord(id=7, name="Rum", category="Rum", percentage="40", volume_ml="40")
    draft = Draft.from_record(record)
    assert draft.editing_id == 7
    assert draft.mode == EditMode.EDITING
    assert draft.category == DrinkCategory.RUM
    assert draft.missing_fields() == []


def test_warning_message():
    """Test the warning text."""
    assert AdvisoryWarning().message == ""
    warning = AdvisoryWarning(visible=True, drink_count=10)
    assert warning.message == (
        "You had 10 drinks already, if you continue drinking it can end up bad!"
    )


def test_snapshot_count():
    """Test the snapshot's derived values."""
    record = DrinkRecord(id=1, name="Lager", percentage="5", volume_ml="500")
    snapshot = StoreSnapshot(records=(record,), total_alcohol_ml=25.0)
    assert snapshot.count == 1
    assert snapshot.mode == EditMode.COMPOSING


@pytest.mark.parametrize("text,expected", [
    ("5", 5.0),
    (" 4.5 ", 4.5),
    ("5abc", 5.0),
    ("1_000", 1.0),
    (".5", 0.5),
    ("-2", -2.0),
    ("1e2", 100.0),
    ("Infinity", math.inf),
])
def test_to_number(text, expected):
    """Test reading the leading number of stored text."""
    assert to_number(text) == expected


@pytest.mark.parametrize("text", ["", "abc", "nan", "inf", "e5", "-"])
def test_to_number_not_a_number(text):
    """Test text that does not start with a number."""
    assert math.isnan(to_number(text))
