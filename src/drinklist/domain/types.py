"""Domain types for DrinkList."""
import math
import re
from enum import Enum
from typing import NewType, Optional, List, Tuple, Union
from pydantic import BaseModel, ConfigDict, field_validator


# Strong type for record IDs
DrinkId = NewType('DrinkId', int)

# Draft fields that must be filled before a record is stored
REQUIRED_FIELDS = ('name', 'percentage', 'volume_ml')


class DrinkCategory(str, Enum):
    """Kinds of drink a record can be filed under."""
    BEER = "Beer"
    WINE = "Wine"
    WHISKEY = "Whiskey"
    VODKA = "Vodka"
    RUM = "Rum"
    COCKTAIL = "Cocktail"
    LIQUOR = "Liquor"
    UNDEFINED = "Undefined"

    @classmethod
    def parse(cls, value: Union['DrinkCategory', str, None]) -> 'DrinkCategory':
        """
        Turn user input into a category.

        Blank input falls back to UNDEFINED. Names are matched
        case-insensitively, and the old "Coctail" spelling is accepted.

        Raises:
            ValueError: If the value names no known category
        """
        if isinstance(value, cls):
            return value
        if value is None or not str(value).strip():
            return cls.UNDEFINED

        text = str(value).strip().lower()
        if text == "coctail":
            return cls.COCKTAIL
        for category in cls:
            if category.value.lower() == text:
                return category
        raise ValueError(f"Unknown drink category: {value}")

    @classmethod
    def choices(cls) -> List['DrinkCategory']:
        """Categories a user can pick, without the fallback."""
        return [c for c in cls if c is not cls.UNDEFINED]


class EditMode(str, Enum):
    """Whether the draft composes a new record or edits a stored one."""
    COMPOSING = "composing"
    EDITING = "editing"


# Leading decimal number, the part of the text a browser number parser reads
_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?|[+-]?Infinity)")


def to_number(text: str) -> float:
    """
    Read the number at the start of stored text.

    Trailing text is ignored, so "5abc" reads as 5. Text that does not
    start with a number reads as NaN.
    """
    match = _LEADING_NUMBER.match(text or "")
    if match is None:
        return math.nan
    return float(match.group(1).replace("Infinity", "inf"))


class DrinkRecord(BaseModel):
    """A stored drink."""
    id: DrinkId
    name: str
    category: DrinkCategory = DrinkCategory.UNDEFINED
    percentage: str
    volume_ml: str

    model_config = ConfigDict(frozen=True)

    @field_validator('name', 'percentage', 'volume_ml')
    @classmethod
    def must_not_be_blank(cls, v: str) -> str:
        """Strip the value and reject blanks."""
        v = v.strip()
        if not v:
            raise ValueError('value cannot be empty')
        return v

    @field_validator('category', mode='before')
    @classmethod
    def parse_category(cls, v) -> DrinkCategory:
        return DrinkCategory.parse(v)

    @property
    def alcohol_ml(self) -> float:
        """Pure alcohol in this drink, in millilitres."""
        return to_number(self.volume_ml) * to_number(self.percentage) / 100


class Draft(BaseModel):
    """Values typed into the form, plus the record being edited if any."""
    name: str = ""
    category: DrinkCategory = DrinkCategory.UNDEFINED
    percentage: str = ""
    volume_ml: str = ""
    editing_id: Optional[DrinkId] = None

    model_config = ConfigDict(frozen=True)

    @field_validator('category', mode='before')
    @classmethod
    def parse_category(cls, v) -> DrinkCategory:
        return DrinkCategory.parse(v)

    @property
    def mode(self) -> EditMode:
        return EditMode.COMPOSING if self.editing_id is None else EditMode.EDITING

    @property
    def is_editing(self) -> bool:
        return self.editing_id is not None

    def missing_fields(self) -> List[str]:
        """Required fields that are blank once trimmed."""
        return [f for f in REQUIRED_FIELDS if not getattr(self, f).strip()]

    @classmethod
    def from_record(cls, record: DrinkRecord) -> 'Draft':
        """Load a stored record for editing."""
        return cls(
            name=record.name,
            category=record.category,
            percentage=record.percentage,
            volume_ml=record.volume_ml,
            editing_id=record.id
        )


class AdvisoryWarning(BaseModel):
    """Advisory banner shown after the drink count reaches a threshold."""
    visible: bool = False
    drink_count: Optional[int] = None

    model_config = ConfigDict(frozen=True)

    @property
    def message(self) -> str:
        if self.drink_count is None:
            return ""
        return (
            f"You had {self.drink_count} drinks already, "
            "if you continue drinking it can end up bad!"
        )


class StoreSnapshot(BaseModel):
    """Read model of the whole store handed to the display layer."""
    records: Tuple[DrinkRecord, ...] = ()
    draft: Draft = Draft()
    warning: AdvisoryWarning = AdvisoryWarning()
    total_alcohol_ml: float = 0.0

    model_config = ConfigDict(frozen=True)

    @property
    def count(self) -> int:
        return len(self.records)

    @property
    def mode(self) -> EditMode:
        return self.draft.mode
