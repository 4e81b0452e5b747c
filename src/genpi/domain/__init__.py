"""Domain layer: value objects, kana transliteration and generator interfaces."""

from .errors import (
    BadRequest,
    Conflict,
    FetchFailure,
    GenPiError,
    InvalidConfiguration,
    NotHiragana,
)
from .generator import NameGenerator, NameSource, PiGenerator
from .models import DateOfBirth, KanaForm, Name, PersonalInfo, Sex

__all__ = [
    "BadRequest",
    "Conflict",
    "DateOfBirth",
    "FetchFailure",
    "GenPiError",
    "InvalidConfiguration",
    "KanaForm",
    "Name",
    "NameGenerator",
    "NameSource",
    "NotHiragana",
    "PersonalInfo",
    "PiGenerator",
    "Sex",
]
