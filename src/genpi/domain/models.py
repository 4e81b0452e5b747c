"""Value objects for a generated personal-information record.

All of them are immutable. ``Name`` validates its kana reading on
construction, ``DateOfBirth`` is always a real Gregorian date.
"""

from __future__ import annotations

import json
import random
from dataclasses import dataclass, replace
from datetime import date, datetime, timezone
from enum import Enum

from . import kana
from .errors import BadRequest, NotHiragana

LIFESPAN_YEARS = 120


class Sex(Enum):
    """Sex of a generated person, serialized as its lowercase value."""

    FEMALE = "female"
    MALE = "male"

    @classmethod
    def random(cls, rng: random.Random | None = None) -> Sex:
        return (rng or random).choice(list(cls))


class KanaForm(Enum):
    """How the kana reading of a name is rendered."""

    HIRAGANA = "hiragana"
    KATAKANA = "katakana"
    HALFWIDTH_KANA = "halfwidth_kana"

    @classmethod
    def from_flags(cls, katakana: bool, halfwidth: bool) -> KanaForm:
        """Map the ``katakana``/``halfwidth`` request flags to a KanaForm.

        Raises:
            BadRequest: If ``halfwidth`` is set without ``katakana``.
        """
        if halfwidth and not katakana:
            raise BadRequest("halfwidth is only valid with katakana")
        if katakana:
            return cls.HALFWIDTH_KANA if halfwidth else cls.KATAKANA
        return cls.HIRAGANA


@dataclass(frozen=True)
class Name:
    """A Japanese name and its reading.

    Fields are stripped on construction. ``kana_form`` records how the
    reading is rendered; a hiragana-form Name (the default) must carry
    hiragana-only kana fields. Renderings are derived with
    :meth:`in_kana_form` and never re-validated.
    """

    last_name: str
    last_name_kana: str
    first_name: str
    first_name_kana: str
    kana_form: KanaForm = KanaForm.HIRAGANA

    def __post_init__(self) -> None:
        for field in ("last_name", "last_name_kana", "first_name", "first_name_kana"):
            object.__setattr__(self, field, getattr(self, field).strip())
        if self.kana_form is not KanaForm.HIRAGANA:
            return
        for value in (self.last_name_kana, self.first_name_kana):
            if not kana.is_hiragana(value):
                bad = next((c for c in value if not kana.is_hiragana(c)), value)
                raise NotHiragana(bad, value)

    def _render(self, kana_form: KanaForm, convert) -> Name:
        return replace(
            self,
            last_name_kana=convert(self.last_name_kana),
            first_name_kana=convert(self.first_name_kana),
            kana_form=kana_form,
        )

    def in_katakana(self) -> Name:
        return self._render(KanaForm.KATAKANA, kana.to_katakana)

    def in_halfwidth_kana(self) -> Name:
        return self._render(KanaForm.HALFWIDTH_KANA, kana.to_halfwidth_kana)

    def in_kana_form(self, kana_form: KanaForm) -> Name:
        if kana_form is self.kana_form:
            return self
        if kana_form is KanaForm.KATAKANA:
            return self.in_katakana()
        if kana_form is KanaForm.HALFWIDTH_KANA:
            return self.in_halfwidth_kana()
        raise ValueError(f"Cannot render {self.kana_form.value} name as hiragana")


def utc_today() -> date:
    return datetime.now(timezone.utc).date()


def is_leap_year(year: int) -> bool:
    """Gregorian rule: divisible by 4, and not by 100 unless also by 400."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    if month == 2:
        return 29 if is_leap_year(year) else 28
    if month in (4, 6, 9, 11):
        return 30
    return 31


@dataclass(frozen=True)
class DateOfBirth:
    """A calendar date, serialized as ``YYYY-MM-DD``."""

    value: date

    @classmethod
    def parse(cls, s: str) -> DateOfBirth:
        return cls(date.fromisoformat(s))

    @classmethod
    def random(
        cls,
        today: date | None = None,
        rng: random.Random | None = None,
    ) -> DateOfBirth:
        """Pick a date between ``(year-120)-01-01`` and ``year-12-31``.

        ``year`` comes from ``today``, or the current UTC date when omitted.

        Year, then month, then a day within that month's true length, so
        every draw is a valid date without rejection sampling.
        """
        rng = rng or random
        current_year = (today or utc_today()).year
        year = rng.randint(current_year - LIFESPAN_YEARS, current_year)
        month = rng.randint(1, 12)
        day = rng.randint(1, days_in_month(year, month))
        return cls(date(year, month, day))

    def isoformat(self) -> str:
        return self.value.isoformat()

    def __str__(self) -> str:
        return self.isoformat()


@dataclass(frozen=True)
class PersonalInfo:
    """A fully assembled personal-information record."""

    date_of_birth: DateOfBirth
    first_name: str
    first_name_kana: str
    last_name: str
    last_name_kana: str
    sex: Sex

    @classmethod
    def assemble(cls, name: Name, sex: Sex, date_of_birth: DateOfBirth) -> PersonalInfo:
        return cls(
            date_of_birth=date_of_birth,
            first_name=name.first_name,
            first_name_kana=name.first_name_kana,
            last_name=name.last_name,
            last_name_kana=name.last_name_kana,
            sex=sex,
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "date_of_birth": self.date_of_birth.isoformat(),
            "first_name": self.first_name,
            "first_name_kana": self.first_name_kana,
            "last_name": self.last_name,
            "last_name_kana": self.last_name_kana,
            "sex": self.sex.value,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), ensure_ascii=False)
