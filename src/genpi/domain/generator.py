"""Generator protocols (interfaces).

The HTTP handler and the CLI depend only on these, so the production
cache-backed implementation can be swapped for a test double.
"""

from __future__ import annotations

from typing import Protocol

from .models import KanaForm, Name, PersonalInfo, Sex


class NameGenerator(Protocol):
    """Produces one hiragana-form Name for a given sex."""

    def generate(self, sex: Sex) -> Name:
        """Return a name for ``sex``.

        Raises:
            FetchFailure: The upstream name list could not be obtained.
            Conflict: The source is busy serving another request for ``sex``.
        """
        ...


class NameSource(Protocol):
    """Fetches the full, ordered name list for a sex from upstream."""

    def fetch(self, sex: Sex) -> list[Name]:
        ...


class PiGenerator(Protocol):
    """Produces a complete PersonalInfo rendered in the requested kana form."""

    def generate(self, kana_form: KanaForm) -> PersonalInfo:
        ...
