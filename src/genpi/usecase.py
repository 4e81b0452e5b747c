"""Generate-PI use case: combines a name, a sex and a date of birth."""

from __future__ import annotations

import logging
import random
from datetime import date
from typing import Callable

from .domain.generator import NameGenerator
from .domain.models import DateOfBirth, KanaForm, PersonalInfo, Sex, utc_today

logger = logging.getLogger(__name__)


class GeneratePi:
    """Produces a PersonalInfo from any NameGenerator.

    Implements the ``PiGenerator`` protocol. ``FetchFailure`` and
    ``Conflict`` from the name generator propagate unchanged.
    """

    def __init__(
        self,
        name_generator: NameGenerator,
        rng: random.Random | None = None,
        today: Callable[[], date] = utc_today,
    ):
        self.name_generator = name_generator
        self._rng = rng or random.Random()
        self._today = today

    def generate(self, kana_form: KanaForm = KanaForm.HIRAGANA) -> PersonalInfo:
        sex = Sex.random(self._rng)
        name = self.name_generator.generate(sex).in_kana_form(kana_form)
        date_of_birth = DateOfBirth.random(today=self._today(), rng=self._rng)
        pi = PersonalInfo.assemble(name, sex, date_of_birth)
        logger.debug("Generated %s (%s)", pi, kana_form.value)
        return pi

    def close(self):
        close = getattr(self.name_generator, "close", None)
        if close is not None:
            close()
