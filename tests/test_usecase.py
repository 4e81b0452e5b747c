"""Tests for genpi.usecase (GeneratePi) and the create_generator factory."""

import random
from datetime import date
from unittest.mock import MagicMock

import pytest

from genpi import create_generator
from genpi.domain.errors import Conflict, FetchFailure
from genpi.domain.models import KanaForm, Name, Sex, utc_today
from genpi.infra.cache import NamesCache
from genpi.infra.namegen import NamegenSource
from genpi.usecase import GeneratePi


class StubNameGenerator:
    def __init__(self):
        self.sexes: list[Sex] = []

    def generate(self, sex):
        self.sexes.append(sex)
        return Name("山田", "やまだ", "太郎", "たろう")


def _make_usecase(name_generator=None):
    return GeneratePi(
        name_generator or StubNameGenerator(),
        rng=random.Random(0),
        today=lambda: date(2026, 10, 19),
    )


class TestGeneratePi:
    def test_hiragana(self):
        pi = _make_usecase().generate(KanaForm.HIRAGANA)
        assert pi.first_name == "太郎"
        assert pi.first_name_kana == "たろう"
        assert pi.last_name_kana == "やまだ"

    def test_katakana(self):
        pi = _make_usecase().generate(KanaForm.KATAKANA)
        assert pi.first_name_kana == "タロウ"
        assert pi.last_name_kana == "ヤマダ"

    def test_halfwidth(self):
        pi = _make_usecase().generate(KanaForm.HALFWIDTH_KANA)
        assert pi.first_name_kana == "ﾀﾛｳ"
        assert pi.last_name_kana == "ﾔﾏﾀﾞ"
        assert pi.last_name == "山田"

    def test_sex_passed_to_name_generator_matches_record(self):
        names = StubNameGenerator()
        usecase = _make_usecase(names)
        records = [usecase.generate() for _ in range(50)]
        assert [r.sex for r in records] == names.sexes
        assert {r.sex for r in records} == {Sex.FEMALE, Sex.MALE}

    def test_date_of_birth_in_range(self):
        usecase = _make_usecase()
        for _ in range(200):
            dob = usecase.generate().date_of_birth.value
            assert 1906 <= dob.year <= 2026

    @pytest.mark.parametrize("error", [FetchFailure("down"), Conflict(Sex.MALE)])
    def test_errors_propagate(self, error):
        names = MagicMock()
        names.generate.side_effect = error
        with pytest.raises(type(error)):
            _make_usecase(names).generate()

    def test_today_defaults_to_utc_date(self):
        assert GeneratePi(StubNameGenerator())._today is utc_today

    def test_close_forwards_to_name_generator(self):
        names = MagicMock()
        _make_usecase(names).close()
        names.close.assert_called_once()


class TestCreateGenerator:
    def test_wiring(self):
        generator = create_generator(timeout=3)
        try:
            assert isinstance(generator, GeneratePi)
            assert isinstance(generator.name_generator, NamesCache)
            source = generator.name_generator._source
            assert isinstance(source, NamegenSource)
            assert source._http.timeout == 3
        finally:
            generator.close()
