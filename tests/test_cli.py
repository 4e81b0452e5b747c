"""Tests for genpi.cli."""

import json
from datetime import date
from unittest.mock import MagicMock, patch

import pytest

from genpi.cli import main, parse_args
from genpi.domain.errors import Conflict, FetchFailure
from genpi.domain.models import DateOfBirth, KanaForm, Name, PersonalInfo, Sex


def _pi(kana_form=KanaForm.HIRAGANA):
    name = Name("山田", "やまだ", "太郎", "たろう").in_kana_form(kana_form)
    return PersonalInfo.assemble(name, Sex.MALE, DateOfBirth(date(1990, 1, 2)))


@pytest.fixture
def generator():
    gen = MagicMock()
    gen.generate.side_effect = _pi
    with patch("genpi.cli.create_generator", return_value=gen):
        yield gen


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for var in ("PORT", "BASE_PATH", "LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)


# ------------------------------------------------------------------ #
#  parse_args                                                           #
# ------------------------------------------------------------------ #


class TestParseArgs:
    def test_defaults(self):
        args = parse_args([])
        assert args.katakana is False
        assert args.halfwidth is False
        assert args.server is False
        assert args.log_level is None

    def test_flags(self):
        args = parse_args(["--katakana", "--halfwidth", "--log-level", "debug"])
        assert args.katakana is True
        assert args.halfwidth is True
        assert args.log_level == "DEBUG"

    def test_halfwidth_requires_katakana(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            parse_args(["--halfwidth"])
        assert excinfo.value.code == 2
        assert "--halfwidth is only valid with --katakana" in capsys.readouterr().err


# ------------------------------------------------------------------ #
#  main                                                                 #
# ------------------------------------------------------------------ #


class TestMain:
    def test_prints_json(self, generator, capsys):
        assert main([]) == 0
        out = json.loads(capsys.readouterr().out)
        assert out["last_name"] == "山田"
        assert out["first_name_kana"] == "たろう"
        generator.generate.assert_called_once_with(KanaForm.HIRAGANA)
        generator.close.assert_called_once()

    def test_katakana_halfwidth(self, generator, capsys):
        assert main(["--katakana", "--halfwidth"]) == 0
        out = json.loads(capsys.readouterr().out)
        assert out["first_name_kana"] == "ﾀﾛｳ"
        generator.generate.assert_called_once_with(KanaForm.HALFWIDTH_KANA)

    def test_output_is_single_line(self, generator, capsys):
        main(["--katakana"])
        assert capsys.readouterr().out.count("\n") == 1

    @pytest.mark.parametrize("error", [FetchFailure("down"), Conflict(Sex.FEMALE)])
    def test_generation_error_exits_nonzero(self, generator, capsys, error):
        generator.generate.side_effect = error
        assert main([]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("Error: ")
        generator.close.assert_called_once()

    def test_invalid_port_exits_before_generating(self, generator, monkeypatch, capsys):
        monkeypatch.setenv("PORT", "70000")
        assert main(["--server"]) == 1
        assert "PORT range" in capsys.readouterr().err
        generator.generate.assert_not_called()

    def test_server_mode(self, generator):
        with patch("genpi.server.run_server") as run:
            assert main(["--server"]) == 0
        config, passed = run.call_args.args
        assert config.port == 3000
        assert passed is generator
        generator.close.assert_called_once()
