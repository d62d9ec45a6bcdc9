"""Tests for geoquiz/trainer.py module."""

from __future__ import annotations

import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from geoquiz.core.models import GameMode, Point, Question
from geoquiz.data import get_city_by_id, get_federal_state_by_id
from geoquiz.trainer import _parse_point, main


@pytest.fixture
def cli_env(tmp_path: Path):
    """Point the database at a temp file and silence logging setup."""
    env = {
        "GEOQUIZ_DATABASE_PATH": str(tmp_path / "quiz.db"),
        "GEOQUIZ_LOG_FILE": str(tmp_path / "geoquiz.log"),
    }
    with patch.dict(os.environ, env), patch("geoquiz.trainer.setup_logging"):
        yield tmp_path


def fixed_questions(*state_ids: str):
    """Question generator stand-in returning the given states in order."""

    def generator(mode: GameMode, sample_size: int | None = None) -> list[Question]:
        return [
            Question(location=get_federal_state_by_id(state_id), mode=mode)
            for state_id in state_ids
        ]

    return generator


class TestMainCommand:
    """Test the main CLI command."""

    def setup_method(self):
        """Set up test fixtures."""
        self.runner = CliRunner()

    def test_version_option(self):
        result = self.runner.invoke(main, ["--version"])
        assert result.exit_code == 0
        assert "geoquiz, version 0.1.0" in result.output

    def test_help_option(self):
        result = self.runner.invoke(main, ["--help"])
        assert result.exit_code == 0
        assert "GeoQuiz - find German states" in result.output
        assert "--mode" in result.output
        assert "--stats" in result.output
        assert "--reset" in result.output
        assert "--timer-duration" in result.output

    def test_invalid_mode(self):
        result = self.runner.invoke(main, ["--mode", "moon"])
        assert result.exit_code != 0

    def test_stats_on_first_run(self, cli_env):
        result = self.runner.invoke(main, ["--stats"])
        assert result.exit_code == 0
        assert "Sessions played: 0" in result.output

    def test_play_regions_session(self, cli_env):
        with patch("geoquiz.trainer.generate_questions", fixed_questions("by", "he")):
            result = self.runner.invoke(
                main, ["--mode", "regions"], input="DE-BY\nMuenchen\nDE-SL\n"
            )

        assert result.exit_code == 0, result.output
        assert "Correct capital!" in result.output
        assert "Final score: 2" in result.output

        stats_result = self.runner.invoke(main, ["--stats"])
        assert "Sessions played: 1" in stats_result.output
        assert "Hessen" in stats_result.output

    def test_quit_ends_session_early(self, cli_env):
        with patch("geoquiz.trainer.generate_questions", fixed_questions("by", "he")):
            result = self.runner.invoke(main, ["--mode", "federal_state"], input="q\n")

        assert result.exit_code == 0, result.output
        assert "Final score: 0" in result.output

    def test_play_city_session(self, cli_env):
        koeln = get_city_by_id("koeln")

        def generator(mode: GameMode, sample_size: int | None = None) -> list[Question]:
            return [Question(location=koeln, mode=mode)]

        with patch("geoquiz.trainer.generate_questions", generator):
            result = self.runner.invoke(main, ["--mode", "city"], input="355,452\n")

        assert result.exit_code == 0, result.output
        assert "Final score: 1" in result.output

    def test_empty_mode(self, cli_env):
        with patch("geoquiz.trainer.generate_questions", return_value=[]):
            result = self.runner.invoke(main, ["--mode", "city"])

        assert result.exit_code == 0
        assert "No questions available" in result.output

    def test_reset_confirmed(self, cli_env):
        with patch("geoquiz.trainer.generate_questions", fixed_questions("by")):
            self.runner.invoke(main, ["--mode", "regions"], input="DE-HE\n")

        result = self.runner.invoke(main, ["--reset"], input="y\n")

        assert result.exit_code == 0
        assert "Statistics reset successfully" in result.output
        assert "Sessions played: 0" in self.runner.invoke(main, ["--stats"]).output

    def test_reset_cancelled(self, cli_env):
        result = self.runner.invoke(main, ["--reset"], input="n\n")
        assert result.exit_code == 0
        assert "Reset cancelled" in result.output

    def test_export_stats(self, cli_env):
        with self.runner.isolated_filesystem(temp_dir=cli_env):
            result = self.runner.invoke(main, ["--export-stats"])
            exported = list(Path(".").glob("geoquiz_stats_*.json"))

            assert result.exit_code == 0
            assert len(exported) == 1
            data = json.loads(exported[0].read_text(encoding="utf-8"))
            assert data["total_sessions"] == 0
            assert set(data["by_mode"]) == {mode.value for mode in GameMode}

    def test_stats_show_timer_off_by_default(self, cli_env):
        result = self.runner.invoke(main, ["--stats"])
        assert result.exit_code == 0
        assert "Timer: off" in result.output

    def test_timer_settings_are_saved(self, cli_env):
        result = self.runner.invoke(main, ["--timer", "--timer-duration", "45"])

        assert result.exit_code == 0, result.output
        assert "Settings saved" in result.output
        stats_result = self.runner.invoke(main, ["--stats"])
        assert "Timer: on (45s per question)" in stats_result.output

    def test_no_timer_keeps_duration(self, cli_env):
        self.runner.invoke(main, ["--timer", "--timer-duration", "90"])

        result = self.runner.invoke(main, ["--no-timer"])

        assert result.exit_code == 0, result.output
        assert "Timer: off" in self.runner.invoke(main, ["--stats"]).output
        self.runner.invoke(main, ["--timer"])
        assert "Timer: on (90s per question)" in self.runner.invoke(main, ["--stats"]).output

    def test_timer_duration_out_of_range(self, cli_env):
        result = self.runner.invoke(main, ["--timer-duration", "0"])
        assert result.exit_code == 2
        assert "Timer: off" in self.runner.invoke(main, ["--stats"]).output

    def test_reset_keeps_timer_settings(self, cli_env):
        self.runner.invoke(main, ["--timer"])

        self.runner.invoke(main, ["--reset"], input="y\n")

        assert "Timer: on (30s per question)" in self.runner.invoke(main, ["--stats"]).output

    def test_unexpected_error_exits(self, cli_env):
        with patch("geoquiz.trainer.KeyValueStore", side_effect=RuntimeError("boom")):
            result = self.runner.invoke(main, ["--stats"])

        assert result.exit_code == 1
        assert "Error: boom" in result.output


class TestParsePoint:
    """Test coordinate parsing."""

    def test_valid(self):
        assert _parse_point("450, 500") == Point(x=450, y=500)

    @pytest.mark.parametrize("text", ["", "450", "a,b", "1,2,3"])
    def test_invalid(self, text):
        assert _parse_point(text) is None

