"""Tests for the command-line interface."""

import json
import pytest

from loadwise.cli import main


RUN = {
    "date": "2025-03-31",
    "durationMinutes": 60,
    "distanceKm": 10,
    "avgHeartRate": 150,
    "restingHeartRate": 55,
    "heartRateVariabilityMs": 60,
    "heartRateRecoveryBpm": 20,
    "vo2Max": 50,
    "trainingStressScore": 80,
}


class TestAssessCommand:
    """Tests for `loadwise assess`."""

    def test_assess_json(self, tmp_path, capsys):
        path = tmp_path / "runs.json"
        path.write_text(json.dumps([RUN]))

        exit_code = main(["assess", str(path), "--json"])

        assert exit_code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["acute_load"] == 80.0
        assert data["acute_chronic_ratio"] == 1.0
        assert data["injury_risk_score"] == 20
        assert data["session_count"] == 1

    def test_assess_table(self, tmp_path, capsys):
        path = tmp_path / "runs.json"
        path.write_text(json.dumps([RUN]))

        assert main(["assess", str(path), "-e", "Expert", "-a", "60+"]) == 0
        out = capsys.readouterr().out
        assert "Load & Risk Assessment" in out
        assert "Alerts" in out

    def test_assess_empty_history(self, tmp_path, capsys):
        path = tmp_path / "runs.json"
        path.write_text("[]")

        assert main(["assess", str(path)]) == 0
        assert "Not enough data" in capsys.readouterr().out

    def test_assess_missing_file(self, tmp_path, capsys):
        assert main(["assess", str(tmp_path / "missing.json")]) == 1
        assert "not found" in capsys.readouterr().out

    def test_assess_invalid_file(self, tmp_path, capsys):
        path = tmp_path / "runs.json"
        path.write_text(json.dumps([dict(RUN, durationMinutes=0)]))

        assert main(["assess", str(path)]) == 1
        assert "Invalid run record" in capsys.readouterr().out

    def test_assess_undecodable_file(self, tmp_path, capsys):
        """A file that is not UTF-8 exits with an error instead of a traceback."""
        path = tmp_path / "runs.json"
        path.write_bytes(b"[\xff]")

        assert main(["assess", str(path)]) == 1
        assert "Cannot read history file" in capsys.readouterr().out

    def test_assess_infinite_duration(self, tmp_path, capsys):
        path = tmp_path / "runs.json"
        path.write_text(json.dumps([dict(RUN, durationMinutes=float("inf"))]))

        assert main(["assess", str(path), "--json"]) == 1
        assert "Invalid run record" in capsys.readouterr().out


class TestOtherCommands:
    """Tests for demo, threshold and quick commands."""

    def test_demo_json(self, capsys):
        assert main(["demo", "--days", "14", "--seed", "3", "--json"]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["session_count"] == 14
        assert data["injury_risk_score"] % 20 == 0

    def test_threshold(self, capsys):
        assert main(["threshold", "--experience", "Expert", "--age-group", "60+"]) == 0
        assert "1.30" in capsys.readouterr().out

    def test_quick(self, capsys):
        assert main(["quick", "--hr", "150", "--pace", "8:30", "--distance", "5"]) == 0
        out = capsys.readouterr().out
        assert "Load Score: 2.85" in out
        assert "Train harder!" in out

    def test_quick_invalid_pace(self, capsys):
        assert main(["quick", "--hr", "150", "--pace", "830", "--distance", "5"]) == 1
        assert "Invalid input" in capsys.readouterr().out

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()

    def test_quick_requires_arguments(self):
        with pytest.raises(SystemExit):
            main(["quick", "--hr", "150"])
