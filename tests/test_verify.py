"""Tests for the verification harness."""

import pytest

from nextprime.utils.io import load_jsonl, save_config
from nextprime.utils.logging import get_records_by_check
from nextprime.verify import (
    CHECKS,
    check_regressions,
    check_value,
    run_verification,
    verify_range,
)


def _config(out_dir, start=0, stop=200):
    return {
        "run": {"name": "test", "out_dir": str(out_dir)},
        "verify": {"start": start, "stop": stop, "checks": list(CHECKS), "progress": False},
        "regressions": [
            {"n": 101, "prime": 101},
            {"n": 472888178, "prime": 472888217},
        ],
    }


class TestCheckValue:
    """Tests for single-value checks."""

    def test_no_mismatches_for_small_values(self):
        """Test that all checks agree on small inputs."""
        for n in range(0, 50):
            assert check_value(n) == []

    def test_subset_of_checks(self):
        """Test running only one check."""
        assert check_value(97, checks=["is_prime"]) == []


class TestVerifyRange:
    """Tests for verify_range."""

    def test_range_has_no_mismatches(self):
        """Test an exhaustive range."""
        assert verify_range(0, 300) == []

    def test_empty_range(self):
        """Test that start == stop checks nothing."""
        assert verify_range(10, 10) == []

    def test_inverted_range_raises(self):
        """Test that start > stop is rejected."""
        with pytest.raises(ValueError, match="Invalid range"):
            verify_range(10, 5)

    def test_negative_range_raises(self):
        """Test that a negative start is rejected."""
        with pytest.raises(ValueError, match="Invalid range"):
            verify_range(-1, 5)

    def test_unknown_check_raises(self):
        """Test that an unknown check name is rejected."""
        with pytest.raises(ValueError, match="Invalid check"):
            verify_range(0, 5, checks=["miller_rabin"])


class TestRegressions:
    """Tests for regression replay."""

    def test_known_cases_pass(self):
        """Test that correct cases produce no mismatches."""
        cases = [{"n": 2, "prime": 2}, {"n": 472888178, "prime": 472888217}]
        assert check_regressions(cases) == []

    def test_wrong_expectation_reported(self):
        """Test that a wrong expected prime is reported."""
        mismatches = check_regressions([{"n": 24, "prime": 23}])

        assert mismatches == [
            {"check": "regression", "n": 24, "expected": 23, "actual": 29}
        ]


class TestRunVerification:
    """Tests for full verification runs."""

    def test_writes_summary(self, tmp_path, capsys):
        """Test that a clean run logs only a summary record."""
        results_path = run_verification(_config(tmp_path))

        assert results_path.exists()
        assert (results_path.parent / "config.yaml").exists()

        records = load_jsonl(results_path)
        assert len(records) == 1

        summary = records[-1]
        assert summary["check"] == "summary"
        assert summary["start"] == 0
        assert summary["stop"] == 200
        assert summary["checked"] == 202
        assert summary["mismatches"] == 0
        assert summary["time_sec"] >= 0

        out = capsys.readouterr().out
        assert f"RESULTS={results_path}" in out
        assert "WARNING" not in out

    def test_logs_mismatches(self, tmp_path, capsys):
        """Test that failed regressions are logged before the summary."""
        config = _config(tmp_path, stop=20)
        config["regressions"].append({"n": 8, "prime": 7})

        results_path = run_verification(config)
        records = load_jsonl(results_path)

        failed = get_records_by_check(records, "regression")
        assert failed == [{"check": "regression", "n": 8, "expected": 7, "actual": 11}]
        assert records[-1]["mismatches"] == 1
        assert "WARNING: 1 mismatches" in capsys.readouterr().out

    def test_invalid_range_raises(self, tmp_path):
        """Test that an inverted range fails before any output is written."""
        with pytest.raises(ValueError, match="Invalid range"):
            run_verification(_config(tmp_path, start=50, stop=10))

        assert list(tmp_path.iterdir()) == []

    def test_unknown_check_writes_nothing(self, tmp_path):
        """Test that an unknown check name fails before the run directory exists."""
        config = _config(tmp_path)
        config["verify"]["checks"] = ["bogus"]

        with pytest.raises(ValueError, match="Invalid check"):
            run_verification(config)

        assert list(tmp_path.rglob("*")) == []

    def test_accepts_config_path(self, tmp_path):
        """Test running from a YAML file instead of a dictionary."""
        config_path = tmp_path / "verify.yaml"
        save_config(_config(tmp_path / "out", stop=50), config_path)

        results_path = run_verification(config_path)

        assert results_path.parent.parent == tmp_path / "out"
        assert load_jsonl(results_path)[-1]["mismatches"] == 0
