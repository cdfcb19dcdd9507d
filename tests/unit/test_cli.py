"""
CLI walkthrough tests.

All shell tests use a rules file with zero Bar latency.
"""

import argparse
from pathlib import Path

import pytest

from testing_with_fakes.adapters.bar import Bar
from testing_with_fakes.adapters.fake_bar import FakeBar
from testing_with_fakes.app_shell.cli import (
    DEFAULT_FAKE_VALUE,
    build_collaborator,
    main,
    non_negative_int,
    run_scenario,
)
from testing_with_fakes.rules.models import BarRules, Rules


@pytest.fixture
def fast_rules() -> Rules:
    return Rules(bar=BarRules(delay_ms=0, result=42))


class TestBuildCollaborator:
    def test_scenario_a_has_no_collaborator(self, fast_rules: Rules) -> None:
        assert build_collaborator("a", fast_rules, None) is None

    def test_scenario_b_is_real_bar(self, fast_rules: Rules) -> None:
        assert isinstance(build_collaborator("b", fast_rules, None), Bar)

    def test_scenario_c_fake_mirrors_bar_result(self, fast_rules: Rules) -> None:
        fake = build_collaborator("c", fast_rules, None)
        assert isinstance(fake, FakeBar)
        assert fake.return_value == 42

    def test_scenario_d_fake_uses_other_value(self, fast_rules: Rules) -> None:
        fake = build_collaborator("d", fast_rules, None)
        assert fake is not None
        assert fake.perform_heavy_operation() == DEFAULT_FAKE_VALUE == 7

    def test_unknown_scenario(self, fast_rules: Rules) -> None:
        with pytest.raises(ValueError, match="Unknown scenario"):
            build_collaborator("z", fast_rules, None)


class TestRunScenario:
    @pytest.mark.parametrize(
        ("scenario", "expected"),
        [("a", 42), ("b", 42), ("c", 42), ("d", 7)],
    )
    def test_results(self, fast_rules: Rules, scenario: str, expected: int) -> None:
        assert run_scenario(scenario, fast_rules).result == expected

    def test_return_value_override(self, fast_rules: Rules) -> None:
        assert run_scenario("d", fast_rules, return_value=13).result == 13


class TestMain:
    def test_scenario_output(
        self, fast_rules_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = main(["--rules", str(fast_rules_path), "scenario", "d"])

        assert code == 0
        assert "scenario=d result=7 elapsed_ms=" in capsys.readouterr().out

    def test_compare_output(
        self, fast_rules_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        code = main(["--rules", str(fast_rules_path), "compare", "--return-value", "42"])

        out = capsys.readouterr().out
        assert code == 0
        assert "bar:      result=42" in out
        assert "fake_bar: result=42" in out

    def test_delay_override(
        self, rules_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """--delay-ms 0 keeps the real rules file fast."""
        code = main(["--rules", str(rules_path), "--delay-ms", "0", "scenario", "b"])

        assert code == 0
        assert "scenario=b result=42" in capsys.readouterr().out

    def test_missing_rules_file(self, tmp_path: Path) -> None:
        assert main(["--rules", str(tmp_path / "missing.yaml"), "scenario", "a"]) == 1

    def test_unknown_scenario_exits(self, fast_rules_path: Path) -> None:
        with pytest.raises(SystemExit):
            main(["--rules", str(fast_rules_path), "scenario", "z"])

    def test_negative_delay_is_usage_error(
        self, fast_rules_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """A negative --delay-ms is rejected by the parser, not by Bar."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--rules", str(fast_rules_path), "--delay-ms", "-5", "scenario", "b"])

        assert exc_info.value.code == 2
        assert "must be >= 0, got -5" in capsys.readouterr().err


class TestNonNegativeInt:
    def test_accepts_zero(self) -> None:
        assert non_negative_int("0") == 0

    def test_rejects_negative(self) -> None:
        with pytest.raises(argparse.ArgumentTypeError):
            non_negative_int("-1")
