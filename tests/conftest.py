from pathlib import Path

import pytest

from testing_with_fakes.rules.loader import load_rules
from testing_with_fakes.rules.models import Rules

PROJECT_ROOT = Path(__file__).parent.parent


@pytest.fixture
def rules_path() -> Path:
    """The real rules.yaml at the project root."""
    return PROJECT_ROOT / "rules.yaml"


@pytest.fixture
def rules(rules_path: Path) -> Rules:
    return load_rules(rules_path)


@pytest.fixture
def fast_rules_path(tmp_path: Path) -> Path:
    """Rules file with no Bar latency, for tests that go through the shell."""
    path = tmp_path / "rules.yaml"
    path.write_text(
        "bar:\n"
        "  delay_ms: 0\n"
        "  result: 42\n"
        "logging:\n"
        "  level: WARNING\n"
    )
    return path
