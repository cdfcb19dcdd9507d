import logging
import os
from pathlib import Path

RULES_PATH_ENV = "TWF_RULES_PATH"
DEFAULT_RULES_PATH = "rules.yaml"


def resolve_rules_path(explicit: str | None = None) -> Path:
    """
    Pick the rules file: explicit argument, then $TWF_RULES_PATH, then ./rules.yaml.
    """
    if explicit:
        return Path(explicit)
    return Path(os.environ.get(RULES_PATH_ENV, DEFAULT_RULES_PATH))


def configure_logging(level: str) -> None:
    numeric = logging.getLevelNamesMapping().get(level.upper())
    if numeric is None:
        raise ValueError(f"Unknown log level: {level}")
    logging.basicConfig(
        level=numeric,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
