import logging
from pathlib import Path
from typing import Dict, Optional

import pytest

from services.archetype_engine.definitions import AXIS_GROUPS, QUESTION_IDS, VOID_IDS
from services.archetype_engine.engine import ArchetypeEngine

PROJECT_ROOT = Path(__file__).resolve().parents[1]
QUESTIONNAIRE_PATH = PROJECT_ROOT / "assets" / "questionnaire.yml"


def build_answers(
    e: Optional[str] = None,
    i: Optional[str] = None,
    pi: Optional[str] = None,
    void: Optional[int] = None,
    base: int = 4,
) -> Dict[int, int]:
    """
    Builds a full 27-answer set. Each primary axis can be pushed 'high'
    (direct 7, reverse 1) or 'low' (direct 1, reverse 7); void ids take a
    single value for all three.
    """
    answers = {qid: base for qid in QUESTION_IDS}
    for axis, level in (('e', e), ('i', i), ('pi', pi)):
        if level is None:
            continue
        direct_ids, reverse_id = AXIS_GROUPS[axis]
        direct_value, reverse_value = (7, 1) if level == 'high' else (1, 7)
        for qid in direct_ids:
            answers[qid] = direct_value
        answers[reverse_id] = reverse_value
    if void is not None:
        for qid in VOID_IDS:
            answers[qid] = void
    return answers


@pytest.fixture
def make_answers():
    """Provides build_answers to tests."""
    return build_answers


@pytest.fixture
def questionnaire_path() -> str:
    return str(QUESTIONNAIRE_PATH)


@pytest.fixture(scope="session")
def engine() -> ArchetypeEngine:
    """Provides an ArchetypeEngine loaded with the shipped questionnaire."""
    try:
        return ArchetypeEngine(config_path=str(QUESTIONNAIRE_PATH))
    except Exception as e:
        pytest.fail(f"Failed to initialize ArchetypeEngine: {e}")


@pytest.fixture(autouse=True)
def _drop_compass_log_handlers():
    """Removes handlers installed by setup_logging so they do not outlive captured streams."""
    root_logger = logging.getLogger()
    level = root_logger.level
    yield
    root_logger.setLevel(level)
    for handler in [h for h in root_logger.handlers if getattr(h, "_compass_handler", False)]:
        root_logger.removeHandler(handler)
