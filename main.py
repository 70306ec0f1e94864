import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

import yaml
from pydantic import ValidationError

from config.logging_config import setup_logging
from config.settings import settings
from services.archetype_engine.engine import ArchetypeEngine, UnknownArchetypeError
from services.archetype_engine.loader import SpecValidationError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="compass",
        description="Euler Life Compass: score a 27-item questionnaire into one of eight archetypes.",
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to the questionnaire YAML (default: COMPASS_QUESTIONNAIRE_PATH).",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (default: COMPASS_LOG_LEVEL).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    questions = subparsers.add_parser("questions", help="Print the questionnaire as JSON.")
    questions.add_argument("--shuffle", action="store_true", help="Shuffle the presentation order.")
    questions.add_argument("--seed", type=int, default=None, help="Seed for a reproducible shuffle.")

    score = subparsers.add_parser("score", help="Score an answer file (JSON or YAML mapping).")
    score.add_argument("answers_file", help="Mapping of question id -> response (1-7).")

    profile = subparsers.add_parser("profile", help="Print one archetype profile.")
    profile.add_argument("archetype", help="Archetype slug, e.g. rocket.")
    return parser


def _question_id(key: Any) -> Optional[int]:
    # Only whole-number keys name a question; 1.5 and true do not
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key
    if isinstance(key, str) and key.isdecimal():
        return int(key)
    return None


def load_answers(path: str) -> Dict[int, Any]:
    """
    Reads an answer mapping from a JSON or YAML file (JSON is valid YAML).
    Keys other than integers or digit strings are dropped; values are passed
    through for the scorer to clamp.
    """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if not isinstance(data, dict):
        logger.warning(f"Answer file {path} does not hold a mapping; scoring as unanswered.")
        return {}

    answers: Dict[int, Any] = {}
    for key, value in data.items():
        question_id = _question_id(key)
        if question_id is None:
            logger.warning(f"Ignoring non-integer question id {key!r} in {path}")
            continue
        answers[question_id] = value
    return answers


def _emit(payload: Any) -> None:
    print(json.dumps(payload, indent=2, ensure_ascii=False))


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level or settings.log_level, json_output=settings.log_json)

    try:
        engine = ArchetypeEngine(config_path=args.config)
    except (SpecValidationError, ValidationError) as e:
        logger.error(f"Invalid questionnaire: {e}")
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.command == "questions":
        _emit(engine.get_questions(shuffle=args.shuffle, seed=args.seed))
        return 0

    if args.command == "score":
        try:
            answers = load_answers(args.answers_file)
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            logger.error(f"Could not read answers from {args.answers_file}: {e}")
            print(f"error: could not read {args.answers_file}: {e}", file=sys.stderr)
            return 1
        missing = engine.missing_question_ids(answers)
        if missing:
            logger.warning(f"{len(missing)} question(s) unanswered, scored as neutral: {missing}")
        _emit(engine.score(answers).model_dump(mode="json", by_alias=True))
        return 0

    if args.command == "profile":
        try:
            profile = engine.get_profile(args.archetype)
        except UnknownArchetypeError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2
        _emit(profile.model_dump(mode="json", by_alias=True))
        return 0

    return 2


if __name__ == "__main__":
    sys.exit(main())
