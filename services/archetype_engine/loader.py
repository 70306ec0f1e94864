import yaml
from typing import Dict, Any

from services.archetype_engine.definitions import ARCHETYPE_THEMES, AXIS_GROUPS, QUESTION_IDS, VOID_IDS
from services.archetype_engine.models import Archetype, QuestionnaireConfig, Theme

class SpecValidationError(ValueError):
    """Custom exception for questionnaire validation errors not covered by Pydantic."""
    pass

def expected_axis(question_id: int):
    """Returns the (axis, reverse) pair the scorer uses for a question id."""
    for axis, (direct_ids, reverse_id) in AXIS_GROUPS.items():
        if question_id in direct_ids:
            return axis, False
        if question_id == reverse_id:
            return axis, True
    if question_id in VOID_IDS:
        return 'void', False
    return None, False

def load_questionnaire_data(data: Dict[str, Any]) -> QuestionnaireConfig:
    """
    Validates the raw dictionary data against the QuestionnaireConfig model
    and checks it against the fixed scoring groups.
    """
    # Schema issues surface as pydantic.ValidationError
    config = QuestionnaireConfig.model_validate(data)

    question_ids = set()
    for question in config.questions:
        if question.id in question_ids:
            raise SpecValidationError(f"Duplicate question ID found: {question.id}")
        question_ids.add(question.id)

    missing = sorted(set(QUESTION_IDS) - question_ids)
    unknown = sorted(question_ids - set(QUESTION_IDS))
    if missing or unknown:
        raise SpecValidationError(
            f"Questionnaire must define question IDs {QUESTION_IDS[0]}-{QUESTION_IDS[-1]} "
            f"(missing: {missing}, unknown: {unknown})"
        )

    # The annotations document the scoring groups; they cannot change them.
    for question in config.questions:
        axis, reverse = expected_axis(question.id)
        if question.axis != axis or question.reverse != reverse:
            raise SpecValidationError(
                f"Question {question.id} is annotated axis={question.axis!r} reverse={question.reverse} "
                f"but is scored as axis={axis!r} reverse={reverse}"
            )

    profile_ids = set()
    for profile in config.results.archetype_profiles:
        if profile.id in profile_ids:
            raise SpecValidationError(f"Duplicate archetype profile ID found: {profile.id.value}")
        profile_ids.add(profile.id)

    missing_profiles = [archetype.value for archetype in Archetype if archetype not in profile_ids]
    if missing_profiles:
        raise SpecValidationError(f"Missing archetype profiles: {missing_profiles}")

    for profile in config.results.archetype_profiles:
        if profile.theme is None:
            profile.theme = Theme.model_validate(ARCHETYPE_THEMES[profile.id.value])

    return config

def load_questionnaire_from_file(file_path: str) -> QuestionnaireConfig:
    """
    Loads a questionnaire from a YAML file, validates it,
    and returns a QuestionnaireConfig object.
    """
    try:
        with open(file_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise SpecValidationError(f"File not found: {file_path}")
    except yaml.YAMLError as e:
        raise SpecValidationError(f"Error parsing YAML file {file_path}: {e}")

    if data is None:
        raise SpecValidationError(f"YAML file is empty or invalid: {file_path}")

    return load_questionnaire_data(data)
