import logging
import random
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Union

from config.settings import settings
from .definitions import QUESTION_IDS
from .loader import load_questionnaire_from_file
from .models import Archetype, ArchetypeProfile, QuestionnaireConfig, ScoredProfile
from .scorer import calculate_result_detailed, format_axis_params, is_scorable

logger = logging.getLogger(__name__)

class UnknownArchetypeError(ValueError):
    """Custom exception for archetype slugs outside the eight known labels."""
    pass

class ArchetypeEngine:
    """
    Joins the questionnaire bank with the scorer and the archetype profiles.
    """
    def __init__(self, config_path: Optional[str] = None):
        """
        Initializes the engine by loading and validating the questionnaire YAML.

        Args:
            config_path: Path to the questionnaire file; defaults to the
                         COMPASS_QUESTIONNAIRE_PATH setting.
        """
        self.config_path = Path(config_path or settings.questionnaire_path)
        self.config: QuestionnaireConfig = load_questionnaire_from_file(str(self.config_path))
        self._build_lookup_maps()
        logger.info(
            f"Loaded questionnaire '{self.config.title}' v{self.config.version} "
            f"({len(self.config.questions)} questions) from {self.config_path}"
        )

    def _build_lookup_maps(self):
        """Builds dictionaries for quick lookup of questions and profiles."""
        self.questions = {q.id: q for q in self.config.questions}
        self.profiles = {p.id: p for p in self.config.results.archetype_profiles}

    def get_questions(self, shuffle: bool = False, seed: Optional[int] = None) -> List[Dict[str, Any]]:
        """
        Returns the questions in id order, or shuffled for presentation.
        A seed makes the shuffled order reproducible.
        """
        questions = [self.questions[qid].model_dump() for qid in sorted(self.questions)]
        if shuffle:
            random.Random(seed).shuffle(questions)
        return questions

    def missing_question_ids(self, answers: Mapping[Any, Any]) -> List[int]:
        """Question ids with no numeric answer; these are scored as neutral."""
        return [
            qid for qid in QUESTION_IDS
            if not is_scorable(answers.get(qid, answers.get(str(qid))))
        ]

    def get_profile(self, archetype: Union[Archetype, str]) -> ArchetypeProfile:
        try:
            key = Archetype(archetype)
        except ValueError:
            raise UnknownArchetypeError(f"Unknown archetype: {archetype!r}")
        return self.profiles[key]

    def score(self, answers: Mapping[Any, Any]) -> ScoredProfile:
        """
        Scores a completed answer set and attaches the archetype profile.

        Args:
            answers: question id (1-27) -> raw response (1-7). Sparse or
                     malformed answers are scored, never rejected.
        """
        result = calculate_result_detailed(answers)
        logger.info(f"Scored archetype '{result.archetype.value}' (averages: {result.averages.model_dump()})")
        return ScoredProfile(
            archetype=result.archetype,
            averages=result.averages,
            params=format_axis_params(result.averages),
            profile=self.profiles[result.archetype],
        )
