# services/archetype_engine/scorer.py
# Scores a questionnaire response set and classifies it into an archetype.

import logging
import math
import numbers
from decimal import Decimal
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from .definitions import (
    AXIS_GROUPS,
    FALLBACK_ARCHETYPE,
    GAUGE_MAX_ANGLE,
    GAUGE_MIN_ANGLE,
    HIGH_THRESHOLD,
    NEUTRAL_SCORE,
    OCTANT_ARCHETYPES,
    PRIMARY_AXES,
    REVERSE_PIVOT,
    SCORE_MAX,
    SCORE_MIN,
    VOID_IDS,
    VOID_KILL_SWITCH,
)
from .models import Archetype, ArchetypeResult, AxisAverages

logger = logging.getLogger(__name__)

AXIS_PARAM_KEYS = PRIMARY_AXES

# --- Per-question retrieval ---

def is_scorable(value: Any) -> bool:
    """
    True for finite real numbers, including Decimal and integers of any size.
    Booleans and numeric strings do not count.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, numbers.Integral):
        return True
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, numbers.Real):
        return math.isfinite(value)
    return False

def clamp_score(value: Any) -> float:
    """
    Normalizes a raw response onto the 1..7 scale.

    Anything that is not a finite real number (None, NaN, infinities, strings,
    booleans) becomes the neutral midpoint; everything else is clamped.
    """
    if not is_scorable(value):
        return NEUTRAL_SCORE
    if value < SCORE_MIN:
        return SCORE_MIN
    if value > SCORE_MAX:
        return SCORE_MAX
    return float(value)

def get_score(answers: Mapping[Any, Any], question_id: int) -> float:
    """Returns the clamped score for a question, neutral when it was not answered."""
    if question_id in answers:
        return clamp_score(answers[question_id])
    # Answer sets decoded from JSON carry string keys
    return clamp_score(answers.get(str(question_id), NEUTRAL_SCORE))

def reverse_score(value: float) -> float:
    return REVERSE_PIVOT - value

def _as_mapping(answers: Any) -> Mapping[Any, Any]:
    if isinstance(answers, Mapping):
        return answers
    if answers is not None:
        logger.debug(f"Ignoring answers of type {type(answers).__name__}; scoring as unanswered.")
    return {}

# --- Axis aggregation ---

def _axis_average(answers: Mapping[Any, Any], direct_ids: Sequence[int], reverse_id: Optional[int] = None) -> float:
    total = sum(get_score(answers, qid) for qid in direct_ids)
    count = len(direct_ids)
    if reverse_id is not None:
        total += reverse_score(get_score(answers, reverse_id))
        count += 1
    return total / count

def calculate_axis_averages(answers: Mapping[Any, Any]) -> AxisAverages:
    """Calculates the e / i / pi axis averages and the auxiliary void average."""
    answers = _as_mapping(answers)
    averages = {
        axis: _axis_average(answers, direct_ids, reverse_id)
        for axis, (direct_ids, reverse_id) in AXIS_GROUPS.items()
    }
    averages['void_avg'] = _axis_average(answers, VOID_IDS)
    return AxisAverages(**averages)

# --- Classification ---

def axis_levels(averages: AxisAverages) -> Tuple[bool, bool, bool]:
    """High (True) / Low (False) flag per primary axis, in e / i / pi order."""
    return tuple(getattr(averages, axis) >= HIGH_THRESHOLD for axis in PRIMARY_AXES)

def octant_key(levels: Tuple[bool, ...]) -> str:
    return "/".join('H' if high else 'L' for high in levels)

def classify(averages: AxisAverages) -> Archetype:
    """Resolves the archetype: void kill switch first, then the octant table."""
    if averages.void_avg >= VOID_KILL_SWITCH:
        logger.debug(f"Void kill switch fired (void_avg={averages.void_avg:.2f})")
        return Archetype(FALLBACK_ARCHETYPE)

    levels = axis_levels(averages)
    slug = OCTANT_ARCHETYPES.get(levels)
    if slug is None:
        logger.debug(f"No archetype for octant {octant_key(levels)}; falling back to {FALLBACK_ARCHETYPE}")
        slug = FALLBACK_ARCHETYPE
    return Archetype(slug)

def calculate_result_detailed(answers: Mapping[Any, Any]) -> ArchetypeResult:
    """
    Scores an answer set (question id -> raw 1..7 response).

    Never raises: missing or malformed responses are scored as neutral and
    out-of-range ones are clamped.
    """
    averages = calculate_axis_averages(answers)
    return ArchetypeResult(archetype=classify(averages), averages=averages)

score = calculate_result_detailed

def calculate_result(answers: Mapping[Any, Any]) -> Archetype:
    """Returns only the archetype for an answer set."""
    return calculate_result_detailed(answers).archetype

# --- Result link parameters ---

def format_axis_params(averages: AxisAverages) -> Dict[str, str]:
    """Formats e / i / pi with two fractional digits for the results link."""
    return {axis: f"{getattr(averages, axis):.2f}" for axis in AXIS_PARAM_KEYS}

def _param_to_float(raw: Any) -> float:
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return 0.0
    return value if math.isfinite(value) else 0.0

def parse_axis_params(params: Mapping[str, Any]) -> Optional[Tuple[float, float, float]]:
    """
    Reads e / i / pi back from results link parameters.

    Returns None unless all three keys are present. Present values that do not
    parse to a finite number read as 0.0.
    """
    if any(params.get(key) is None for key in AXIS_PARAM_KEYS):
        return None
    e, i, pi = (_param_to_float(params[key]) for key in AXIS_PARAM_KEYS)
    return e, i, pi

def score_to_angle(value: float) -> float:
    """Maps a 1..7 axis score onto the result gauge dial (-120 to +120 degrees)."""
    s = max(SCORE_MIN, min(SCORE_MAX, value))
    t = (s - SCORE_MIN) / (SCORE_MAX - SCORE_MIN)
    return GAUGE_MIN_ANGLE + t * (GAUGE_MAX_ANGLE - GAUGE_MIN_ANGLE)
