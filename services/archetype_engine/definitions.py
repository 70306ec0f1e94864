# services/archetype_engine/definitions.py
# Static definitions for the Euler Life Compass questionnaire scoring.

from typing import Dict, Tuple

# --- Questionnaire shape ---
QUESTION_COUNT = 27
QUESTION_IDS = tuple(range(1, QUESTION_COUNT + 1))

# --- 7-point Likert scale ---
SCORE_MIN = 1
SCORE_MAX = 7
NEUTRAL_SCORE = 4
REVERSE_PIVOT = 8  # reverse-scored contribution is REVERSE_PIVOT - score

# --- Axis groups ---
E_DIRECT = (1, 2, 3, 10, 22)
E_REVERSE = 25

I_DIRECT = (4, 5, 6, 11, 13, 14, 15, 24)
I_REVERSE = 26

PI_DIRECT = (7, 8, 9, 12, 23)
PI_REVERSE = 27

VOID_IDS = (19, 20, 21)

# Fixed order of the primary axes; also the order of the octant key.
PRIMARY_AXES = ('e', 'i', 'pi')

AXIS_GROUPS: Dict[str, Tuple[Tuple[int, ...], int]] = {
    'e': (E_DIRECT, E_REVERSE),
    'i': (I_DIRECT, I_REVERSE),
    'pi': (PI_DIRECT, PI_REVERSE),
}

# Presented to the respondent, never scored.
UNSCORED_IDS = tuple(
    qid for qid in QUESTION_IDS
    if qid not in VOID_IDS
    and not any(qid in direct or qid == reverse for direct, reverse in AXIS_GROUPS.values())
)

# --- Classification thresholds ---
HIGH_THRESHOLD = 4.0     # axis average >= HIGH_THRESHOLD counts as High
VOID_KILL_SWITCH = 5.5   # void average >= VOID_KILL_SWITCH forces the void archetype

# --- Octant table: (E high, I high, PI high) -> archetype slug ---
OCTANT_ARCHETYPES: Dict[Tuple[bool, bool, bool], str] = {
    (True, False, False): 'rocket',
    (False, True, False): 'cloud',
    (False, False, True): 'guardian',
    (True, True, False): 'island',
    (True, False, True): 'bureaucrat',
    (False, True, True): 'priest',
    (False, False, False): 'void',
    (True, True, True): 'circle',
}

FALLBACK_ARCHETYPE = 'void'

# --- Result screen palette, shared by every renderer ---
ARCHETYPE_THEMES: Dict[str, Dict[str, str]] = {
    'rocket': {'from': '#ff2d2d', 'via': '#ff6a00', 'to': '#7c2d12', 'glow': '#ff2d2d'},      # Red
    'cloud': {'from': '#2563eb', 'via': '#22d3ee', 'to': '#0ea5e9', 'glow': '#38bdf8'},       # Blue
    'guardian': {'from': '#10b981', 'via': '#22c55e', 'to': '#16a34a', 'glow': '#34d399'},    # Green
    'island': {'from': '#14b8a6', 'via': '#0ea5e9', 'to': '#1d4ed8', 'glow': '#22d3ee'},      # Teal/Blue
    'bureaucrat': {'from': '#f59e0b', 'via': '#f97316', 'to': '#b45309', 'glow': '#fbbf24'},  # Amber/Orange
    'priest': {'from': '#fb7185', 'via': '#a78bfa', 'to': '#f472b6', 'glow': '#fb7185'},      # Rose/Purple
    'void': {'from': '#0b1220', 'via': '#111827', 'to': '#000000', 'glow': '#334155'},        # Deep space
    'circle': {'from': '#7c3aed', 'via': '#a855f7', 'to': '#ec4899', 'glow': '#a855f7'},      # Purple
}

# --- Result gauge dial ---
GAUGE_MIN_ANGLE = -120.0
GAUGE_MAX_ANGLE = 120.0
