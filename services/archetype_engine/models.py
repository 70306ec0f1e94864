from enum import Enum
from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


class Archetype(str, Enum):
    ROCKET = "rocket"
    CLOUD = "cloud"
    GUARDIAN = "guardian"
    ISLAND = "island"
    BUREAUCRAT = "bureaucrat"
    PRIEST = "priest"
    VOID = "void"
    CIRCLE = "circle"

# --- Scoring output ---

class AxisAverages(BaseModel):
    model_config = ConfigDict(frozen=True)

    e: float
    i: float
    pi: float
    void_avg: float

class ArchetypeResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    archetype: Archetype
    averages: AxisAverages

# --- Questionnaire bank (assets/questionnaire.yml) ---

class ScaleConfig(BaseModel):
    min: int
    max: int
    neutral: int
    low_label: str
    high_label: str

class Question(BaseModel):
    id: int = Field(..., ge=1)
    text: str
    axis: Optional[Literal['e', 'i', 'pi', 'void']] = None # None for unscored questions
    reverse: bool = False

class Theme(BaseModel):
    # 'from' is a keyword, so the field is aliased
    model_config = ConfigDict(populate_by_name=True)

    from_: str = Field(..., alias='from')
    via: str
    to: str
    glow: str

class ArchetypeProfile(BaseModel):
    id: Archetype
    name: str
    headline: str
    traits: List[str]
    theme: Optional[Theme] = None # filled from ARCHETYPE_THEMES when omitted

class ResultsConfig(BaseModel):
    archetype_profiles: List[ArchetypeProfile]

class QuestionnaireConfig(BaseModel):
    version: str
    released_at: str # Could be date, but string is safer for parsing
    title: str
    scale: ScaleConfig
    questions: List[Question]
    results: ResultsConfig

# --- Engine output ---

class ScoredProfile(BaseModel):
    archetype: Archetype
    averages: AxisAverages
    params: Dict[str, str] # e / i / pi formatted for the results link
    profile: ArchetypeProfile
