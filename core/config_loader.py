import yaml
import os
import logging
from typing import Dict, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

logger = logging.getLogger(__name__)

WEIGHT_SUM_TOLERANCE = 1e-6


class DatabaseConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str = "sqlite:///capital_match.db"


class CriteriaWeights(BaseModel):
    """Weights for the seven criteria factors. Must sum to 1.0."""
    model_config = ConfigDict(frozen=True)

    semantic_fit: float = 0.35
    stage_compatibility: float = 0.20
    economic_fit: float = 0.15
    geographic_practicality: float = 0.10
    investor_behavior: float = 0.10
    investor_type_logic: float = 0.05
    network_warmth: float = 0.05

    @model_validator(mode="after")
    def _check_sum(self) -> "CriteriaWeights":
        total = sum(self.model_dump().values())
        if abs(total - 1.0) > WEIGHT_SUM_TOLERANCE:
            raise ValueError(f"criteria weights must sum to 1.0, got {total:.4f}")
        return self


class ConstraintConfig(BaseModel):
    """Hard-constraint thresholds applied before any scoring."""
    model_config = ConfigDict(frozen=True)

    min_check_size_overlap: float = 0.10
    max_stage_distance: int = 1
    inactivity_months: int = 6

    # Acceptable raise window around the seeker's target amount
    target_range_low: float = 0.5
    target_range_high: float = 1.5


class MultiplierConfig(BaseModel):
    """Contextual and activity multipliers applied after domain blending."""
    model_config = ConfigDict(frozen=True)

    context_cap: float = 1.5
    early_stage_local_bonus: float = 1.10
    early_stage_geo_threshold: float = 70.0
    family_office_bonus: float = 1.05
    niche_industry_bonus: float = 1.15

    activity_cap: float = 1.3
    activity_step: float = 0.05


class BlendConfig(BaseModel):
    """Blend between the generic criteria score and the domain score."""
    model_config = ConfigDict(frozen=True)

    base_weight: float = 0.4
    domain_weight: float = 0.6

    @model_validator(mode="after")
    def _check_sum(self) -> "BlendConfig":
        total = self.base_weight + self.domain_weight
        if abs(total - 1.0) > WEIGHT_SUM_TOLERANCE:
            raise ValueError(f"blend weights must sum to 1.0, got {total:.4f}")
        return self


class RankingConfig(BaseModel):
    """Post-scoring result filtering, truncation and worker-pool defaults."""
    model_config = ConfigDict(frozen=True)

    limit: int = 50
    min_score: float = 20.0
    include_inactive_providers: bool = False
    baseline_limit: int = 100
    max_workers: Optional[int] = None  # None or 1 = score candidates sequentially

    @field_validator("max_workers")
    @classmethod
    def _check_workers(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 1:
            logger.warning(f"ranking.max_workers={value} is not positive; scoring sequentially")
            return None
        return value


class GenericDomainWeights(BaseModel):
    """Weights for the generic domain scorer. Must sum to 1.0."""
    model_config = ConfigDict(frozen=True)

    semantic: float = 0.35
    stage: float = 0.20
    market: float = 0.10
    check_size: float = 0.15
    investor_type: float = 0.10
    deal_structure: float = 0.10

    @model_validator(mode="after")
    def _check_sum(self) -> "GenericDomainWeights":
        total = sum(self.model_dump().values())
        if abs(total - 1.0) > WEIGHT_SUM_TOLERANCE:
            raise ValueError(f"domain weights must sum to 1.0, got {total:.4f}")
        return self


class MatchingConfig(BaseModel):
    """
    Top-level matching configuration.

    Constructed once and shared read-only by every scorer in a run.
    """
    model_config = ConfigDict(frozen=True)

    weights: CriteriaWeights = Field(default_factory=CriteriaWeights)
    constraints: ConstraintConfig = Field(default_factory=ConstraintConfig)
    multipliers: MultiplierConfig = Field(default_factory=MultiplierConfig)
    blend: BlendConfig = Field(default_factory=BlendConfig)
    ranking: RankingConfig = Field(default_factory=RankingConfig)

    # Per-domain overrides for the generic scorer, keyed by domain tag
    domain_weights: Dict[str, GenericDomainWeights] = Field(default_factory=dict)


class AppConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    matching: MatchingConfig = Field(default_factory=MatchingConfig)


def load_config(config_path: str = "config.yaml") -> AppConfig:
    # If not found at relative path (e.g. running from root), try the repo root
    if not os.path.exists(config_path):
        base_dir = os.path.dirname(os.path.abspath(__file__))
        config_path = os.path.join(base_dir, "..", "config.yaml")

    with open(config_path, "r") as f:
        data = yaml.safe_load(f) or {}

    # Allow env var override for DB URL
    env_db_url = os.environ.get("DATABASE_URL")
    if env_db_url:
        if data.get('database') is None:
            data['database'] = {}
        data['database']['url'] = env_db_url

    # Allow env var overrides for ranking behaviour
    env_max_workers = os.environ.get("MATCHING_MAX_WORKERS")
    if env_max_workers:
        _ranking_section(data)['max_workers'] = int(env_max_workers)

    env_min_score = os.environ.get("MATCHING_MIN_SCORE")
    if env_min_score:
        _ranking_section(data)['min_score'] = float(env_min_score)

    return AppConfig(**data)


def _ranking_section(data: dict) -> dict:
    if data.get('matching') is None:
        data['matching'] = {}
    if data['matching'].get('ranking') is None:
        data['matching']['ranking'] = {}
    return data['matching']['ranking']
