"""Centralized configuration management for the requirements NLP pipeline."""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field


class ConfidenceConfig(BaseModel):
    """Fixed confidences attached to each kind of detected signal.

    All values are in [0, 1]. Service mentions use one of three values
    depending on how the service was matched.
    """
    service_name_match: float = Field(
        0.95, ge=0, le=1,
        description="Service whose own name appears in the text"
    )
    service_keyword_match: float = Field(
        0.8, ge=0, le=1,
        description="Service matched through one of its keywords only"
    )
    service_fallback: float = Field(
        0.6, ge=0, le=1,
        description="Service matched by neither name nor keyword substring"
    )
    component: float = Field(0.8, ge=0, le=1, description="Generic component mention")
    relationship: float = Field(0.7, ge=0, le=1, description="Relationship verb family")
    requirement: float = Field(0.8, ge=0, le=1, description="Requirement keyword family")
    library_pattern: float = Field(0.85, ge=0, le=1, description="Pattern library match")
    keyword_pattern: float = Field(0.75, ge=0, le=1, description="Architecture-style keyword")
    use_case: float = Field(0.8, ge=0, le=1, description="Use case family")
    constraint: float = Field(0.85, ge=0, le=1, description="Constraint family")
    best_practice: float = Field(0.9, ge=0, le=1, description="Best practice family")
    anti_pattern: float = Field(0.85, ge=0, le=1, description="Anti-pattern family")


class AggregationConfig(BaseModel):
    """Weights for the aggregate architecture confidence.

    They should sum to 1.0.
    """
    service_weight: float = Field(0.6, description="Weight of the mean service confidence")
    pattern_weight: float = Field(0.4, description="Weight of the mean pattern confidence")


class ValidationPenaltyConfig(BaseModel):
    """Confidence adjustments applied after the error handler checks."""
    error_penalty: float = Field(0.15, description="Subtracted per validation error")
    warning_penalty: float = Field(0.05, description="Subtracted per validation warning")
    confidence_floor: float = Field(
        0.1, ge=0, le=1,
        description="Adjusted confidence never drops below this value"
    )
    fallback_confidence: float = Field(
        0.3, ge=0, le=1,
        description="Confidence of the basic analysis returned when processing fails"
    )


class PipelineConfig(BaseModel):
    """Complete configuration for the NLP pipeline."""
    confidences: ConfidenceConfig = Field(default_factory=ConfidenceConfig)
    aggregation: AggregationConfig = Field(default_factory=AggregationConfig)
    validation: ValidationPenaltyConfig = Field(default_factory=ValidationPenaltyConfig)


# Global config instance
_config: Optional[PipelineConfig] = None


def get_config() -> PipelineConfig:
    """Get the current configuration.

    Returns the global config. On first use it is loaded from the file
    found by :func:`find_config_file`, or built from defaults when there is
    none.
    """
    global _config
    if _config is None:
        path = find_config_file()
        if path is not None:
            return load_config(path)
        _config = PipelineConfig()
    return _config


def load_config(path: Path) -> PipelineConfig:
    """Load configuration from a YAML file.

    Args:
        path: Path to the YAML configuration file.

    Returns:
        The loaded PipelineConfig.
    """
    global _config

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    _config = PipelineConfig.model_validate(data or {})
    return _config


def reset_config() -> None:
    """Reset configuration to defaults."""
    global _config
    _config = PipelineConfig()


def find_config_file() -> Optional[Path]:
    """Find a pipeline configuration file.

    Looks in (order of priority):
    1. ARCHITECTURE_NLP_CONFIG environment variable
    2. ./nlp-config.yaml
    3. ./nlp-config.yml
    4. ~/.config/architecture-nlp/config.yaml
    """
    env_path = os.environ.get("ARCHITECTURE_NLP_CONFIG")
    if env_path:
        path = Path(env_path)
        if path.exists():
            return path

    for name in ["nlp-config.yaml", "nlp-config.yml"]:
        path = Path(name)
        if path.exists():
            return path

    user_config = Path.home() / ".config" / "architecture-nlp" / "config.yaml"
    if user_config.exists():
        return user_config

    return None


def save_default_config(path: Path) -> None:
    """Save the default configuration to a YAML file.

    Args:
        path: Path where to save the configuration.
    """
    data = PipelineConfig().model_dump()

    yaml_content = """# Architecture NLP Pipeline Configuration
# =======================================
#
# Confidences attached to detected services, patterns and requirements,
# the aggregate confidence weights, and the validation penalties.
#
# Copy this file to one of these locations:
#   - ./nlp-config.yaml (current directory)
#   - ~/.config/architecture-nlp/config.yaml (user config)
#
# Or set the ARCHITECTURE_NLP_CONFIG environment variable.

"""
    yaml_content += yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(yaml_content)
