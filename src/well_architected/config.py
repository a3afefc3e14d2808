"""Centralized configuration management for the Well-Architected validator."""

import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field


class ReportConfig(BaseModel):
    """Reference links and labels used when building recommendations."""
    framework_base_url: str = Field(
        "https://docs.aws.amazon.com/wellarchitected/latest/framework/",
        description="Base URL of the framework documentation pages"
    )
    overview_url: str = Field(
        "https://aws.amazon.com/architecture/well-architected/",
        description="Well-Architected overview page appended to every recommendation"
    )
    default_page: str = Field(
        "index.html",
        description="Documentation page for pillars missing from pillar_pages"
    )
    pillar_pages: dict[str, str] = Field(
        default_factory=lambda: {
            "Operational Excellence": "operational-excellence.html",
            "Security": "security.html",
            "Reliability": "reliability.html",
            "Performance Efficiency": "performance-efficiency.html",
            "Cost Optimization": "cost-optimization.html",
            "Sustainability": "sustainability.html",
        },
        description="Documentation page per pillar name"
    )
    fallback_component: str = Field(
        "Architecture",
        description="Affected component used when no AWS service components exist"
    )


class ValidatorConfig(BaseModel):
    """Complete configuration for the Well-Architected validator."""
    report: ReportConfig = Field(default_factory=ReportConfig)


# Global config instance
_config: Optional[ValidatorConfig] = None


def get_config() -> ValidatorConfig:
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
        _config = ValidatorConfig()
    return _config


def load_config(path: Path) -> ValidatorConfig:
    """Load configuration from a YAML file."""
    global _config

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f)

    _config = ValidatorConfig.model_validate(data or {})
    return _config


def reset_config() -> None:
    """Reset configuration to defaults."""
    global _config
    _config = ValidatorConfig()


def find_config_file() -> Optional[Path]:
    """Find a validator configuration file.

    Looks in (order of priority):
    1. WELL_ARCHITECTED_CONFIG environment variable
    2. ./well-architected.yaml
    3. ./well-architected.yml
    4. ~/.config/well-architected/config.yaml
    """
    env_path = os.environ.get("WELL_ARCHITECTED_CONFIG")
    if env_path:
        path = Path(env_path)
        if path.exists():
            return path

    for name in ["well-architected.yaml", "well-architected.yml"]:
        path = Path(name)
        if path.exists():
            return path

    user_config = Path.home() / ".config" / "well-architected" / "config.yaml"
    if user_config.exists():
        return user_config

    return None


def save_default_config(path: Path) -> None:
    """Save the default configuration to a YAML file."""
    data = ValidatorConfig().model_dump()

    yaml_content = """# Well-Architected Validator Configuration
# ========================================
#
# Documentation links attached to recommendations and the label used for
# recommendations that affect no specific AWS service.
#
# Copy this file to ./well-architected.yaml or set WELL_ARCHITECTED_CONFIG.

"""
    yaml_content += yaml.dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)

    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(yaml_content)
