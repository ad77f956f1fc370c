"""
Audit configuration.

Settings live in `<name>.audit.json` files alongside the data directory.
A missing file means defaults; a malformed one fails validation.
"""
import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, model_validator

DATA_DIR = Path(__file__).parent.parent / "data"
CONFIG_DIR = DATA_DIR

DEFAULT_CONFIG = {
    "scoring_p10_ms":    300,
    "scoring_median_ms": 750,
    "default_pass":      "defaultPass",
}


class AuditSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    scoring_p10_ms:    float = DEFAULT_CONFIG["scoring_p10_ms"]
    scoring_median_ms: float = DEFAULT_CONFIG["scoring_median_ms"]
    default_pass:      str   = DEFAULT_CONFIG["default_pass"]

    @model_validator(mode="after")
    def _check_control_points(self):
        if not 0 < self.scoring_p10_ms < self.scoring_median_ms:
            raise ValueError("scoring control points must satisfy 0 < p10 < median")
        return self


class AuditContext(BaseModel):
    settings: AuditSettings = AuditSettings()


def audit_config_path(name: str, config_dir: Path = CONFIG_DIR) -> Path:
    return config_dir / f"{name}.audit.json"


def read_audit_config(name: str, config_dir: Path = CONFIG_DIR) -> dict:
    p = audit_config_path(name, config_dir)
    config = dict(DEFAULT_CONFIG)
    if p.exists():
        config.update(json.loads(p.read_text()))
    return config


def write_audit_config(name: str, settings: AuditSettings, config_dir: Path = CONFIG_DIR):
    config_dir.mkdir(parents=True, exist_ok=True)
    audit_config_path(name, config_dir).write_text(json.dumps(settings.model_dump(), indent=2))


def load_settings(name: str, config_dir: Path = CONFIG_DIR) -> AuditSettings:
    return AuditSettings(**read_audit_config(name, config_dir))
