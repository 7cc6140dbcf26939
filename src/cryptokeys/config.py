"""Defaults for key generation and PEM output, loaded from YAML."""
from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Optional

import platformdirs
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

_APP_NAME = "cryptokeys"
_LOG_LEVEL_ENV = "CRYPTOKEYS_LOG_LEVEL"
_SUPPORTED_DIGESTS = ("SHA1", "SHA224", "SHA256", "SHA384", "SHA512")


class SymmetricDefaults(BaseModel):
    key_size: int = Field(default=32, ge=16, le=32, description="Generated key length in bytes")


class AsymmetricDefaults(BaseModel):
    key_size: int = Field(default=128, ge=128, description="Modulus length in bytes (128 => 1024-bit)")
    public_exponent: int = Field(default=65537)
    mode: str = Field(default="ECB")
    padding: str = Field(default="PKCS1")
    digest: str = Field(default="SHA256")

    @field_validator("digest")
    @classmethod
    def _validate_digest(cls, value: str) -> str:
        upper = value.upper()
        if upper not in _SUPPORTED_DIGESTS:
            raise ValueError(f"Unsupported digest: {value}")
        return upper


class PemConfig(BaseModel):
    line_width: int = Field(default=76, ge=4, description="Base64 characters per PEM body line")


class LoggingConfig(BaseModel):
    level: str = Field(default="INFO", description="Logging verbosity level")

    def normalized_level(self) -> str:
        return os.getenv(_LOG_LEVEL_ENV, self.level).upper()


class AppConfig(BaseModel):
    symmetric: SymmetricDefaults = Field(default_factory=SymmetricDefaults)
    asymmetric: AsymmetricDefaults = Field(default_factory=AsymmetricDefaults)
    pem: PemConfig = Field(default_factory=PemConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


DEFAULT_CONFIG = AppConfig()

CONFIG_FILENAME = "config.yaml"


def local_config_path() -> Path:
    """Project-local config: ``./.cryptokeys/config.yaml``"""
    return Path.cwd() / ".cryptokeys" / CONFIG_FILENAME


def user_config_path() -> Path:
    """Per-user config file under the platform config directory"""
    return platformdirs.user_config_path(_APP_NAME, appauthor=False) / CONFIG_FILENAME


def config_search_paths(explicit: Optional[Path] = None) -> Iterable[Path]:
    if explicit is not None:
        yield explicit
    yield local_config_path()
    yield user_config_path()


def load_config(path: Optional[Path] = None) -> AppConfig:
    """Load the first config file found; defaults when there is none."""
    for candidate in config_search_paths(path):
        if not candidate.is_file():
            continue
        data = yaml.safe_load(candidate.read_text(encoding="utf-8")) or {}
        try:
            return AppConfig.model_validate(data)
        except ValidationError as exc:
            raise ValueError(f"Invalid configuration in {candidate}: {exc}") from exc
    return DEFAULT_CONFIG.model_copy(deep=True)


def dump_default_config(target: Path) -> None:
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(
        yaml.safe_dump(DEFAULT_CONFIG.model_dump(mode="json"), sort_keys=False),
        encoding="utf-8",
    )


__all__ = [
    "AppConfig",
    "AsymmetricDefaults",
    "DEFAULT_CONFIG",
    "LoggingConfig",
    "PemConfig",
    "SymmetricDefaults",
    "config_search_paths",
    "dump_default_config",
    "load_config",
    "local_config_path",
    "user_config_path",
]
