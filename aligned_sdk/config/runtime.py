"""
Runtime Configuration

Central configuration for commitment building, message serialization and
inclusion verification.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Optional
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _env_flag(name: str, default: bool) -> bool:
    return os.getenv(name, "true" if default else "false").lower() == "true"


@dataclass
class ProtocolConfig:
    """Wire-compatibility switches."""
    # Emit/read Halo2KZG and Halo2IPA with the names swapped, as older clients did
    legacy_halo2_names: bool = False
    # Reject zero-length proofs instead of warning
    strict_empty_proof: bool = False


@dataclass
class VerifierConfig:
    """Configuration for batch inclusion checks."""
    verify_inclusion: bool = True


@dataclass
class RuntimeConfig:
    """
    Complete runtime configuration for the SDK.

    Can be loaded from:
    - Environment variables
    - YAML file
    - Programmatic construction
    """
    protocol: ProtocolConfig = field(default_factory=ProtocolConfig)
    verifier: VerifierConfig = field(default_factory=VerifierConfig)
    log_level: str = "INFO"
    extra: dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def _get_env_overrides() -> dict[str, Any]:
        """
        Get configuration overrides from environment variables.

        This is the SINGLE source of truth for all env var reading.

        Supported variables:
        - ALIGNED_LOG_LEVEL: Logging level name (DEBUG, INFO, ...)
        - ALIGNED_LEGACY_HALO2_NAMES: Use swapped Halo2 wire names (true/false)
        - ALIGNED_STRICT_EMPTY_PROOF: Reject empty proofs (true/false)
        - ALIGNED_VERIFY_INCLUSION: Verify inclusion of submitted items (true/false)
        """
        overrides: dict[str, Any] = {}

        if os.getenv("ALIGNED_LOG_LEVEL"):
            overrides["log_level"] = os.getenv("ALIGNED_LOG_LEVEL", "INFO").upper()

        if os.getenv("ALIGNED_LEGACY_HALO2_NAMES"):
            overrides.setdefault("protocol", {})["legacy_halo2_names"] = (
                _env_flag("ALIGNED_LEGACY_HALO2_NAMES", False)
            )
        if os.getenv("ALIGNED_STRICT_EMPTY_PROOF"):
            overrides.setdefault("protocol", {})["strict_empty_proof"] = (
                _env_flag("ALIGNED_STRICT_EMPTY_PROOF", False)
            )

        if os.getenv("ALIGNED_VERIFY_INCLUSION"):
            overrides.setdefault("verifier", {})["verify_inclusion"] = (
                _env_flag("ALIGNED_VERIFY_INCLUSION", True)
            )

        return overrides

    @classmethod
    def from_env(cls) -> "RuntimeConfig":
        """Load configuration purely from environment variables."""
        return cls.from_dict(cls._get_env_overrides())

    @classmethod
    def from_yaml(cls, path: str | Path) -> "RuntimeConfig":
        """Load configuration from a YAML file."""
        import yaml
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path) as f:
            data = yaml.safe_load(f) or {}

        return cls.from_dict(data)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeConfig":
        """Load configuration from a dictionary (supports partial data)."""
        protocol_data = data.get("protocol", {})
        verifier_data = data.get("verifier", {})

        protocol = ProtocolConfig(**protocol_data) if protocol_data else ProtocolConfig()
        verifier = VerifierConfig(**verifier_data) if verifier_data else VerifierConfig()

        return cls(
            protocol=protocol,
            verifier=verifier,
            log_level=str(data.get("log_level", "INFO")).upper(),
            extra=data.get("extra", {}),
        )

    def with_env_overrides(self) -> "RuntimeConfig":
        """
        Return a new config with environment variable overrides applied.

        This allows loading from a config file first, then overlaying env vars.
        """
        overrides = self._get_env_overrides()
        if not overrides:
            return self

        import copy
        new_config = copy.deepcopy(self)

        for key, value in overrides.get("protocol", {}).items():
            setattr(new_config.protocol, key, value)

        for key, value in overrides.get("verifier", {}).items():
            setattr(new_config.verifier, key, value)

        if "log_level" in overrides:
            new_config.log_level = overrides["log_level"]

        return new_config

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return {
            "protocol": {
                "legacy_halo2_names": self.protocol.legacy_halo2_names,
                "strict_empty_proof": self.protocol.strict_empty_proof,
            },
            "verifier": {
                "verify_inclusion": self.verifier.verify_inclusion,
            },
            "log_level": self.log_level,
            "extra": self.extra,
        }


def configure_logging(config: Optional[RuntimeConfig] = None) -> None:
    """
    Configure root logging for applications embedding the SDK.

    The SDK never calls this on import; applications opt in.
    """
    config = config or get_default_config()
    logging.basicConfig(
        level=getattr(logging, config.log_level.upper(), logging.INFO),
        format=LOG_FORMAT,
    )


# Global default configuration
_default_config: Optional[RuntimeConfig] = None


def get_default_config() -> RuntimeConfig:
    """Get the default runtime configuration."""
    global _default_config
    if _default_config is None:
        _default_config = RuntimeConfig.from_env()
    return _default_config


def set_default_config(config: Optional[RuntimeConfig]) -> None:
    """Set the default runtime configuration (None resets to env-derived defaults)."""
    global _default_config
    _default_config = config
