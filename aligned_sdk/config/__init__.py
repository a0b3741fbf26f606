"""
Runtime Configuration Module

Provides configuration loading and management for the aligned SDK.
"""

from .runtime import (
    ProtocolConfig,
    RuntimeConfig,
    VerifierConfig,
    configure_logging,
    get_default_config,
    set_default_config,
)

__all__ = [
    "ProtocolConfig",
    "RuntimeConfig",
    "VerifierConfig",
    "configure_logging",
    "get_default_config",
    "set_default_config",
]
