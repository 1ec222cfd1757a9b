"""
Configuration management for concord.
"""

from .configuration import (
    AgreementConfig,
    StatisticsConfig,
    ConcordConfig,
    ConfigurationManager,
    agreement_table,
    bootstrap_ci,
    build_matrix,
    create_default_config_file,
    format_value,
    load_config,
    setup_logging,
    validate_config_file
)

__all__ = [
    "AgreementConfig",
    "StatisticsConfig",
    "ConcordConfig",
    "ConfigurationManager",
    "agreement_table",
    "bootstrap_ci",
    "build_matrix",
    "create_default_config_file",
    "format_value",
    "load_config",
    "setup_logging",
    "validate_config_file"
]
