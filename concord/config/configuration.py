"""
Configuration management system for concord.
Supports YAML, JSON, and environment variable configuration.
"""
import os
import json
import logging
import yaml
from typing import Any, Dict, List, Optional, Sequence, Tuple, Union
from dataclasses import dataclass, field, asdict

from concord.core.base import AgreementMatrix, LabelSequence
from concord.core.interpretation import format_kappa
from concord.core.pairwise import pairwise_agreement
from concord.reporting.tables import generate_agreement_table
from concord.utils.stats import bootstrap_kappa_ci

logger = logging.getLogger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


@dataclass
class AgreementConfig:
    """Settings for building agreement matrices"""
    strict_lengths: bool = False  # fail fast on unequal sequence lengths
    max_workers: int = 1  # > 1 computes annotator pairs on a thread pool
    worker_prefix: str = "Worker"
    pair_prefix: str = "W"
    pair_separator: str = "–"
    kappa_digits: int = 3


@dataclass
class StatisticsConfig:
    """Settings for bootstrap statistics"""
    confidence_level: float = 0.95
    n_bootstrap: int = 1000
    random_seed: Optional[int] = 42


@dataclass
class ConcordConfig:
    """Main concord configuration"""
    version: str = "0.1.0"
    log_level: str = "INFO"
    agreement: AgreementConfig = field(default_factory=AgreementConfig)
    statistics: StatisticsConfig = field(default_factory=StatisticsConfig)

    def __post_init__(self):
        self.log_level = self.log_level.upper()


class ConfigurationManager:
    """Manages concord configuration from multiple sources"""

    def __init__(self, config_path: Optional[str] = None):
        self.config_path = config_path
        self.config = None
        self.config_sources = []

        # Default configuration locations
        self.default_config_paths = [
            "concord_config.yaml",
            "concord_config.json",
            "config/concord.yaml",
            "config/concord.json",
            os.path.expanduser("~/.concord/config.yaml"),
            os.path.expanduser("~/.concord/config.json")
        ]

        self._load_configuration()

    def _load_configuration(self):
        """Load configuration from multiple sources"""

        self.config = ConcordConfig()
        self.config_sources.append("default")

        config_file = self._find_config_file()
        if config_file:
            file_config = self._load_config_file(config_file)
            if isinstance(file_config, dict) and file_config:
                self.config = self._merge_configs(self.config, file_config)
                self.config_sources.append(f"file:{config_file}")

        env_config = self._load_env_variables()
        if env_config:
            self.config = self._merge_configs(self.config, env_config)
            self.config_sources.append("environment")

        logger.debug("Configuration loaded from: %s", ", ".join(self.config_sources))

    def _find_config_file(self) -> Optional[str]:
        """Find configuration file"""

        if self.config_path:
            if os.path.exists(self.config_path):
                return self.config_path
            logger.warning("Specified config file not found: %s", self.config_path)

        for path in self.default_config_paths:
            if os.path.exists(path):
                return path

        return None

    def _load_config_file(self, config_path: str) -> Optional[Dict]:
        """Load configuration from file"""

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                if config_path.endswith('.yaml') or config_path.endswith('.yml'):
                    return yaml.safe_load(f)
                elif config_path.endswith('.json'):
                    return json.load(f)
                else:
                    logger.warning("Unknown config file format: %s", config_path)
                    return None

        except (OSError, yaml.YAMLError, json.JSONDecodeError) as e:
            logger.error("Error loading config file %s: %s", config_path, e)
            return None

    def _load_env_variables(self) -> Dict:
        """Load configuration from environment variables"""

        env_config = {}

        env_mappings = {
            "CONCORD_LOG_LEVEL": ("log_level", str),
            "CONCORD_STRICT_LENGTHS": ("agreement.strict_lengths", bool),
            "CONCORD_MAX_WORKERS": ("agreement.max_workers", int),
            "CONCORD_WORKER_PREFIX": ("agreement.worker_prefix", str),
            "CONCORD_PAIR_PREFIX": ("agreement.pair_prefix", str),
            "CONCORD_PAIR_SEPARATOR": ("agreement.pair_separator", str),
            "CONCORD_KAPPA_DIGITS": ("agreement.kappa_digits", int),
            "CONCORD_CONFIDENCE_LEVEL": ("statistics.confidence_level", float),
            "CONCORD_N_BOOTSTRAP": ("statistics.n_bootstrap", int),
            "CONCORD_RANDOM_SEED": ("statistics.random_seed", int),
        }

        for env_var, (config_path, value_type) in env_mappings.items():
            if env_var in os.environ:
                try:
                    value = os.environ[env_var]

                    if value_type == bool:
                        value = value.lower() in ('true', '1', 'yes', 'on')
                    elif value_type == int:
                        value = int(value)
                    elif value_type == float:
                        value = float(value)

                    self._set_nested_value(env_config, config_path, value)

                except ValueError as e:
                    logger.warning("Error parsing environment variable %s: %s", env_var, e)

        return env_config

    def _set_nested_value(self, config: Dict, path: str, value: Any):
        """Set nested dictionary value using dot notation"""

        keys = path.split('.')
        current = config

        for key in keys[:-1]:
            if key not in current:
                current[key] = {}
            current = current[key]

        current[keys[-1]] = value

    def _merge_configs(self, base_config: ConcordConfig, override_config: Dict) -> ConcordConfig:
        """Merge an override dictionary into a configuration"""

        merged_dict = self._deep_merge(asdict(base_config), override_config)

        try:
            merged_dict['agreement'] = AgreementConfig(**merged_dict.get('agreement', {}))
            merged_dict['statistics'] = StatisticsConfig(**merged_dict.get('statistics', {}))
            return ConcordConfig(**merged_dict)

        except (TypeError, AttributeError) as e:
            logger.error("Error merging configurations: %s", e)
            return base_config

    def _deep_merge(self, base: Dict, override: Dict) -> Dict:
        """Deep merge two dictionaries"""

        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result

    def get_config(self) -> ConcordConfig:
        """Get the current configuration"""
        return self.config

    def save_config(self, output_path: str, format: str = "yaml"):
        """Save current configuration to file"""

        config_dict = asdict(self.config)

        if format.lower() not in ("yaml", "json"):
            raise ValueError(f"Unsupported format: {format}")

        with open(output_path, 'w', encoding='utf-8') as f:
            if format.lower() == "yaml":
                yaml.dump(config_dict, f, default_flow_style=False, indent=2, allow_unicode=True)
            else:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)

        logger.info("Configuration saved to: %s", output_path)

    def validate_config(self) -> List[str]:
        """Validate configuration and return list of issues"""

        issues = []
        agreement = self.config.agreement
        statistics = self.config.statistics

        if self.config.log_level not in LOG_LEVELS:
            issues.append(f"Invalid log level: {self.config.log_level}")

        if agreement.max_workers < 1:
            issues.append("max_workers must be at least 1")

        if not agreement.worker_prefix:
            issues.append("worker_prefix must not be empty")

        if not agreement.pair_prefix:
            issues.append("pair_prefix must not be empty")

        if agreement.kappa_digits < 0:
            issues.append("kappa_digits must be non-negative")

        if not 0 < statistics.confidence_level < 1:
            issues.append("confidence_level must be between 0 and 1")

        if statistics.n_bootstrap < 1:
            issues.append("n_bootstrap must be at least 1")

        return issues


def setup_logging(config: Union[ConcordConfig, str, None] = None):
    """Configure root logging for applications embedding concord

    Accepts a ConcordConfig (its ``log_level`` is used), a level name, or None
    for the level of the loaded configuration.
    """
    if config is None:
        config = load_config()
    level_name = config.log_level if isinstance(config, ConcordConfig) else config
    level = getattr(logging, str(level_name).upper(), logging.INFO)

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(level)
    return level


def bootstrap_ci(a: LabelSequence, b: LabelSequence, config: Optional[ConcordConfig] = None) -> Optional[Tuple[float, float]]:
    """Run bootstrap_kappa_ci with the statistics settings of ``config``"""

    statistics = (config or ConcordConfig()).statistics
    return bootstrap_kappa_ci(
        a,
        b,
        confidence=statistics.confidence_level,
        n_bootstrap=statistics.n_bootstrap,
        seed=statistics.random_seed,
    )


def agreement_table(matrix: AgreementMatrix, config: Optional[ConcordConfig] = None, **kwargs) -> str:
    """Run generate_agreement_table with the ``kappa_digits`` of ``config``"""

    agreement = (config or ConcordConfig()).agreement
    return generate_agreement_table(matrix, digits=agreement.kappa_digits, **kwargs)


def format_value(value: Optional[float], config: Optional[ConcordConfig] = None) -> str:
    """Run format_kappa with the ``kappa_digits`` of ``config``"""

    return format_kappa(value, digits=(config or ConcordConfig()).agreement.kappa_digits)


def build_matrix(sequences: Sequence[LabelSequence], config: Optional[ConcordConfig] = None) -> AgreementMatrix:
    """Run pairwise_agreement with the agreement settings of ``config``"""

    agreement = (config or ConcordConfig()).agreement
    return pairwise_agreement(
        sequences,
        strict=agreement.strict_lengths,
        max_workers=agreement.max_workers,
        worker_prefix=agreement.worker_prefix,
        pair_prefix=agreement.pair_prefix,
        pair_separator=agreement.pair_separator,
    )


def create_default_config_file(output_path: str = "concord_config.yaml"):
    """Create a default configuration file"""

    config_dict = asdict(ConcordConfig())

    with open(output_path, 'w', encoding='utf-8') as f:
        yaml.dump(config_dict, f, default_flow_style=False, indent=2, allow_unicode=True)

    logger.info("Default configuration file created: %s", output_path)


def load_config(config_path: Optional[str] = None) -> ConcordConfig:
    """Load concord configuration"""

    manager = ConfigurationManager(config_path)
    return manager.get_config()


def validate_config_file(config_path: str) -> bool:
    """Validate a configuration file"""

    manager = ConfigurationManager(config_path)
    issues = manager.validate_config()

    if issues:
        logger.warning("Configuration validation failed with %d issues:", len(issues))
        for i, issue in enumerate(issues, 1):
            logger.warning("  %d. %s", i, issue)
        return False

    logger.info("Configuration validation passed")
    return True
