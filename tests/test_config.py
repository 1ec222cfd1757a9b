"""
Tests for configuration management system.
"""
import logging
import pytest
import os
import json
import yaml

from concord.config import (
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
from concord.core.errors import SequenceLengthError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    """Isolate tests from CONCORD_* variables and config files in the working directory"""
    for var in list(os.environ):
        if var.startswith("CONCORD_"):
            monkeypatch.delenv(var)
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))


class TestAgreementConfig:
    """Test AgreementConfig dataclass"""

    def test_default_values(self):
        config = AgreementConfig()

        assert config.strict_lengths is False
        assert config.max_workers == 1
        assert config.worker_prefix == "Worker"
        assert config.pair_prefix == "W"
        assert config.pair_separator == "–"
        assert config.kappa_digits == 3


class TestStatisticsConfig:
    """Test StatisticsConfig dataclass"""

    def test_default_values(self):
        config = StatisticsConfig()

        assert config.confidence_level == 0.95
        assert config.n_bootstrap == 1000
        assert config.random_seed == 42


class TestConcordConfig:
    """Test main ConcordConfig dataclass"""

    def test_default_config(self):
        config = ConcordConfig()

        assert config.version == "0.1.0"
        assert config.log_level == "INFO"
        assert isinstance(config.agreement, AgreementConfig)
        assert isinstance(config.statistics, StatisticsConfig)

    def test_log_level_normalized(self):
        assert ConcordConfig(log_level="debug").log_level == "DEBUG"


class TestConfigurationManager:
    """Test configuration manager"""

    def test_default_configuration(self):
        manager = ConfigurationManager()
        config = manager.get_config()

        assert isinstance(config, ConcordConfig)
        assert manager.config_sources == ["default"]

    def test_yaml_config_loading(self, tmp_path):
        config_path = str(tmp_path / "custom.yaml")
        with open(config_path, "w") as f:
            yaml.dump({
                "log_level": "DEBUG",
                "agreement": {"strict_lengths": True, "max_workers": 4},
            }, f)

        manager = ConfigurationManager(config_path)
        config = manager.get_config()

        assert config.log_level == "DEBUG"
        assert config.agreement.strict_lengths is True
        assert config.agreement.max_workers == 4
        assert config.agreement.worker_prefix == "Worker"  # untouched default
        assert f"file:{config_path}" in manager.config_sources

    def test_json_config_loading(self, tmp_path):
        config_path = str(tmp_path / "custom.json")
        with open(config_path, "w") as f:
            json.dump({"statistics": {"n_bootstrap": 250, "random_seed": None}}, f)

        config = ConfigurationManager(config_path).get_config()

        assert config.statistics.n_bootstrap == 250
        assert config.statistics.random_seed is None
        assert config.statistics.confidence_level == 0.95

    def test_default_location(self, tmp_path):
        with open(tmp_path / "concord_config.yaml", "w") as f:
            yaml.dump({"agreement": {"pair_prefix": "A"}}, f)

        manager = ConfigurationManager()

        assert manager.get_config().agreement.pair_prefix == "A"
        assert "file:concord_config.yaml" in manager.config_sources

    def test_missing_config_file(self):
        manager = ConfigurationManager("does_not_exist.yaml")

        assert manager.config_sources == ["default"]

    def test_unknown_key_keeps_defaults(self, tmp_path):
        config_path = str(tmp_path / "bad.yaml")
        with open(config_path, "w") as f:
            yaml.dump({"agreement": {"no_such_option": 1}}, f)

        config = ConfigurationManager(config_path).get_config()

        assert config == ConcordConfig()

    def test_malformed_yaml(self, tmp_path):
        config_path = tmp_path / "broken.yaml"
        config_path.write_text("agreement: [unclosed")

        config = ConfigurationManager(str(config_path)).get_config()

        assert config == ConcordConfig()

    def test_environment_variables(self, monkeypatch):
        monkeypatch.setenv("CONCORD_LOG_LEVEL", "warning")
        monkeypatch.setenv("CONCORD_STRICT_LENGTHS", "yes")
        monkeypatch.setenv("CONCORD_MAX_WORKERS", "8")
        monkeypatch.setenv("CONCORD_CONFIDENCE_LEVEL", "0.9")
        monkeypatch.setenv("CONCORD_RANDOM_SEED", "7")

        manager = ConfigurationManager()
        config = manager.get_config()

        assert config.log_level == "WARNING"
        assert config.agreement.strict_lengths is True
        assert config.agreement.max_workers == 8
        assert config.statistics.confidence_level == 0.9
        assert config.statistics.random_seed == 7
        assert "environment" in manager.config_sources

    def test_environment_overrides_file(self, tmp_path, monkeypatch):
        config_path = str(tmp_path / "custom.yaml")
        with open(config_path, "w") as f:
            yaml.dump({"agreement": {"max_workers": 2}}, f)
        monkeypatch.setenv("CONCORD_MAX_WORKERS", "6")

        config = ConfigurationManager(config_path).get_config()

        assert config.agreement.max_workers == 6

    def test_invalid_environment_value_ignored(self, monkeypatch):
        monkeypatch.setenv("CONCORD_MAX_WORKERS", "many")

        config = ConfigurationManager().get_config()

        assert config.agreement.max_workers == 1

    def test_save_and_reload(self, tmp_path):
        manager = ConfigurationManager()
        manager.config.agreement.pair_prefix = "R"

        yaml_path = str(tmp_path / "saved.yaml")
        json_path = str(tmp_path / "saved.json")
        manager.save_config(yaml_path, format="yaml")
        manager.save_config(json_path, format="json")

        assert load_config(yaml_path).agreement.pair_prefix == "R"
        assert load_config(json_path).agreement.pair_separator == "–"

    def test_save_unsupported_format(self, tmp_path):
        manager = ConfigurationManager()

        with pytest.raises(ValueError, match="Unsupported format"):
            manager.save_config(str(tmp_path / "out.toml"), format="toml")

    def test_validate_default_config(self):
        assert ConfigurationManager().validate_config() == []

    def test_validate_reports_issues(self):
        manager = ConfigurationManager()
        manager.config.log_level = "LOUD"
        manager.config.agreement.max_workers = 0
        manager.config.statistics.confidence_level = 1.5
        manager.config.statistics.n_bootstrap = 0

        issues = manager.validate_config()

        assert len(issues) == 4
        assert any("log level" in issue for issue in issues)
        assert any("max_workers" in issue for issue in issues)


class TestConfigHelpers:
    """Test module-level helpers"""

    def test_create_default_config_file(self, tmp_path):
        path = str(tmp_path / "concord_config.yaml")
        create_default_config_file(path)

        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)

        assert data["log_level"] == "INFO"
        assert data["agreement"]["worker_prefix"] == "Worker"

    def test_validate_config_file(self, tmp_path):
        good = str(tmp_path / "good.yaml")
        create_default_config_file(good)
        assert validate_config_file(good) is True

        bad = str(tmp_path / "bad.yaml")
        with open(bad, "w") as f:
            yaml.dump({"statistics": {"n_bootstrap": 0}}, f)
        assert validate_config_file(bad) is False

    def test_build_matrix_uses_config(self):
        config = ConcordConfig(agreement=AgreementConfig(worker_prefix="Model", pair_prefix="M"))

        matrix = build_matrix([["A", "B"], ["B", "A"]], config)

        assert matrix.labels == ("Model 1", "Model 2")
        assert matrix.pair_labels == ["M1–M2"]

    def test_build_matrix_strict(self):
        config = ConcordConfig(agreement=AgreementConfig(strict_lengths=True))

        with pytest.raises(SequenceLengthError):
            build_matrix([["A", "B"], ["A"]], config)

    def test_build_matrix_defaults(self):
        matrix = build_matrix([["A", "B"], ["A"]])

        assert matrix.value(0, 1) is None

    def test_environment_pair_separator_and_digits(self, monkeypatch):
        monkeypatch.setenv("CONCORD_PAIR_SEPARATOR", " vs ")
        monkeypatch.setenv("CONCORD_KAPPA_DIGITS", "1")

        config = load_config()
        matrix = build_matrix([["A", "B"], ["B", "A"]], config)

        assert config.agreement.pair_separator == " vs "
        assert config.agreement.kappa_digits == 1
        assert matrix.pair_labels == ["W1 vs W2"]


class TestConfigDrivenOutput:
    """Test that agreement and statistics settings reach the computations"""

    A = ["A", "B", "A", "A", "B", "A", "B", "B", "A", "A", "B", "A"]
    B = ["A", "B", "B", "A", "B", "A", "A", "B", "A", "B", "B", "A"]

    def test_agreement_table_digits(self):
        matrix = build_matrix([["A", "B", "A", "A"], ["A", "B", "B", "A"]])

        one = agreement_table(matrix, ConcordConfig(agreement=AgreementConfig(kappa_digits=1)))
        default = agreement_table(matrix)

        assert "& 0.5 &" in one
        assert "0.50" not in one
        assert "0.500" in default

    def test_agreement_table_passes_caption(self):
        matrix = build_matrix([["A", "B"], ["B", "A"]])

        assert "My Caption" in agreement_table(matrix, caption="My Caption")

    def test_format_value(self):
        config = ConcordConfig(agreement=AgreementConfig(kappa_digits=1))

        assert format_value(0.5, config) == "0.5"
        assert format_value(0.5) == "0.500"
        assert format_value(None, config) == "N/A"

    def test_bootstrap_ci_reproducible_with_seed(self):
        config = ConcordConfig(statistics=StatisticsConfig(n_bootstrap=200, random_seed=3))

        assert bootstrap_ci(self.A, self.B, config) == bootstrap_ci(self.A, self.B, config)

    def test_bootstrap_ci_confidence_level(self):
        wide = bootstrap_ci(self.A, self.B, ConcordConfig(statistics=StatisticsConfig(confidence_level=0.95)))
        narrow = bootstrap_ci(self.A, self.B, ConcordConfig(statistics=StatisticsConfig(confidence_level=0.5)))

        assert narrow != wide
        assert wide[0] <= narrow[0] <= narrow[1] <= wide[1]

    def test_bootstrap_ci_undefined(self):
        assert bootstrap_ci(["A", "A"], ["A", "A"]) is None
        assert bootstrap_ci([], []) is None


class TestSetupLogging:
    """Test root logger configuration"""

    @pytest.fixture(autouse=True)
    def restore_root_logger(self):
        root = logging.getLogger()
        level, handlers = root.level, list(root.handlers)
        yield
        for handler in root.handlers:
            if handler not in handlers:
                root.removeHandler(handler)
        root.setLevel(level)

    def test_from_config(self):
        level = setup_logging(ConcordConfig(log_level="DEBUG"))

        assert level == logging.DEBUG
        assert logging.getLogger().level == logging.DEBUG

    def test_from_level_name(self):
        setup_logging("error")

        assert logging.getLogger().level == logging.ERROR

    def test_from_loaded_config(self, monkeypatch):
        monkeypatch.setenv("CONCORD_LOG_LEVEL", "WARNING")

        setup_logging()

        assert logging.getLogger().level == logging.WARNING

    def test_unknown_level_falls_back_to_info(self):
        assert setup_logging("LOUD") == logging.INFO
