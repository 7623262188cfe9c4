"""Tests for library-archive configuration."""

from pathlib import Path

from library_archive.config import DEFAULT_LOG_FORMAT, ArchiveConfig


class TestArchiveConfig:
    """Test configuration loading and parsing."""

    def test_default_config(self):
        """Default config should have sensible values."""
        config = ArchiveConfig()

        assert config.storage.archive_path == Path("archive.db")
        assert config.logging.level == "INFO"
        assert config.logging.format == DEFAULT_LOG_FORMAT

    def test_from_dict(self):
        """Should parse config from dictionary."""
        config = ArchiveConfig.from_dict(
            {
                "storage": {"archive_path": "data/catalog.db"},
                "logging": {"level": "debug"},
            }
        )

        assert config.storage.archive_path == Path("data/catalog.db")
        assert config.logging.level == "DEBUG"
        assert config.logging.format == DEFAULT_LOG_FORMAT

    def test_from_dict_empty_sections(self):
        """Empty sections should keep defaults."""
        config = ArchiveConfig.from_dict({"storage": None, "logging": {}})

        assert config.storage.archive_path == Path("archive.db")
        assert config.logging.level == "INFO"

    def test_from_yaml(self, tmp_path):
        """Should load config from YAML file."""
        yaml_path = tmp_path / "library_archive.yaml"
        yaml_path.write_text(
            """
library_archive:
  storage:
    archive_path: "holdings.db"
  logging:
    level: WARNING
"""
        )

        config = ArchiveConfig.from_yaml(yaml_path)

        assert config.storage.archive_path == Path("holdings.db")
        assert config.logging.level == "WARNING"

    def test_from_yaml_missing_file(self):
        """Should return defaults for missing file."""
        config = ArchiveConfig.from_yaml(Path("/nonexistent/library_archive.yaml"))

        assert config.storage.archive_path == Path("archive.db")

    def test_from_yaml_empty_file(self, tmp_path):
        """An empty YAML file should give defaults."""
        yaml_path = tmp_path / "empty.yaml"
        yaml_path.write_text("")

        config = ArchiveConfig.from_yaml(yaml_path)

        assert config.logging.level == "INFO"

    def test_to_dict(self):
        """Should serialize config to dictionary."""
        config = ArchiveConfig()
        config.storage.archive_path = Path("other.db")

        data = config.to_dict()

        assert data["storage"]["archive_path"] == "other.db"
        assert data["logging"]["level"] == "INFO"

    def test_unknown_log_level_falls_back_to_info(self, caplog):
        """An unknown level name should warn and use INFO."""
        config = ArchiveConfig.from_dict({"logging": {"level": "chatty"}})

        assert config.logging.level == "INFO"
        assert "Unknown log level 'CHATTY'" in caplog.text

    def test_log_level_is_case_insensitive(self):
        """Lower-case level names should be accepted."""
        config = ArchiveConfig.from_dict({"logging": {"level": "debug"}})

        assert config.logging.level == "DEBUG"
