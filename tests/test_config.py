"""Tests for configuration system."""


class TestScaffoldSettings:
    """Test configuration loading and defaults."""

    def test_defaults_match_published_collection(self):
        from mderic_boilerplates.config import ScaffoldSettings

        settings = ScaffoldSettings()
        assert settings.repo_url == "https://github.com/muhammadderic/mderic-boilerplates.git"
        assert settings.staging_dir_name == "__mderic-boilerplates-tmp__"
        assert settings.target_dir_name == "backend"
        assert settings.clone_depth == 1
        assert settings.branch is None

    def test_cleanup_defaults(self):
        from mderic_boilerplates.config import CleanupSettings

        cleanup = CleanupSettings()
        assert cleanup.max_attempts == 5
        assert cleanup.base_delay == 0.2

    def test_settings_singleton_exports(self):
        from mderic_boilerplates.config import settings

        assert settings.cleanup is not None


class TestEnvironmentOverrides:
    """Test environment variable overrides."""

    def test_env_override_repo_url(self, monkeypatch):
        monkeypatch.setenv("MDERIC_REPO_URL", "https://example.com/mirror.git")

        from mderic_boilerplates.config import ScaffoldSettings

        assert ScaffoldSettings().repo_url == "https://example.com/mirror.git"

    def test_env_override_cleanup_attempts(self, monkeypatch):
        monkeypatch.setenv("MDERIC_CLEANUP__MAX_ATTEMPTS", "8")

        from mderic_boilerplates.config import CleanupSettings

        assert CleanupSettings().max_attempts == 8
