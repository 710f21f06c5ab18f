"""
Tests for the environment-variable resolver.

Validates:
1. Accessor names derive the expected environment keys
2. Lookups read from a fixed snapshot and never raise
3. Env file values never override the ambient environment
4. The process-wide resolver is created once
"""

import os

import pytest

from apprunner_iac.configs.resolver import ConfigResolver, derive_env_key, get_resolver


class TestDeriveEnvKey:
    """Tests for accessor name to key derivation."""

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("apprunnerServiceName", "APPRUNNER_SERVICE_NAME"),
            ("rdsAllocatedStorage", "RDS_ALLOCATED_STORAGE"),
            ("ecrScanImageOnPush", "ECR_SCAN_IMAGE_ON_PUSH"),
            ("dbSecurityGroup", "DB_SECURITY_GROUP"),
            ("ecrGetAuthorizationToken", "ECR_GET_AUTHORIZATION_TOKEN"),
            ("rdsMultiAz", "RDS_MULTI_AZ"),
        ],
    )
    def test_camel_case_words(self, name, expected):
        """Camel-case words are joined with underscores and upper-cased."""
        assert derive_env_key(name) == expected

    def test_single_lowercase_word(self):
        """A single word is simply upper-cased."""
        assert derive_env_key("port") == "PORT"
        assert derive_env_key("region") == "REGION"

    def test_embedded_acronym_is_one_segment(self):
        """An upper-case run followed by a capitalised word stays whole."""
        assert derive_env_key("vpcCIDRBlock") == "VPC_CIDR_BLOCK"
        assert derive_env_key("imageURLPath") == "IMAGE_URL_PATH"

    def test_trailing_acronym(self):
        """An acronym at the end of the name is one segment."""
        assert derive_env_key("imageURL") == "IMAGE_URL"

    def test_digits_attach_to_preceding_word(self):
        """Digits directly after a lowercase run belong to that run."""
        assert derive_env_key("az3Count") == "AZ3_COUNT"

    def test_snake_case_matches_camel_case(self):
        """Underscores are separators, so snake_case derives the same key."""
        assert derive_env_key("rds_multi_az") == derive_env_key("rdsMultiAz")
        assert derive_env_key("apprunner_health_check_timeout") == "APPRUNNER_HEALTH_CHECK_TIMEOUT"

    def test_name_without_segments_is_empty(self):
        """Names with no letters or digits derive an empty key."""
        assert derive_env_key("") == ""
        assert derive_env_key("-_-") == ""

    def test_non_ascii_letters_are_word_boundaries(self):
        """Only ASCII letters form segments; other characters end an acronym."""
        assert derive_env_key("vpcCIDRé") == "VPC_CIDR"

    def test_derivation_is_deterministic(self):
        """Deriving twice yields the same key."""
        assert derive_env_key("apprunnerHealthCheckTimeout") == derive_env_key(
            "apprunnerHealthCheckTimeout"
        )


class TestConfigResolver:
    """Tests for resolving values from the snapshot."""

    def test_resolves_from_environ(self, tmp_path):
        """Values come from the supplied environment."""
        resolver = ConfigResolver(
            env_file=tmp_path / "missing.env",
            environ={"APPRUNNER_SERVICE_NAME": "web"},
        )

        assert resolver.resolve("apprunnerServiceName") == "web"
        assert resolver.resolve("apprunner_service_name") == "web"

    def test_absent_key_returns_none(self, tmp_path):
        """Unset keys resolve to None instead of raising."""
        resolver = ConfigResolver(env_file=tmp_path / "missing.env", environ={})

        assert resolver.resolve("rdsAllocatedStorage") is None
        assert resolver.resolve("") is None
        assert resolver.resolve("!!!") is None

    def test_missing_env_file_is_ignored(self, tmp_path):
        """A missing env file leaves only the ambient values."""
        resolver = ConfigResolver(
            env_file=tmp_path / "does-not-exist.env",
            environ={"REGION": "us-east-1"},
        )

        assert resolver.resolve("region") == "us-east-1"

    def test_env_file_values_are_read(self, env_file):
        """Keys defined only in the env file resolve, comments are ignored."""
        resolver = ConfigResolver(env_file=env_file, environ={})

        assert resolver.resolve("rdsMultiAz") == "true"
        assert resolver.resolve("apprunnerServiceName") == "from-file"
        assert resolver.resolve("comment") is None

    def test_ambient_value_wins_over_file(self, env_file):
        """The file never overrides a key already in the environment."""
        resolver = ConfigResolver(
            env_file=env_file,
            environ={"APPRUNNER_SERVICE_NAME": "from-environ"},
        )

        assert resolver.resolve("apprunnerServiceName") == "from-environ"

    def test_env_file_values_are_literal(self, tmp_path):
        """${VAR} references in the env file are not expanded."""
        path = tmp_path / ".env"
        path.write_text("BASE_PATH=/srv\nLOG_PATH=${BASE_PATH}/logs\n", encoding="utf-8")

        resolver = ConfigResolver(env_file=path, environ={"BASE_PATH": "/opt"})

        assert resolver.resolve("logPath") == "${BASE_PATH}/logs"

    def test_snapshot_is_fixed_after_construction(self, tmp_path):
        """Later changes to the source mapping are not observed."""
        environ = {"PORT": "80"}
        resolver = ConfigResolver(env_file=tmp_path / "missing.env", environ=environ)
        environ["PORT"] = "8080"

        assert resolver.resolve("port") == "80"
        assert resolver.resolve("port") == resolver.resolve("port")

    def test_contains(self):
        """Membership is checked by accessor name."""
        resolver = ConfigResolver(env_file=None, environ={"ECR_IMAGE_TAG": "v1"})

        assert "ecrImageTag" in resolver
        assert "ecrRepositoryName" not in resolver


class TestProcessEnvironmentLoading:
    """Tests for loading the env file into the process environment."""

    def test_file_loads_into_process_environment(self, isolated_environ, env_file):
        """Without an explicit mapping, the file populates os.environ."""
        resolver = ConfigResolver(env_file=env_file)

        assert os.environ["RDS_MULTI_AZ"] == "true"
        assert resolver.resolve("rdsMultiAz") == "true"

    def test_process_environment_wins_over_file(self, isolated_environ, env_file):
        """A pre-existing process variable keeps its value."""
        os.environ["RDS_MULTI_AZ"] = "false"

        resolver = ConfigResolver(env_file=env_file)

        assert os.environ["RDS_MULTI_AZ"] == "false"
        assert resolver.resolve("rdsMultiAz") == "false"

    def test_loaded_values_are_literal(self, isolated_environ, tmp_path):
        """Loading into os.environ keeps ${VAR} references unexpanded."""
        path = tmp_path / ".env"
        path.write_text("LOG_PATH=${HOME}/logs\n", encoding="utf-8")
        isolated_environ.pop("LOG_PATH", None)

        resolver = ConfigResolver(env_file=path)

        assert os.environ["LOG_PATH"] == "${HOME}/logs"
        assert resolver.resolve("logPath") == "${HOME}/logs"

    def test_missing_file_does_not_raise(self, isolated_environ, tmp_path):
        """Loading a missing file is silent."""
        os.environ["REGION"] = "eu-west-1"

        resolver = ConfigResolver(env_file=tmp_path / "nope.env")

        assert resolver.resolve("region") == "eu-west-1"


class TestGetResolver:
    """Tests for the process-wide resolver factory."""

    def test_returns_same_instance(self, isolated_environ):
        """The resolver is constructed once and reused."""
        get_resolver.cache_clear()
        try:
            assert get_resolver() is get_resolver()
        finally:
            get_resolver.cache_clear()
