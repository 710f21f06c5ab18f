"""
Detailed tests for individual infrastructure components.

Validates:
1. Each component class has required attributes
2. Output dataclasses have required fields
3. Policy documents and resource arguments built from configuration
"""

import json

import pytest


def _field_names(dataclass_type) -> set[str]:
    return {f.name for f in dataclass_type.__dataclass_fields__.values()}


class TestNetworkingComponents:
    """Tests for networking infrastructure components."""

    def test_vpc_component_attributes(self):
        """VpcComponent should have essential attributes."""
        from apprunner_iac.components.networking.vpc import VpcComponent

        assert hasattr(VpcComponent, "get_outputs")
        assert hasattr(VpcComponent, "_create_nat_gateway")
        assert hasattr(VpcComponent, "_create_route_tables")

    def test_vpc_outputs_fields(self):
        """VpcOutputs should expose subnet lists and the NAT gateway."""
        from apprunner_iac.components.networking.vpc import VpcOutputs

        expected = {"vpc_id", "vpc_cidr_block", "public_subnet_ids", "private_subnet_ids", "nat_gateway_id"}
        assert expected.issubset(_field_names(VpcOutputs))

    def test_security_group_outputs_fields(self):
        """SecurityGroupOutputs should expose the database and connector groups."""
        from apprunner_iac.components.networking.security_groups import SecurityGroupOutputs

        assert {"database_sg_id", "connector_sg_id"} == _field_names(SecurityGroupOutputs)


class TestStorageComponents:
    """Tests for storage infrastructure components."""

    def test_rds_outputs_fields(self):
        """RdsOutputs should expose connection details and the secret."""
        from apprunner_iac.components.storage.rds_mysql import RdsOutputs

        expected = {"address", "port", "database_name", "secret_arn", "secret_kms_key_id"}
        assert expected.issubset(_field_names(RdsOutputs))

    def test_ecr_outputs_fields(self):
        """EcrRepositoryOutputs should expose the deployable image identifier."""
        from apprunner_iac.components.storage.ecr_repository import EcrRepositoryOutputs

        expected = {"repository_url", "repository_arn", "repository_name", "image_identifier"}
        assert expected.issubset(_field_names(EcrRepositoryOutputs))

    def test_lifecycle_policy_keeps_configured_count(self):
        """Lifecycle policy expires all but the newest images."""
        from apprunner_iac.components.storage.ecr_repository import lifecycle_policy

        rule = lifecycle_policy(7)["rules"][0]

        assert rule["selection"]["countType"] == "imageCountMoreThan"
        assert rule["selection"]["countNumber"] == 7
        assert rule["action"]["type"] == "expire"


class TestSecurityComponents:
    """Tests for IAM policy documents."""

    def test_iam_role_outputs_fields(self):
        """IamRoleOutputs should include both role ARNs."""
        from apprunner_iac.components.security.iam_roles import IamRoleOutputs

        assert {"ecr_access_role_arn", "instance_role_arn"} == _field_names(IamRoleOutputs)

    @pytest.mark.parametrize("service", [
        "build.apprunner.amazonaws.com",
        "tasks.apprunner.amazonaws.com",
    ])
    def test_assume_role_policy(self, service):
        """Trust policy names the service principal."""
        from apprunner_iac.components.security.iam_roles import assume_role_policy

        statement = json.loads(assume_role_policy(service))["Statement"][0]

        assert statement["Principal"] == {"Service": service}
        assert statement["Action"] == "sts:AssumeRole"

    def test_ecr_access_policy(self):
        """Authorization token is account-wide, pulls are scoped to the repository."""
        from apprunner_iac.components.security.iam_roles import ecr_access_policy
        from apprunner_iac.configs.constants import ECR_PULL_ACTIONS

        repo_arn = "arn:aws:ecr:us-east-1:123456789012:repository/laravel12-apprunner"
        token, pull = json.loads(ecr_access_policy(repo_arn))["Statement"]

        assert token["Action"] == ["ecr:GetAuthorizationToken"]
        assert token["Resource"] == ["*"]
        assert pull["Action"] == ECR_PULL_ACTIONS
        assert pull["Resource"] == [repo_arn]

    def test_database_secret_policy(self):
        """Instance role may read the secret and decrypt with its key."""
        from apprunner_iac.components.security.iam_roles import database_secret_policy

        secret_arn = "arn:aws:secretsmanager:us-east-1:123456789012:secret:rds!db-abc"
        key_arn = "arn:aws:kms:us-east-1:123456789012:key/abc"
        read, decrypt = json.loads(database_secret_policy(secret_arn, key_arn))["Statement"]

        assert "secretsmanager:GetSecretValue" in read["Action"]
        assert read["Resource"] == [secret_arn]
        assert decrypt["Action"] == ["kms:Decrypt"]
        assert decrypt["Resource"] == [key_arn]


class TestComputeComponents:
    """Tests for App Runner components."""

    def test_vpc_connector_outputs_fields(self):
        """VpcConnectorOutputs should include the connector ARN."""
        from apprunner_iac.components.compute.vpc_connector import VpcConnectorOutputs

        assert "vpc_connector_arn" in _field_names(VpcConnectorOutputs)

    def test_service_outputs_fields(self):
        """AppRunnerServiceOutputs should include the service URL."""
        from apprunner_iac.components.compute.apprunner_service import AppRunnerServiceOutputs

        assert {"service_arn", "service_url"} == _field_names(AppRunnerServiceOutputs)

    def test_tcp_health_check(self):
        """Default health check is TCP with 3s timeout, 5s interval and no path."""
        from apprunner_iac.components.compute.apprunner_service import health_check_configuration
        from apprunner_iac.configs.base import EnvironmentConfig

        args = health_check_configuration(EnvironmentConfig())

        assert args.protocol == "TCP"
        assert args.path is None
        assert args.timeout == 3
        assert args.interval == 5
        assert args.unhealthy_threshold == 3
        assert args.healthy_threshold == 1

    def test_http_health_check_has_path(self):
        """HTTP health checks probe the configured path."""
        from apprunner_iac.components.compute.apprunner_service import health_check_configuration
        from apprunner_iac.configs.base import EnvironmentConfig

        config = EnvironmentConfig(
            apprunner_health_check_protocol="HTTP",
            apprunner_health_check_path="/up",
        )
        args = health_check_configuration(config)

        assert args.protocol == "HTTP"
        assert args.path == "/up"


class TestComponentExports:
    """Tests for component __init__ files."""

    def test_networking_exports_components(self):
        """Networking __init__ should export component classes."""
        from apprunner_iac.components.networking import VpcComponent, SecurityGroupsComponent

        assert VpcComponent is not None
        assert SecurityGroupsComponent is not None

    def test_storage_exports_components(self):
        """Storage __init__ should export component classes."""
        from apprunner_iac.components.storage import RdsMysqlComponent, EcrRepositoryComponent

        assert RdsMysqlComponent is not None
        assert EcrRepositoryComponent is not None

    def test_security_exports_components(self):
        """Security __init__ should export component classes."""
        from apprunner_iac.components.security import IamRolesComponent

        assert IamRolesComponent is not None

    def test_compute_exports_components(self):
        """Compute __init__ should export component classes."""
        from apprunner_iac.components.compute import VpcConnectorComponent, AppRunnerServiceComponent

        assert VpcConnectorComponent is not None
        assert AppRunnerServiceComponent is not None

