"""
Pulumi program entry point for the App Runner infrastructure.

Instantiates all component resources in dependency order:
1. Configuration (environment variables, optionally seeded from .env)
2. VPC → Security Groups
3. RDS MySQL
4. ECR Repository
5. IAM Roles → VPC Connector → App Runner Service (unless APPRUNNER_ENABLED=false)
"""

import pulumi
import pulumi_aws as aws

from apprunner_iac.configs.base import EnvironmentConfig
from apprunner_iac.configs.environment import get_config
from apprunner_iac.configs.resolver import get_resolver
from apprunner_iac.utils.naming import ResourceNamer

# Networking
from apprunner_iac.components.networking.vpc import VpcComponent
from apprunner_iac.components.networking.security_groups import SecurityGroupsComponent

# Storage
from apprunner_iac.components.storage.rds_mysql import RdsMysqlComponent
from apprunner_iac.components.storage.ecr_repository import EcrRepositoryComponent

# Security
from apprunner_iac.components.security.iam_roles import IamRolesComponent

# Compute
from apprunner_iac.components.compute.vpc_connector import VpcConnectorComponent
from apprunner_iac.components.compute.apprunner_service import AppRunnerServiceComponent


def _component_options(config: EnvironmentConfig) -> pulumi.ResourceOptions | None:
    """Pin region and account with an explicit provider when configured.

    Args:
        config: Configuration object from get_config()

    Returns:
        Options carrying the provider, or None to use the ambient AWS settings
    """
    if not config.region and not config.account_id:
        return None

    provider = aws.Provider(
        f"{config.project_name}-aws",
        region=config.region,
        allowed_account_ids=[config.account_id] if config.account_id else None,
    )
    return pulumi.ResourceOptions(providers=[provider])


def main() -> None:
    """Deploy the App Runner infrastructure."""
    config = get_config(get_resolver())
    namer = ResourceNamer(project=config.project_name, environment=config.environment)
    base_name = namer.name("")
    opts = _component_options(config)

    pulumi.log.info(
        f"Deploying {base_name} (region={config.region or 'provider default'}, "
        f"apprunner_enabled={config.apprunner_enabled})"
    )

    # --- Layer 1: Networking ---
    vpc = VpcComponent(name=base_name, config=config, opts=opts)
    vpc_outputs = vpc.get_outputs()

    security_groups = SecurityGroupsComponent(
        name=base_name,
        config=config,
        vpc_id=vpc_outputs.vpc_id,
        opts=opts,
    )
    sg_outputs = security_groups.get_outputs()

    # --- Layer 2: Database ---
    rds = RdsMysqlComponent(
        name=base_name,
        config=config,
        subnet_ids=vpc_outputs.private_subnet_ids,
        security_group_id=sg_outputs.database_sg_id,
        opts=opts,
    )
    rds_outputs = rds.get_outputs()

    # --- Layer 3: Registry ---
    ecr = EcrRepositoryComponent(name=base_name, config=config, opts=opts)
    ecr_outputs = ecr.get_outputs()

    outputs = {
        "vpc_id": vpc_outputs.vpc_id,
        "private_subnet_ids": vpc_outputs.private_subnet_ids,
        "rds_endpoint": rds_outputs.address,
        "rds_port": rds_outputs.port,
        "rds_secret_arn": rds_outputs.secret_arn,
        "ecr_repository_url": ecr_outputs.repository_url,
    }

    # --- Layer 4: Compute ---
    if config.apprunner_enabled:
        iam_roles = IamRolesComponent(
            name=base_name,
            config=config,
            repository_arn=ecr_outputs.repository_arn,
            secret_arn=rds_outputs.secret_arn,
            secret_kms_key_id=rds_outputs.secret_kms_key_id,
            opts=opts,
        )
        iam_outputs = iam_roles.get_outputs()

        connector = VpcConnectorComponent(
            name=base_name,
            config=config,
            namer=namer,
            subnet_ids=vpc_outputs.private_subnet_ids,
            security_group_id=sg_outputs.connector_sg_id,
            opts=opts,
        )

        service = AppRunnerServiceComponent(
            name=base_name,
            config=config,
            image_identifier=ecr_outputs.image_identifier,
            ecr_access_role_arn=iam_outputs.ecr_access_role_arn,
            instance_role_arn=iam_outputs.instance_role_arn,
            vpc_connector_arn=connector.get_outputs().vpc_connector_arn,
            database_host=rds_outputs.address,
            database_port=rds_outputs.port,
            database_name=rds_outputs.database_name,
            database_secret_arn=rds_outputs.secret_arn,
            opts=pulumi.ResourceOptions.merge(
                opts or pulumi.ResourceOptions(),
                pulumi.ResourceOptions(depends_on=[rds]),
            ),
        )
        outputs["service_url"] = service.get_outputs().service_url
    else:
        pulumi.log.info("APPRUNNER_ENABLED is false, skipping App Runner resources")

    # --- Exports ---
    for key, value in outputs.items():
        pulumi.export(key, value)


# Execute
main()
