"""
App Runner Service Component.

Request path: Internet → App Runner managed load balancer → container (port
APPRUNNER_PORT). Outbound path: container → VPC connector → private subnets →
RDS (3306) or NAT → internet.

Key Components:
1. Source: private ECR image, pulled with the ECR access role. With auto
   deployments enabled every push to the configured tag triggers a deploy.
2. Instance: CPU/memory size and the instance role (database secret access).
3. Health check: TCP by default; HTTP probes use APPRUNNER_HEALTH_CHECK_PATH.
4. Runtime environment: DB_HOST, DB_PORT and DB_DATABASE as plain variables,
   DB_CREDENTIALS as a Secrets Manager reference resolved by App Runner.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from apprunner_iac.configs.base import EnvironmentConfig
from apprunner_iac.utils.tags import create_tags


@dataclass
class AppRunnerServiceOutputs:
    """Output values from App Runner service component."""
    service_arn: pulumi.Output[str]
    service_url: pulumi.Output[str]


def health_check_configuration(
    config: EnvironmentConfig,
) -> aws.apprunner.ServiceHealthCheckConfigurationArgs:
    """Build the health check block from configuration."""
    return aws.apprunner.ServiceHealthCheckConfigurationArgs(
        protocol=config.apprunner_health_check_protocol,
        path=config.health_check_path_or_none,
        timeout=config.apprunner_health_check_timeout,
        interval=config.apprunner_health_check_interval,
        unhealthy_threshold=config.apprunner_health_check_unhealthy_threshold,
        healthy_threshold=config.apprunner_health_check_healthy_threshold,
    )


class AppRunnerServiceComponent(pulumi.ComponentResource):
    """
    App Runner service running the application image.

    Egress goes through the VPC connector so the service can reach RDS.
    """

    def __init__(
        self,
        name: str,
        config: EnvironmentConfig,
        image_identifier: pulumi.Input[str],
        ecr_access_role_arn: pulumi.Input[str],
        instance_role_arn: pulumi.Input[str],
        vpc_connector_arn: pulumi.Input[str],
        database_host: pulumi.Input[str],
        database_port: pulumi.Input[int],
        database_name: pulumi.Input[str],
        database_secret_arn: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:compute:AppRunnerService", name, None, opts)

        self.service = aws.apprunner.Service(
            f"{name}-apprunner-service",
            service_name=config.apprunner_service_name,
            source_configuration=aws.apprunner.ServiceSourceConfigurationArgs(
                authentication_configuration=aws.apprunner.ServiceSourceConfigurationAuthenticationConfigurationArgs(
                    access_role_arn=ecr_access_role_arn,
                ),
                auto_deployments_enabled=config.apprunner_auto_deployments_enabled,
                image_repository=aws.apprunner.ServiceSourceConfigurationImageRepositoryArgs(
                    image_identifier=image_identifier,
                    image_repository_type="ECR",
                    image_configuration=aws.apprunner.ServiceSourceConfigurationImageRepositoryImageConfigurationArgs(
                        port=str(config.apprunner_port),
                        runtime_environment_variables={
                            "DB_HOST": database_host,
                            "DB_PORT": pulumi.Output.from_input(database_port).apply(str),
                            "DB_DATABASE": database_name,
                        },
                        runtime_environment_secrets={
                            "DB_CREDENTIALS": database_secret_arn,
                        },
                    ),
                ),
            ),
            instance_configuration=aws.apprunner.ServiceInstanceConfigurationArgs(
                cpu=config.apprunner_cpu,
                memory=config.apprunner_memory,
                instance_role_arn=instance_role_arn,
            ),
            health_check_configuration=health_check_configuration(config),
            network_configuration=aws.apprunner.ServiceNetworkConfigurationArgs(
                egress_configuration=aws.apprunner.ServiceNetworkConfigurationEgressConfigurationArgs(
                    egress_type="VPC",
                    vpc_connector_arn=vpc_connector_arn,
                ),
            ),
            tags=create_tags(config, config.apprunner_service_name),
            opts=pulumi.ResourceOptions(parent=self),
        )

        # service_url is a bare host name
        self.service_url = pulumi.Output.concat("https://", self.service.service_url)

        self.register_outputs({
            "service_arn": self.service.arn,
            "service_url": self.service_url,
        })

    def get_outputs(self) -> AppRunnerServiceOutputs:
        """Get App Runner service output values."""
        return AppRunnerServiceOutputs(
            service_arn=self.service.arn,
            service_url=self.service_url,
        )
