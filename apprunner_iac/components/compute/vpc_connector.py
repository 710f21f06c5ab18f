"""
App Runner VPC Connector Component.

App Runner services run outside the customer VPC. A VPC connector places
ENIs in the private subnets so the service's outbound traffic (database
connections included) enters the VPC, leaving to the internet via the NAT.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from apprunner_iac.configs.base import EnvironmentConfig
from apprunner_iac.utils.naming import ResourceNamer
from apprunner_iac.utils.tags import create_tags


@dataclass
class VpcConnectorOutputs:
    """Output values from VPC connector component."""
    vpc_connector_arn: pulumi.Output[str]


class VpcConnectorComponent(pulumi.ComponentResource):
    """VPC connector over the private subnets."""

    def __init__(
        self,
        name: str,
        config: EnvironmentConfig,
        namer: ResourceNamer,
        subnet_ids: list[pulumi.Input[str]],
        security_group_id: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:compute:VpcConnector", name, None, opts)

        connector_name = namer.apprunner_name("connector")

        self.connector = aws.apprunner.VpcConnector(
            f"{name}-vpc-connector",
            vpc_connector_name=connector_name,
            subnets=subnet_ids,
            security_groups=[security_group_id],
            tags=create_tags(config, connector_name),
            opts=pulumi.ResourceOptions(parent=self),
        )

        self.register_outputs({
            "vpc_connector_arn": self.connector.arn,
        })

    def get_outputs(self) -> VpcConnectorOutputs:
        """Get VPC connector output values."""
        return VpcConnectorOutputs(vpc_connector_arn=self.connector.arn)
