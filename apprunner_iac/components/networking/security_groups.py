"""
Security Groups Component for Network Access Control.

Access Patterns:
- Database: MySQL (3306) from anywhere inside the VPC CIDR. The App Runner
  VPC connector ENIs sit in the private subnets, so this covers the service.
- VPC Connector: all traffic from inside the VPC CIDR.
- Both: all outbound traffic.

Security groups are stateful: allowed inbound requests get their replies back
without a matching egress rule.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from apprunner_iac.configs.base import EnvironmentConfig
from apprunner_iac.configs.constants import PORTS
from apprunner_iac.utils.tags import create_tags


@dataclass
class SecurityGroupOutputs:
    """Output values from security groups component."""
    database_sg_id: pulumi.Output[str]
    connector_sg_id: pulumi.Output[str]


class SecurityGroupsComponent(pulumi.ComponentResource):
    """
    Security groups for the database and the App Runner VPC connector.

    Ingress is limited to the VPC CIDR block; nothing is reachable from
    outside the VPC.
    """

    def __init__(
        self,
        name: str,
        config: EnvironmentConfig,
        vpc_id: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:networking:SecurityGroups", name, None, opts)
        self.config = config

        child_opts = pulumi.ResourceOptions(parent=self)

        self.database_sg = aws.ec2.SecurityGroup(
            f"{name}-rds-sg",
            description="Ingress for MySQL Server",
            vpc_id=vpc_id,
            tags=create_tags(config, f"{name}-rds-sg"),
            opts=child_opts,
        )

        self.connector_sg = aws.ec2.SecurityGroup(
            f"{name}-vpc-connector-sg",
            description="Ingress for all traffic",
            vpc_id=vpc_id,
            tags=create_tags(config, f"{name}-vpc-connector-sg"),
            opts=child_opts,
        )

        self._create_rules(name, child_opts)

        self.register_outputs({
            "database_sg_id": self.database_sg.id,
            "connector_sg_id": self.connector_sg.id,
        })

    def _create_rules(
        self,
        name: str,
        opts: pulumi.ResourceOptions,
    ) -> None:
        """Create security group rules."""
        vpc_cidr = self.config.vpc_cidr_block

        aws.vpc.SecurityGroupIngressRule(
            f"{name}-rds-ingress-mysql",
            security_group_id=self.database_sg.id,
            ip_protocol="tcp",
            from_port=PORTS["mysql"],
            to_port=PORTS["mysql"],
            cidr_ipv4=vpc_cidr,
            description="MySQL from VPC",
            opts=opts,
        )

        aws.vpc.SecurityGroupIngressRule(
            f"{name}-vpc-connector-ingress-all",
            security_group_id=self.connector_sg.id,
            ip_protocol="-1",
            cidr_ipv4=vpc_cidr,
            description="All traffic from VPC",
            opts=opts,
        )

        for sg_name, security_group in [
            ("rds", self.database_sg),
            ("vpc-connector", self.connector_sg),
        ]:
            aws.vpc.SecurityGroupEgressRule(
                f"{name}-{sg_name}-egress-all",
                security_group_id=security_group.id,
                ip_protocol="-1",
                cidr_ipv4="0.0.0.0/0",
                description="All outbound traffic",
                opts=opts,
            )

    def get_outputs(self) -> SecurityGroupOutputs:
        """Get security group output values."""
        return SecurityGroupOutputs(
            database_sg_id=self.database_sg.id,
            connector_sg_id=self.connector_sg.id,
        )
