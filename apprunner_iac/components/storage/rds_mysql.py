"""
RDS MySQL Component for Relational Database.

Access Control - Who Can Connect:
1. App Runner service (through its VPC connector in the private subnets) → Port 3306 ✅
2. Anything else inside the VPC CIDR → Port 3306 ✅
3. Internet → DENIED ❌ (private subnets, not publicly accessible)

Credentials: manage_master_user_password=True means AWS generates the password
and stores it in Secrets Manager. The App Runner instance role is granted read
access to that secret and decrypt on its KMS key.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from apprunner_iac.configs.base import EnvironmentConfig
from apprunner_iac.configs.constants import RDS_ENGINE
from apprunner_iac.utils.tags import create_tags


@dataclass
class RdsOutputs:
    """Output values from RDS component."""
    address: pulumi.Output[str]
    port: pulumi.Output[int]
    database_name: pulumi.Output[str]
    secret_arn: pulumi.Output[str]
    secret_kms_key_id: pulumi.Output[str]


class RdsMysqlComponent(pulumi.ComponentResource):
    """
    RDS MySQL database for the application.

    Storage is encrypted, upgrades are manual and the instance is destroyed
    together with the stack outside production.
    """

    def __init__(
        self,
        name: str,
        config: EnvironmentConfig,
        subnet_ids: list[pulumi.Input[str]],
        security_group_id: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:storage:RdsMysql", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)
        self.database_name = config.rds_database_name

        self.subnet_group = aws.rds.SubnetGroup(
            f"{name}-subnet-group",
            subnet_ids=subnet_ids,
            tags=create_tags(config, f"{name}-subnet-group"),
            opts=child_opts,
        )

        self.instance = aws.rds.Instance(
            f"{name}-mysql-rds",
            engine=RDS_ENGINE,
            engine_version=config.rds_engine_version,
            instance_class=config.rds_instance_class,
            allocated_storage=config.rds_allocated_storage,
            storage_type="gp3",
            storage_encrypted=True,
            db_name=config.rds_database_name,
            username=config.rds_username,
            manage_master_user_password=True,
            db_subnet_group_name=self.subnet_group.name,
            vpc_security_group_ids=[security_group_id],
            publicly_accessible=False,
            multi_az=config.rds_multi_az,
            auto_minor_version_upgrade=False,
            allow_major_version_upgrade=False,
            deletion_protection=config.rds_deletion_protection,
            skip_final_snapshot=not config.is_production,
            final_snapshot_identifier=f"{name}-final-snapshot" if config.is_production else None,
            backup_retention_period=config.rds_backup_retention_days,
            tags=create_tags(config, f"{name}-mysql-rds"),
            opts=child_opts,
        )

        master_secret = self.instance.master_user_secrets.apply(lambda secrets: secrets[0])
        self.secret_arn = master_secret.apply(lambda secret: secret.secret_arn)
        self.secret_kms_key_id = master_secret.apply(lambda secret: secret.kms_key_id)

        self.register_outputs({
            "address": self.instance.address,
            "port": self.instance.port,
            "database_name": self.database_name,
            "secret_arn": self.secret_arn,
        })

    def get_outputs(self) -> RdsOutputs:
        """Get RDS output values."""
        return RdsOutputs(
            address=self.instance.address,
            port=self.instance.port,
            database_name=pulumi.Output.from_input(self.database_name),
            secret_arn=self.secret_arn,
            secret_kms_key_id=self.secret_kms_key_id,
        )
