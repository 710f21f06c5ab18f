"""
IAM roles component for the App Runner service.

Creates:
- ECR access role, assumed by App Runner's build service to pull the image
- Instance role, assumed by the running tasks to read the database secret
"""

import json
from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from apprunner_iac.configs.base import EnvironmentConfig
from apprunner_iac.configs.constants import (
    APPRUNNER_BUILD_PRINCIPAL,
    APPRUNNER_TASKS_PRINCIPAL,
    ECR_PULL_ACTIONS,
)
from apprunner_iac.utils.tags import create_tags


@dataclass
class IamRoleOutputs:
    """Output values from IAM roles component."""
    ecr_access_role_arn: pulumi.Output[str]
    instance_role_arn: pulumi.Output[str]


def assume_role_policy(service: str) -> str:
    """Trust policy letting an AWS service principal assume a role."""
    return json.dumps({
        "Version": "2012-10-17",
        "Statement": [{
            "Effect": "Allow",
            "Principal": {"Service": service},
            "Action": "sts:AssumeRole",
        }],
    })


def ecr_access_policy(repository_arn: str) -> str:
    """Policy allowing App Runner to authenticate and pull from one repository."""
    return json.dumps({
        "Version": "2012-10-17",
        "Statement": [
            {
                "Effect": "Allow",
                "Action": ["ecr:GetAuthorizationToken"],
                "Resource": ["*"],
            },
            {
                "Effect": "Allow",
                "Action": ECR_PULL_ACTIONS,
                "Resource": [repository_arn],
            },
        ],
    })


def database_secret_policy(secret_arn: str, kms_key_id: str) -> str:
    """Policy allowing the running service to read and decrypt the database secret."""
    return json.dumps({
        "Version": "2012-10-17",
        "Statement": [
            {
                "Effect": "Allow",
                "Action": [
                    "secretsmanager:GetSecretValue",
                    "secretsmanager:DescribeSecret",
                ],
                "Resource": [secret_arn],
            },
            {
                "Effect": "Allow",
                "Action": ["kms:Decrypt"],
                "Resource": [kms_key_id],
            },
        ],
    })


class IamRolesComponent(pulumi.ComponentResource):
    """
    IAM roles for the App Runner service.

    Follows least-privilege principle with specific resource permissions.
    """

    def __init__(
        self,
        name: str,
        config: EnvironmentConfig,
        repository_arn: pulumi.Input[str],
        secret_arn: pulumi.Input[str],
        secret_kms_key_id: pulumi.Input[str],
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:security:IamRoles", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)

        self.ecr_access_role = aws.iam.Role(
            f"{name}-apprunner-ecr-role",
            description=f"{name}-apprunner-ecr-role",
            assume_role_policy=assume_role_policy(APPRUNNER_BUILD_PRINCIPAL),
            tags=create_tags(config, f"{name}-apprunner-ecr-role"),
            opts=child_opts,
        )

        aws.iam.RolePolicy(
            f"{name}-apprunner-ecr-policy",
            role=self.ecr_access_role.id,
            policy=pulumi.Output.from_input(repository_arn).apply(ecr_access_policy),
            opts=child_opts,
        )

        self.instance_role = aws.iam.Role(
            f"{name}-apprunner-instance-role",
            description=f"{name}-apprunner-instance-role",
            assume_role_policy=assume_role_policy(APPRUNNER_TASKS_PRINCIPAL),
            tags=create_tags(config, f"{name}-apprunner-instance-role"),
            opts=child_opts,
        )

        aws.iam.RolePolicy(
            f"{name}-apprunner-instance-policy",
            role=self.instance_role.id,
            policy=pulumi.Output.all(secret_arn, secret_kms_key_id).apply(
                lambda args: database_secret_policy(*args)
            ),
            opts=child_opts,
        )

        self.register_outputs({
            "ecr_access_role_arn": self.ecr_access_role.arn,
            "instance_role_arn": self.instance_role.arn,
        })

    def get_outputs(self) -> IamRoleOutputs:
        """Get IAM role output values."""
        return IamRoleOutputs(
            ecr_access_role_arn=self.ecr_access_role.arn,
            instance_role_arn=self.instance_role.arn,
        )
