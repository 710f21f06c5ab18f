"""
Security components for IAM.

Components:
- IamRolesComponent: ECR access and instance roles for App Runner
"""

from apprunner_iac.components.security.iam_roles import IamRolesComponent, IamRoleOutputs

__all__ = [
    "IamRolesComponent",
    "IamRoleOutputs",
]
