"""
Compute components for App Runner.

Components:
- VpcConnectorComponent: App Runner VPC connector into the private subnets
- AppRunnerServiceComponent: App Runner service running the ECR image
"""

from apprunner_iac.components.compute.vpc_connector import VpcConnectorComponent, VpcConnectorOutputs
from apprunner_iac.components.compute.apprunner_service import AppRunnerServiceComponent, AppRunnerServiceOutputs

__all__ = [
    "VpcConnectorComponent",
    "VpcConnectorOutputs",
    "AppRunnerServiceComponent",
    "AppRunnerServiceOutputs",
]
