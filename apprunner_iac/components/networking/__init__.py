"""
Networking components for VPC infrastructure.

Components:
- VpcComponent: VPC with public/private subnets, NAT gateway, route tables
- SecurityGroupsComponent: Security groups for the database and VPC connector
"""

from apprunner_iac.components.networking.vpc import VpcComponent, VpcOutputs
from apprunner_iac.components.networking.security_groups import SecurityGroupsComponent, SecurityGroupOutputs

__all__ = [
    "VpcComponent",
    "VpcOutputs",
    "SecurityGroupsComponent",
    "SecurityGroupOutputs",
]
