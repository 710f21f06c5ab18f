"""
Utility functions for Pulumi infrastructure.

Provides naming conventions, tag factories, and subnet planning.
"""

from apprunner_iac.utils.naming import ResourceNamer
from apprunner_iac.utils.tags import create_tags
from apprunner_iac.utils.cidr import SubnetPlan, plan_subnet_cidrs

__all__ = [
    "ResourceNamer",
    "create_tags",
    "SubnetPlan",
    "plan_subnet_cidrs",
]
