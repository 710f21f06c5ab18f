"""
Infrastructure constants for the App Runner deployment.

Contains ports, service principals, IAM action lists and default tags.
"""

from typing import Final

# Port configurations
PORTS: Final[dict[str, int]] = {
    "http": 80,
    "mysql": 3306,
}

# Engine family for the RDS instance
RDS_ENGINE: Final[str] = "mysql"

# Service principals assumed by App Runner roles
APPRUNNER_BUILD_PRINCIPAL: Final[str] = "build.apprunner.amazonaws.com"
APPRUNNER_TASKS_PRINCIPAL: Final[str] = "tasks.apprunner.amazonaws.com"

# Actions App Runner needs to pull a private image
ECR_PULL_ACTIONS: Final[list[str]] = [
    "ecr:BatchCheckLayerAvailability",
    "ecr:GetDownloadUrlForLayer",
    "ecr:GetRepositoryPolicy",
    "ecr:DescribeRepositories",
    "ecr:ListImages",
    "ecr:DescribeImages",
    "ecr:BatchGetImage",
    "ecr:GetLifecyclePolicy",
    "ecr:GetLifecyclePolicyPreview",
    "ecr:ListTagsForResource",
    "ecr:DescribeImageScanFindings",
]

HEALTH_CHECK_PROTOCOLS: Final[tuple[str, ...]] = ("TCP", "HTTP")

# Default tags applied to all resources
DEFAULT_TAGS: Final[dict[str, str]] = {
    "ManagedBy": "pulumi",
}
