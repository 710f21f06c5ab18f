"""
Storage components for the database and container images.

Components:
- RdsMysqlComponent: RDS MySQL database
- EcrRepositoryComponent: ECR repository for the application image
"""

from apprunner_iac.components.storage.rds_mysql import RdsMysqlComponent, RdsOutputs
from apprunner_iac.components.storage.ecr_repository import EcrRepositoryComponent, EcrRepositoryOutputs

__all__ = [
    "RdsMysqlComponent",
    "RdsOutputs",
    "EcrRepositoryComponent",
    "EcrRepositoryOutputs",
]
