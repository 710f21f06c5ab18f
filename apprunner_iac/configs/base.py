"""
Base configuration dataclass for environment settings.

Provides the type-safe configuration structure built from resolved
environment variables. Field names double as accessor names: the
``rds_multi_az`` field is read from ``RDS_MULTI_AZ``.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EnvironmentConfig:
    """
    Environment-specific configuration for infrastructure deployment.

    Attributes:
        project_name: Prefix for resource names and the Project tag
        environment: Deployment environment (dev, staging, prod)
        account_id: AWS account the stack may deploy into
        region: AWS region for the provider
        vpc_cidr_block: CIDR block of the VPC
        vpc_max_azs: Number of availability zones to spread subnets over
        vpc_subnet_cidr_mask: Prefix length of each subnet
        rds_database_name: Initial database created on the instance
        rds_username: Master username
        rds_instance_class: RDS instance class
        rds_engine_version: MySQL engine version
        rds_allocated_storage: RDS storage in GB
        rds_multi_az: Enable multi-AZ deployment for RDS
        rds_backup_retention_days: Days automated backups are kept
        rds_deletion_protection: Enable deletion protection for the database
        ecr_repository_name: Name of the image repository
        ecr_scan_image_on_push: Scan images for vulnerabilities on push
        ecr_image_tag: Image tag App Runner deploys
        ecr_max_image_count: Images kept by the lifecycle policy
        apprunner_enabled: Deploy the App Runner service and its roles
        apprunner_service_name: Name of the App Runner service
        apprunner_port: Container port App Runner routes to
        apprunner_cpu: Instance CPU, e.g. "1 vCPU"
        apprunner_memory: Instance memory, e.g. "2 GB"
        apprunner_auto_deployments_enabled: Redeploy when a new image is pushed
        apprunner_health_check_protocol: TCP or HTTP
        apprunner_health_check_path: Path probed by HTTP health checks
        apprunner_health_check_timeout: Seconds before a probe fails
        apprunner_health_check_interval: Seconds between probes
        apprunner_health_check_unhealthy_threshold: Failures before unhealthy
        apprunner_health_check_healthy_threshold: Successes before healthy
    """
    project_name: str = "cdk-apprunner"
    environment: str = "dev"
    account_id: str | None = None
    region: str | None = None

    vpc_cidr_block: str = "10.0.0.0/16"
    vpc_max_azs: int = 3
    vpc_subnet_cidr_mask: int = 24

    rds_database_name: str = "l_12_apprunner"
    rds_username: str = "cdkapprunner"
    rds_instance_class: str = "db.t3.micro"
    rds_engine_version: str = "8.0"
    rds_allocated_storage: int = 20
    rds_multi_az: bool = False
    rds_backup_retention_days: int = 5
    rds_deletion_protection: bool = False

    ecr_repository_name: str = "laravel12-apprunner"
    ecr_scan_image_on_push: bool = True
    ecr_image_tag: str = "latest"
    ecr_max_image_count: int = 5

    apprunner_enabled: bool = True
    apprunner_service_name: str = "cdk-apprunner"
    apprunner_port: int = 80
    apprunner_cpu: str = "1 vCPU"
    apprunner_memory: str = "2 GB"
    apprunner_auto_deployments_enabled: bool = True
    apprunner_health_check_protocol: str = "TCP"
    apprunner_health_check_path: str = "/"
    apprunner_health_check_timeout: int = 3
    apprunner_health_check_interval: int = 5
    apprunner_health_check_unhealthy_threshold: int = 3
    apprunner_health_check_healthy_threshold: int = 1

    @property
    def is_production(self) -> bool:
        """Check if this is a production environment."""
        return self.environment == "prod"

    @property
    def health_check_path_or_none(self) -> str | None:
        """Health check path, only meaningful for HTTP probes."""
        if self.apprunner_health_check_protocol == "HTTP":
            return self.apprunner_health_check_path
        return None

    def get_tags(self) -> dict[str, str]:
        """Get environment-specific tags."""
        return {
            "Project": self.project_name,
            "Environment": self.environment,
        }
