"""
Pulumi component resources for the App Runner infrastructure.

Each submodule provides reusable ComponentResource classes:
- networking: VPC, subnets, NAT gateway, security groups
- storage: RDS MySQL, ECR repository
- security: IAM roles for App Runner
- compute: App Runner VPC connector and service
"""
