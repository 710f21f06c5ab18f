"""
Pulumi infrastructure-as-code for a container app on AWS App Runner.

This package defines AWS infrastructure including:
- VPC with public and private subnets across availability zones
- RDS MySQL in the private subnets
- ECR repository for the application image
- App Runner service reaching the database through a VPC connector
"""
