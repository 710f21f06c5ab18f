"""
ECR Repository Component for the application container image.

Integration Flow:
  1. Build the image: docker build -t <repo>:<tag> .
  2. Authenticate: aws ecr get-login-password | docker login <ECR_URL>
  3. Push: docker push <ECR_URL>:<tag>
  4. App Runner pulls <ECR_URL>:<tag> with the ECR access role and, with
     auto deployments enabled, redeploys on every push to that tag.

Key Features:
- scan_on_push (ECR_SCAN_IMAGE_ON_PUSH): images scanned for CVEs on upload.
- Lifecycle Policy: keeps the newest ECR_MAX_IMAGE_COUNT images.
- Encryption: images encrypted at rest (AES256).
- Tag mutability: MUTABLE so the deployed tag can be overwritten.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from apprunner_iac.configs.base import EnvironmentConfig
from apprunner_iac.utils.tags import create_tags


@dataclass
class EcrRepositoryOutputs:
    """Output values from ECR repository component."""
    repository_url: pulumi.Output[str]
    repository_arn: pulumi.Output[str]
    repository_name: pulumi.Output[str]
    image_identifier: pulumi.Output[str]


def lifecycle_policy(max_image_count: int) -> dict:
    """Build a lifecycle policy that expires all but the newest images."""
    return {
        "rules": [{
            "rulePriority": 1,
            "description": f"Keep last {max_image_count} images",
            "selection": {
                "tagStatus": "any",
                "countType": "imageCountMoreThan",
                "countNumber": max_image_count,
            },
            "action": {
                "type": "expire",
            },
        }],
    }


class EcrRepositoryComponent(pulumi.ComponentResource):
    """
    Private ECR repository the App Runner service deploys from.
    """

    def __init__(
        self,
        name: str,
        config: EnvironmentConfig,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:storage:EcrRepository", name, None, opts)

        child_opts = pulumi.ResourceOptions(parent=self)
        self.image_tag = config.ecr_image_tag

        self.repository = aws.ecr.Repository(
            f"{name}-ecr-repo",
            name=config.ecr_repository_name,
            image_scanning_configuration=aws.ecr.RepositoryImageScanningConfigurationArgs(
                scan_on_push=config.ecr_scan_image_on_push,
            ),
            image_tag_mutability="MUTABLE",
            encryption_configurations=[
                aws.ecr.RepositoryEncryptionConfigurationArgs(
                    encryption_type="AES256",
                ),
            ],
            force_delete=not config.is_production,
            tags=create_tags(config, config.ecr_repository_name),
            opts=child_opts,
        )

        aws.ecr.LifecyclePolicy(
            f"{name}-ecr-lifecycle",
            repository=self.repository.name,
            policy=pulumi.Output.json_dumps(lifecycle_policy(config.ecr_max_image_count)),
            opts=child_opts,
        )

        self.image_identifier = pulumi.Output.concat(
            self.repository.repository_url, ":", self.image_tag
        )

        self.register_outputs({
            "repository_url": self.repository.repository_url,
            "repository_arn": self.repository.arn,
            "repository_name": self.repository.name,
            "image_identifier": self.image_identifier,
        })

    def get_outputs(self) -> EcrRepositoryOutputs:
        """Get ECR repository output values."""
        return EcrRepositoryOutputs(
            repository_url=self.repository.repository_url,
            repository_arn=self.repository.arn,
            repository_name=self.repository.name,
            image_identifier=self.image_identifier,
        )
