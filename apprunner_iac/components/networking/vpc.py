"""
VPC Component Resource for Network Infrastructure.

Steps & Architecture:
1. VPC (default 10.0.0.0/16) with DNS support and hostnames.
2. Internet Gateway for the public tier.
3. Subnets, one pair per availability zone (up to vpc_max_azs):
   - Public (10.0.0.0/24, 10.0.1.0/24, ...): NAT gateway lives here.
   - Private (next blocks after the public ones): RDS and the App Runner VPC connector.
4. NAT Gateway in the first public subnet, so private subnets get outbound access
   (App Runner egress through the VPC connector needs it to reach the internet).
5. Route Tables:
   - Public RT: 0.0.0.0/0 -> IGW.
   - Private RT: 0.0.0.0/0 -> NAT.
"""

from dataclasses import dataclass

import pulumi
import pulumi_aws as aws

from apprunner_iac.configs.base import EnvironmentConfig
from apprunner_iac.utils.cidr import plan_subnet_cidrs
from apprunner_iac.utils.tags import create_tags


@dataclass
class VpcOutputs:
    """Output values from VPC component."""
    vpc_id: pulumi.Output[str]
    vpc_cidr_block: pulumi.Output[str]
    public_subnet_ids: list[pulumi.Output[str]]
    private_subnet_ids: list[pulumi.Output[str]]
    nat_gateway_id: pulumi.Output[str]


class VpcComponent(pulumi.ComponentResource):
    """
    VPC component with public/private subnets and a NAT gateway.

    Spreads one public and one private subnet over each availability zone
    the region offers, capped at config.vpc_max_azs.
    """

    def __init__(
        self,
        name: str,
        config: EnvironmentConfig,
        opts: pulumi.ResourceOptions | None = None,
    ) -> None:
        super().__init__("custom:networking:Vpc", name, None, opts)
        self.config = config

        child_opts = pulumi.ResourceOptions(parent=self)

        zones = aws.get_availability_zones(
            state="available",
            opts=pulumi.InvokeOptions(parent=self),
        ).names[: config.vpc_max_azs]

        plan = plan_subnet_cidrs(
            config.vpc_cidr_block,
            config.vpc_subnet_cidr_mask,
            len(zones),
        )

        self.vpc = aws.ec2.Vpc(
            f"{name}-vpc",
            cidr_block=config.vpc_cidr_block,
            enable_dns_hostnames=True,
            enable_dns_support=True,
            tags=create_tags(config, f"{name}-vpc"),
            opts=child_opts,
        )

        self.igw = aws.ec2.InternetGateway(
            f"{name}-igw",
            vpc_id=self.vpc.id,
            tags=create_tags(config, f"{name}-igw"),
            opts=child_opts,
        )

        self.public_subnets = [
            aws.ec2.Subnet(
                f"{name}-public-subnet-{index}",
                vpc_id=self.vpc.id,
                cidr_block=cidr,
                availability_zone=zone,
                map_public_ip_on_launch=True,
                tags=create_tags(config, f"{name}-public-subnet-{index}", Tier="public"),
                opts=child_opts,
            )
            for index, (zone, cidr) in enumerate(zip(zones, plan.public))
        ]

        self.private_subnets = [
            aws.ec2.Subnet(
                f"{name}-private-subnet-{index}",
                vpc_id=self.vpc.id,
                cidr_block=cidr,
                availability_zone=zone,
                tags=create_tags(config, f"{name}-private-subnet-{index}", Tier="private"),
                opts=child_opts,
            )
            for index, (zone, cidr) in enumerate(zip(zones, plan.private))
        ]

        self._create_nat_gateway(name, child_opts)
        self._create_route_tables(name, child_opts)

        self.register_outputs({
            "vpc_id": self.vpc.id,
            "vpc_cidr_block": self.vpc.cidr_block,
            "public_subnet_ids": [subnet.id for subnet in self.public_subnets],
            "private_subnet_ids": [subnet.id for subnet in self.private_subnets],
            "nat_gateway_id": self.nat_gateway.id,
        })

    def _create_nat_gateway(
        self,
        name: str,
        opts: pulumi.ResourceOptions,
    ) -> None:
        """Create a single NAT gateway in the first public subnet."""
        eip = aws.ec2.Eip(
            f"{name}-nat-eip",
            domain="vpc",
            tags=create_tags(self.config, f"{name}-nat-eip"),
            opts=opts,
        )

        self.nat_gateway = aws.ec2.NatGateway(
            f"{name}-nat",
            allocation_id=eip.id,
            subnet_id=self.public_subnets[0].id,
            tags=create_tags(self.config, f"{name}-nat"),
            opts=pulumi.ResourceOptions.merge(
                opts,
                pulumi.ResourceOptions(depends_on=[self.igw]),
            ),
        )

    def _create_route_tables(
        self,
        name: str,
        opts: pulumi.ResourceOptions,
    ) -> None:
        """Create route tables for public and private subnets."""
        public_rt = aws.ec2.RouteTable(
            f"{name}-public-rt",
            vpc_id=self.vpc.id,
            routes=[
                aws.ec2.RouteTableRouteArgs(
                    cidr_block="0.0.0.0/0",
                    gateway_id=self.igw.id,
                ),
            ],
            tags=create_tags(self.config, f"{name}-public-rt"),
            opts=opts,
        )

        private_rt = aws.ec2.RouteTable(
            f"{name}-private-rt",
            vpc_id=self.vpc.id,
            routes=[
                aws.ec2.RouteTableRouteArgs(
                    cidr_block="0.0.0.0/0",
                    nat_gateway_id=self.nat_gateway.id,
                ),
            ],
            tags=create_tags(self.config, f"{name}-private-rt"),
            opts=opts,
        )

        for tier, subnets, route_table in [
            ("public", self.public_subnets, public_rt),
            ("private", self.private_subnets, private_rt),
        ]:
            for index, subnet in enumerate(subnets):
                aws.ec2.RouteTableAssociation(
                    f"{name}-{tier}-rt-assoc-{index}",
                    subnet_id=subnet.id,
                    route_table_id=route_table.id,
                    opts=opts,
                )

    def get_outputs(self) -> VpcOutputs:
        """Get VPC output values."""
        return VpcOutputs(
            vpc_id=self.vpc.id,
            vpc_cidr_block=self.vpc.cidr_block,
            public_subnet_ids=[subnet.id for subnet in self.public_subnets],
            private_subnet_ids=[subnet.id for subnet in self.private_subnets],
            nat_gateway_id=self.nat_gateway.id,
        )
