"""
Subnet CIDR planning for the VPC.

Carves equally sized subnets out of the VPC block in address order:
all public subnets first, then all private subnets.
"""

import ipaddress
from dataclasses import dataclass


@dataclass(frozen=True)
class SubnetPlan:
    """CIDR blocks per tier, one entry per availability zone."""
    public: list[str]
    private: list[str]


def plan_subnet_cidrs(vpc_cidr: str, cidr_mask: int, az_count: int) -> SubnetPlan:
    """
    Plan public and private subnet CIDRs.

    Args:
        vpc_cidr: VPC CIDR block (e.g., '10.0.0.0/16')
        cidr_mask: Prefix length of every subnet (e.g., 24)
        az_count: Number of availability zones

    Returns:
        SubnetPlan with az_count public and az_count private blocks

    Raises:
        ValueError: If the CIDR is invalid or too small for the subnets
    """
    if az_count < 1:
        raise ValueError(f"az_count must be at least 1, got {az_count}")

    network = ipaddress.ip_network(vpc_cidr)
    if cidr_mask < network.prefixlen or cidr_mask > network.max_prefixlen:
        raise ValueError(
            f"subnet mask /{cidr_mask} does not fit inside {network}"
        )

    capacity = 2 ** (cidr_mask - network.prefixlen)
    needed = 2 * az_count
    if capacity < needed:
        raise ValueError(
            f"{network} holds {capacity} /{cidr_mask} subnets, {needed} required"
        )

    blocks = network.subnets(new_prefix=cidr_mask)
    public = [str(next(blocks)) for _ in range(az_count)]
    private = [str(next(blocks)) for _ in range(az_count)]
    return SubnetPlan(public=public, private=private)
