"""
This module defines the data structures for the stack configuration file and
the loader that reads it.
"""

import yaml
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .errors import ConfigurationError

REQUIRED_KEYS = ("team", "service", "environment", "region")
DEFAULT_ASSUME_ROLE_SERVICE = "ecs-tasks.amazonaws.com"


@dataclass
class AWSResource:
    name: str
    type: str
    args: Dict[str, Any] = field(default_factory=dict)
    custom_name: Optional[str] = None


@dataclass
class RoleConfig:
    name: str
    args: Dict[str, Any] = field(default_factory=dict)
    assume_role_policy: Any = None
    service: str = DEFAULT_ASSUME_ROLE_SERVICE
    custom_name: Optional[str] = None


@dataclass
class ScalingPolicyConfig:
    name: str
    group: str
    kind: str
    args: Dict[str, Any] = field(default_factory=dict)
    custom_name: Optional[str] = None


@dataclass
class Config:
    team: str
    service: str
    environment: str
    region: str
    tags: Dict[str, str] = field(default_factory=dict)
    aws_resources: List[AWSResource] = field(default_factory=list)
    roles: List[RoleConfig] = field(default_factory=list)
    scaling_policies: List[ScalingPolicyConfig] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Config":
        missing = [key for key in REQUIRED_KEYS if key not in data]
        if missing:
            raise ConfigurationError(f"Missing required configuration key: {missing[0]}")
        try:
            return cls(
                team=data["team"],
                service=data["service"],
                environment=data["environment"],
                region=data["region"],
                tags=dict(data.get("tags") or {}),
                aws_resources=[AWSResource(**entry) for entry in data.get("aws_resources") or []],
                roles=[RoleConfig(**entry) for entry in data.get("roles") or []],
                scaling_policies=[ScalingPolicyConfig(**entry) for entry in data.get("scaling_policies") or []],
            )
        except TypeError as e:
            raise ConfigurationError(f"Invalid configuration entry: {e}") from e


def load_config(file_path: str) -> Dict[str, Any]:
    """Load and validate YAML configuration from the given file path."""
    with open(file_path, "r") as file:
        config_data = yaml.safe_load(file)

    if not isinstance(config_data, dict):
        raise ConfigurationError(f"Configuration file '{file_path}' must contain a mapping")

    # Ensure required keys exist
    for key in REQUIRED_KEYS:
        if key not in config_data:
            raise ConfigurationError(f"Missing required configuration key: {key}")

    return config_data
