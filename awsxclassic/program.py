import inspect
from typing import Any, Dict, Type

import pulumi
import pulumi_aws as aws

from ._utilities import to_snake_case
from .autoscaling import (
    CustomMetricTargetTrackingPolicyArgs,
    PredefinedMetricTargetTrackingPolicyArgs,
    SimplePolicyArgs,
    StepAdjustmentArgs,
    StepPolicyArgs,
    create_policy,
)
from .cloudwatch import Metric
from .config import Config
from .errors import ConfigurationError
from .iam import RoleWithPolicyArgs, create_role_with_policy, default_assume_role_policy

AWS_REGION_ABBREVIATIONS = {
    "us-east-1": "use1",
    "us-east-2": "use2",
    "us-west-1": "usw1",
    "us-west-2": "usw2",
    "af-south-1": "afs1",
    "ap-east-1": "ape1",
    "ap-south-1": "aps1",
    "ap-northeast-1": "apne1",
    "ap-northeast-2": "apne2",
    "ap-northeast-3": "apne3",
    "ap-southeast-1": "apse1",
    "ap-southeast-2": "apse2",
    "ca-central-1": "cac1",
    "eu-central-1": "euc1",
    "eu-west-1": "euw1",
    "eu-west-2": "euw2",
    "eu-west-3": "euw3",
    "eu-north-1": "eun1",
    "eu-south-1": "eus1",
    "me-south-1": "mes1",
    "sa-east-1": "sae1",
    "us-gov-east-1": "usge1",
    "us-gov-west-1": "usgw1",
    "cn-north-1": "cnn1",
    "cn-northwest-1": "cnnw1",
}

POLICY_KINDS: Dict[str, Type] = {
    "simple": SimplePolicyArgs,
    "step": StepPolicyArgs,
    "predefined_metric": PredefinedMetricTargetTrackingPolicyArgs,
    "custom_metric": CustomMetricTargetTrackingPolicyArgs,
}


def resolve_value(value: Any, resources: Dict[str, Any]) -> Any:
    """Replace ``ref:`` and ``secret:`` strings anywhere inside ``value``.

    ``ref:<resource>[.<attr>]`` reads an attribute (``id`` by default) of a
    resource created earlier; ``secret:<key>`` reads a secret from Pulumi config.
    """
    if isinstance(value, dict):
        return {k: resolve_value(v, resources) for k, v in value.items()}
    if isinstance(value, list):
        return [resolve_value(item, resources) for item in value]
    if not isinstance(value, str):
        return value
    if value.startswith("secret:"):
        return pulumi.Config().require_secret(value[len("secret:"):])
    if value.startswith("ref:"):
        ref_text = value[len("ref:"):]
        if "." in ref_text:
            ref_res, ref_attr = ref_text.split(".", 1)
        else:
            ref_res, ref_attr = ref_text, "id"
        if ref_res not in resources:
            raise ConfigurationError(f"Referenced resource '{ref_res}' not found.")
        attr_val = getattr(resources[ref_res], ref_attr, None)
        if attr_val is None:
            raise ConfigurationError(f"Attribute '{ref_attr}' not found on resource '{ref_res}'")
        return attr_val
    return value


def build_args(args_type: Type, values: Dict[str, Any]) -> Any:
    """Build ``args_type`` from a configuration mapping with camelCase or snake_case keys."""
    builder = args_type.builder()
    for key, value in values.items():
        builder.set(to_snake_case(key), value)
    return builder.build()


def _snake_keys(values: Dict[str, Any]) -> Dict[str, Any]:
    return {to_snake_case(k): v for k, v in values.items()}


class StackBuilder:
    """Creates the resources, roles and scaling policies a :class:`Config` describes.

    Entries are processed in file order within each section; ``aws_resources``
    first, then ``roles``, then ``scaling_policies``, so later entries can
    reference earlier ones by name.
    """

    def __init__(self, config: Config):
        self.config = config
        self.resources: Dict[str, Any] = {}

    def get_abbreviation(self, region: str) -> str:
        return AWS_REGION_ABBREVIATIONS.get(region.lower(), region.split("-")[0].lower())

    def generate_resource_name(self, base_name: str) -> str:
        team = (self.config.team or "team").strip().lower()
        service = (self.config.service or "svc").strip().lower()
        env = (self.config.environment or "dev").strip().lower()
        reg_abbr = self.get_abbreviation(self.config.region or "us-east-1")
        return f"{team}-{service}-{env}-{reg_abbr}-{base_name}".lower()

    def resolve_args(self, args: dict) -> dict:
        return {key: resolve_value(value, self.resources) for key, value in args.items()}

    def stack_tags(self, resource_type: str) -> Any:
        # Auto Scaling groups take a list of tag blocks instead of a map.
        if resource_type == "autoscaling.Group":
            return [aws.autoscaling.GroupTagArgs(key=k, value=v, propagate_at_launch=True)
                    for k, v in self.config.tags.items()]
        return dict(self.config.tags)

    def build(self):
        for resource_cfg in self.config.aws_resources:
            self._build_resource(resource_cfg)
        for role_cfg in self.config.roles:
            self._build_role(role_cfg)
        for policy_cfg in self.config.scaling_policies:
            self._build_scaling_policy(policy_cfg)

    def _pulumi_name(self, name: str, custom_name) -> str:
        return custom_name if custom_name else self.generate_resource_name(name)

    def _build_resource(self, resource_cfg):
        name = resource_cfg.name
        module_name, class_name = resource_cfg.type.rsplit(".", 1)
        module = getattr(aws, module_name, None)
        if not module:
            pulumi.log.warn(f"AWS module '{module_name}' not found. Skipping '{name}'.")
            return
        resource_class = getattr(module, class_name, None)
        if resource_class is None:
            pulumi.log.warn(f"Resource class '{class_name}' not found in module '{module_name}'. Skipping '{name}'.")
            return

        resolved_args = _snake_keys(self.resolve_args(resource_cfg.args))
        # __init__ is overloaded on generated resources; _internal_init lists the real arguments.
        init_sig = inspect.signature(getattr(resource_class, "_internal_init", resource_class.__init__))
        if "tags" in init_sig.parameters:
            if self.config.tags:
                resolved_args.setdefault("tags", self.stack_tags(resource_cfg.type))
        else:
            resolved_args.pop("tags", None)

        pulumi_name = self._pulumi_name(name, resource_cfg.custom_name)
        self.resources[name] = resource_class(pulumi_name, **resolved_args)
        pulumi.log.info(f"Created resource: {pulumi_name} ({resource_cfg.type})")

    def _build_role(self, role_cfg):
        values = _snake_keys(self.resolve_args(role_cfg.args))
        if self.config.tags:
            values.setdefault("tags", self.config.tags)
        args = build_args(RoleWithPolicyArgs, values)

        assume_role_policy = role_cfg.assume_role_policy
        if assume_role_policy is None:
            assume_role_policy = default_assume_role_policy(role_cfg.service)

        pulumi_name = self._pulumi_name(role_cfg.name, role_cfg.custom_name)
        created = create_role_with_policy(pulumi_name, assume_role_policy, args)
        self.resources[role_cfg.name] = created.role
        pulumi.log.info(
            f"Created role: {pulumi_name} with {len(created.policy_attachments)} policy attachment(s)")

    def _build_scaling_policy(self, policy_cfg):
        args_type = POLICY_KINDS.get(policy_cfg.kind)
        if args_type is None:
            raise ConfigurationError(
                f"Unknown scaling policy kind '{policy_cfg.kind}' for '{policy_cfg.name}'. "
                f"Expected one of: {', '.join(POLICY_KINDS)}")
        group = self.resources.get(policy_cfg.group)
        if group is None:
            raise ConfigurationError(
                f"Scaling policy '{policy_cfg.name}' references unknown group '{policy_cfg.group}'")

        values = _snake_keys(self.resolve_args(policy_cfg.args))
        if args_type is CustomMetricTargetTrackingPolicyArgs and isinstance(values.get("metric"), dict):
            values["metric"] = Metric(**_snake_keys(values["metric"]))
        if args_type is StepPolicyArgs and values.get("step_adjustments"):
            values["step_adjustments"] = [
                build_args(StepAdjustmentArgs, step) if isinstance(step, dict) else step
                for step in values["step_adjustments"]
            ]
        args = build_args(args_type, values)

        pulumi_name = self._pulumi_name(policy_cfg.name, policy_cfg.custom_name)
        self.resources[policy_cfg.name] = create_policy(pulumi_name, group, args)
        pulumi.log.info(f"Created {policy_cfg.kind} scaling policy: {pulumi_name}")
