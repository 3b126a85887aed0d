import hashlib
import warnings
from dataclasses import dataclass, field
from typing import Any, List, Mapping, Optional, Sequence, Union

import pulumi
import pulumi_aws as aws

from .. import _utilities
from .._builder import ArgsBuilder, args_to_dict

__all__ = [
    'RoleWithPolicyArgs',
    'RoleWithPolicyArgsBuilder',
    'RoleWithPolicy',
    'create_role_with_policy',
    'default_assume_role_policy',
]

INLINE_POLICIES_DEPRECATION = (
    "The inline_policy argument is deprecated. Use the aws.iam.RolePolicy resource instead. "
    "If Terraform should exclusively manage all inline policy associations (the current behavior "
    "of this argument), use the aws.iam.RolePoliciesExclusive resource as well."
)

# RoleWithPolicyArgs fields forwarded to aws.iam.Role; policy_arns become attachments.
_ROLE_FIELDS = (
    "description",
    "force_detach_policies",
    "inline_policies",
    "managed_policy_arns",
    "max_session_duration",
    "name",
    "name_prefix",
    "path",
    "permissions_boundary",
    "tags",
)


@pulumi.input_type
class RoleWithPolicyArgs:
    def __init__(__self__, *,
                 description: Optional[pulumi.Input[str]] = None,
                 force_detach_policies: Optional[pulumi.Input[bool]] = None,
                 inline_policies: Optional[pulumi.Input[Sequence[pulumi.Input['aws.iam.RoleInlinePolicyArgs']]]] = None,
                 managed_policy_arns: Optional[pulumi.Input[Sequence[pulumi.Input[str]]]] = None,
                 max_session_duration: Optional[pulumi.Input[int]] = None,
                 name: Optional[pulumi.Input[str]] = None,
                 name_prefix: Optional[pulumi.Input[str]] = None,
                 path: Optional[pulumi.Input[str]] = None,
                 permissions_boundary: Optional[pulumi.Input[str]] = None,
                 policy_arns: Optional[Sequence[str]] = None,
                 tags: Optional[pulumi.Input[Mapping[str, pulumi.Input[str]]]] = None):
        """
        The set of arguments for constructing a Role resource and Policy attachments.
        :param pulumi.Input[str] description: Description of the role.
        :param pulumi.Input[bool] force_detach_policies: Whether to force detaching any policies the role has before destroying it. Defaults to `false`.
        :param pulumi.Input[Sequence[pulumi.Input['aws.iam.RoleInlinePolicyArgs']]] inline_policies: Configuration block defining an exclusive set of IAM inline policies associated with the IAM role.
        :param pulumi.Input[Sequence[pulumi.Input[str]]] managed_policy_arns: Set of exclusive IAM managed policy ARNs to attach to the IAM role. If this attribute is not configured, Pulumi will ignore policy attachments to this resource.
        :param pulumi.Input[int] max_session_duration: Maximum session duration (in seconds) that you want to set for the specified role. Can have a value from 1 hour to 12 hours.
        :param pulumi.Input[str] name: Friendly name of the role. If omitted, Pulumi will assign a random, unique name. Conflicts with `name_prefix`.
        :param pulumi.Input[str] name_prefix: Creates a unique friendly name beginning with the specified prefix. Conflicts with `name`.
        :param pulumi.Input[str] path: Path to the role.
        :param pulumi.Input[str] permissions_boundary: ARN of the policy that is used to set the permissions boundary for the role.
        :param Sequence[str] policy_arns: ARNs of the policies to attach to the created role.
        :param pulumi.Input[Mapping[str, pulumi.Input[str]]] tags: Key-value mapping of tags for the IAM role.
        """
        if description is not None:
            pulumi.set(__self__, "description", description)
        if force_detach_policies is not None:
            pulumi.set(__self__, "force_detach_policies", force_detach_policies)
        if inline_policies is not None:
            warnings.warn(INLINE_POLICIES_DEPRECATION, DeprecationWarning)
            pulumi.log.warn(f"inline_policies is deprecated: {INLINE_POLICIES_DEPRECATION}")
            pulumi.set(__self__, "inline_policies", inline_policies)
        if managed_policy_arns is not None:
            pulumi.set(__self__, "managed_policy_arns", managed_policy_arns)
        if max_session_duration is not None:
            pulumi.set(__self__, "max_session_duration", max_session_duration)
        if name is not None:
            pulumi.set(__self__, "name", name)
        if name_prefix is not None:
            pulumi.set(__self__, "name_prefix", name_prefix)
        if path is not None:
            pulumi.set(__self__, "path", path)
        if permissions_boundary is not None:
            pulumi.set(__self__, "permissions_boundary", permissions_boundary)
        if policy_arns is not None:
            pulumi.set(__self__, "policy_arns", policy_arns)
        if tags is not None:
            pulumi.set(__self__, "tags", tags)

    @staticmethod
    def builder(defaults: Optional['RoleWithPolicyArgs'] = None) -> 'RoleWithPolicyArgsBuilder':
        return RoleWithPolicyArgsBuilder(defaults)

    @property
    @pulumi.getter
    def description(self) -> Optional[pulumi.Input[str]]:
        """
        Description of the role.
        """
        return pulumi.get(self, "description")

    @property
    @pulumi.getter(name="forceDetachPolicies")
    def force_detach_policies(self) -> Optional[pulumi.Input[bool]]:
        """
        Whether to force detaching any policies the role has before destroying it. Defaults to `false`.
        """
        return pulumi.get(self, "force_detach_policies")

    @property
    @pulumi.getter(name="inlinePolicies")
    @_utilities.deprecated(INLINE_POLICIES_DEPRECATION)
    def inline_policies(self) -> Optional[pulumi.Input[Sequence[pulumi.Input['aws.iam.RoleInlinePolicyArgs']]]]:
        """
        Configuration block defining an exclusive set of IAM inline policies associated with the IAM role.
        """
        return pulumi.get(self, "inline_policies")

    @property
    @pulumi.getter(name="managedPolicyArns")
    def managed_policy_arns(self) -> Optional[pulumi.Input[Sequence[pulumi.Input[str]]]]:
        """
        Set of exclusive IAM managed policy ARNs to attach to the IAM role.
        """
        return pulumi.get(self, "managed_policy_arns")

    @property
    @pulumi.getter(name="maxSessionDuration")
    def max_session_duration(self) -> Optional[pulumi.Input[int]]:
        """
        Maximum session duration (in seconds) that you want to set for the specified role.
        """
        return pulumi.get(self, "max_session_duration")

    @property
    @pulumi.getter
    def name(self) -> Optional[pulumi.Input[str]]:
        """
        Friendly name of the role. Conflicts with `name_prefix`.
        """
        return pulumi.get(self, "name")

    @property
    @pulumi.getter(name="namePrefix")
    def name_prefix(self) -> Optional[pulumi.Input[str]]:
        """
        Creates a unique friendly name beginning with the specified prefix. Conflicts with `name`.
        """
        return pulumi.get(self, "name_prefix")

    @property
    @pulumi.getter
    def path(self) -> Optional[pulumi.Input[str]]:
        return pulumi.get(self, "path")

    @property
    @pulumi.getter(name="permissionsBoundary")
    def permissions_boundary(self) -> Optional[pulumi.Input[str]]:
        return pulumi.get(self, "permissions_boundary")

    @property
    @pulumi.getter(name="policyArns")
    def policy_arns(self) -> Optional[Sequence[str]]:
        """
        ARNs of the policies to attach to the created role.
        """
        return pulumi.get(self, "policy_arns")

    @property
    @pulumi.getter
    def tags(self) -> Optional[pulumi.Input[Mapping[str, pulumi.Input[str]]]]:
        return pulumi.get(self, "tags")


def _items(values: tuple) -> Any:
    # A single list or Output is taken as the whole value; anything else is varargs.
    if len(values) == 1 and (values[0] is None or isinstance(values[0], (list, tuple, pulumi.Output))):
        return values[0]
    return list(values)


class RoleWithPolicyArgsBuilder(ArgsBuilder[RoleWithPolicyArgs]):
    def __init__(self, defaults: Optional[RoleWithPolicyArgs] = None):
        super().__init__(RoleWithPolicyArgs, defaults)

    def description(self, description: Optional[pulumi.Input[str]]) -> 'RoleWithPolicyArgsBuilder':
        return self.set("description", description)

    def force_detach_policies(self, force_detach_policies: Optional[pulumi.Input[bool]]) -> 'RoleWithPolicyArgsBuilder':
        return self.set("force_detach_policies", force_detach_policies)

    @_utilities.deprecated(INLINE_POLICIES_DEPRECATION)
    def inline_policies(self, *inline_policies) -> 'RoleWithPolicyArgsBuilder':
        return self.set("inline_policies", _items(inline_policies))

    def managed_policy_arns(self, *managed_policy_arns) -> 'RoleWithPolicyArgsBuilder':
        return self.set("managed_policy_arns", _items(managed_policy_arns))

    def max_session_duration(self, max_session_duration: Optional[pulumi.Input[int]]) -> 'RoleWithPolicyArgsBuilder':
        return self.set("max_session_duration", max_session_duration)

    def name(self, name: Optional[pulumi.Input[str]]) -> 'RoleWithPolicyArgsBuilder':
        return self.set("name", name)

    def name_prefix(self, name_prefix: Optional[pulumi.Input[str]]) -> 'RoleWithPolicyArgsBuilder':
        return self.set("name_prefix", name_prefix)

    def path(self, path: Optional[pulumi.Input[str]]) -> 'RoleWithPolicyArgsBuilder':
        return self.set("path", path)

    def permissions_boundary(self, permissions_boundary: Optional[pulumi.Input[str]]) -> 'RoleWithPolicyArgsBuilder':
        return self.set("permissions_boundary", permissions_boundary)

    def policy_arns(self, *policy_arns: str) -> 'RoleWithPolicyArgsBuilder':
        return self.set("policy_arns", _items(policy_arns))

    def tags(self, tags: Optional[pulumi.Input[Mapping[str, pulumi.Input[str]]]]) -> 'RoleWithPolicyArgsBuilder':
        return self.set("tags", tags)


def default_assume_role_policy(service: str = "ecs-tasks.amazonaws.com") -> dict:
    """Trust policy that lets ``service`` assume the role."""
    return {
        "Version": "2012-10-17",
        "Statement": [{
            "Sid": "",
            "Effect": "Allow",
            "Action": "sts:AssumeRole",
            "Principal": {"Service": service},
        }],
    }


@dataclass
class RoleWithPolicy:
    role: aws.iam.Role
    policy_attachments: List[aws.iam.RolePolicyAttachment] = field(default_factory=list)


def _attachment_name(name: str, policy_arn: str) -> str:
    digest = hashlib.sha1(policy_arn.encode("utf-8")).hexdigest()[:8]
    return f"{name}-{digest}"


def create_role_with_policy(name: str,
                            assume_role_policy: Union[pulumi.Input[str], Mapping[str, Any]],
                            args: Optional[RoleWithPolicyArgs] = None,
                            opts: Optional[pulumi.ResourceOptions] = None) -> RoleWithPolicy:
    """Create an IAM role and attach each of ``args.policy_arns`` to it.

    Conflicting arguments such as ``name`` and ``name_prefix`` are passed
    through as given and rejected by the provider.
    """
    args = args if args is not None else RoleWithPolicyArgs()
    values = args_to_dict(args)
    role_args = {k: v for k, v in values.items() if k in _ROLE_FIELDS}

    if isinstance(assume_role_policy, Mapping):
        assume_role_policy = pulumi.Output.json_dumps(assume_role_policy)

    pulumi.log.debug(f"Creating role '{name}' with arguments {sorted(role_args)}")
    role = aws.iam.Role(name, assume_role_policy=assume_role_policy, opts=opts, **role_args)

    attachments = []
    for policy_arn in values.get("policy_arns", []):
        attachments.append(aws.iam.RolePolicyAttachment(
            _attachment_name(name, policy_arn),
            role=role.name,
            policy_arn=policy_arn,
            opts=pulumi.ResourceOptions(parent=role)))
    return RoleWithPolicy(role=role, policy_attachments=attachments)
