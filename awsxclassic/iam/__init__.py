from .role import (
    RoleWithPolicy,
    RoleWithPolicyArgs,
    RoleWithPolicyArgsBuilder,
    create_role_with_policy,
    default_assume_role_policy,
)
