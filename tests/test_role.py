import hashlib
import json

import pulumi
import pytest

from awsxclassic.iam import RoleWithPolicyArgs, create_role_with_policy, default_assume_role_policy

ROLE_TYPE = "aws:iam/role:Role"
ATTACHMENT_TYPE = "aws:iam/rolePolicyAttachment:RolePolicyAttachment"


def _wait_for(created):
    return pulumi.Output.all(created.role.urn, *[a.urn for a in created.policy_attachments])


def test_default_assume_role_policy_trusts_the_service():
    statement = default_assume_role_policy("lambda.amazonaws.com")["Statement"][0]

    assert statement["Action"] == "sts:AssumeRole"
    assert statement["Principal"] == {"Service": "lambda.amazonaws.com"}


@pulumi.runtime.test
def test_role_is_created_from_the_role_fields(mocks):
    args = (RoleWithPolicyArgs.builder()
            .description("task role")
            .max_session_duration(7200)
            .managed_policy_arns("arn:aws:iam::aws:policy/CloudWatchLogsFullAccess")
            .tags({"team": "platform"})
            .build())
    created = create_role_with_policy("task", default_assume_role_policy(), args)

    def check(_):
        (role,) = mocks.of_type(ROLE_TYPE)
        assert role.name == "task"
        assert role.inputs["description"] == "task role"
        assert role.inputs["maxSessionDuration"] == 7200
        assert role.inputs["managedPolicyArns"] == ["arn:aws:iam::aws:policy/CloudWatchLogsFullAccess"]
        assert role.inputs["tags"] == {"team": "platform"}
        assert json.loads(role.inputs["assumeRolePolicy"]) == default_assume_role_policy()
        assert "policyArns" not in role.inputs
        assert mocks.of_type(ATTACHMENT_TYPE) == []

    return _wait_for(created).apply(check)


@pulumi.runtime.test
def test_policy_arns_become_attachments(mocks):
    arns = ["arn:aws:iam::aws:policy/AmazonS3ReadOnlyAccess", "arn:aws:iam::aws:policy/AmazonSQSFullAccess"]
    args = RoleWithPolicyArgs.builder().name("task-role").policy_arns(*arns).build()
    created = create_role_with_policy("task", '{"Version": "2012-10-17", "Statement": []}', args)

    assert len(created.policy_attachments) == 2

    def check(_):
        attachments = mocks.of_type(ATTACHMENT_TYPE)
        assert sorted(a.inputs["policyArn"] for a in attachments) == sorted(arns)
        expected_names = {f"task-{hashlib.sha1(arn.encode('utf-8')).hexdigest()[:8]}" for arn in arns}
        assert {a.name for a in attachments} == expected_names
        assert all(a.inputs["role"] == "task-role" for a in attachments)

    return _wait_for(created).apply(check)


@pulumi.runtime.test
def test_conflicting_names_are_left_to_the_provider(mocks):
    args = RoleWithPolicyArgs.builder().name("task-role").name_prefix("task-").build()
    created = create_role_with_policy("task", "{}", args)

    def check(_):
        (role,) = mocks.of_type(ROLE_TYPE)
        assert role.inputs["name"] == "task-role"
        assert role.inputs["namePrefix"] == "task-"

    return _wait_for(created).apply(check)


@pulumi.runtime.test
def test_role_without_args(mocks):
    created = create_role_with_policy("bare", "{}")

    assert created.policy_attachments == []

    def check(_):
        (role,) = mocks.of_type(ROLE_TYPE)
        assert role.inputs["assumeRolePolicy"] == "{}"

    return _wait_for(created).apply(check)


@pulumi.runtime.test
def test_inline_policies_are_forwarded(mocks):
    import pulumi_aws as aws

    policy = aws.iam.RoleInlinePolicyArgs(name="inline", policy="{}")
    with pytest.warns(DeprecationWarning):
        args = RoleWithPolicyArgs(inline_policies=[policy])
    created = create_role_with_policy("legacy", "{}", args)

    def check(_):
        (role,) = mocks.of_type(ROLE_TYPE)
        assert role.inputs["inlinePolicies"] == [{"name": "inline", "policy": "{}"}]

    return _wait_for(created).apply(check)
