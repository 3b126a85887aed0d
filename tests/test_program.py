import pulumi
import pytest

from awsxclassic.config import Config
from awsxclassic.errors import ConfigurationError
from awsxclassic.program import StackBuilder, build_args, resolve_value
from awsxclassic.autoscaling import StepPolicyArgs


def _config(**sections):
    data = {
        "team": "Platform",
        "service": "web",
        "environment": "dev",
        "region": "us-east-1",
        "tags": {"team": "platform"},
        "aws_resources": [{
            "name": "web-asg",
            "type": "autoscaling.Group",
            "args": {"name": "web-asg", "minSize": 1, "maxSize": 4, "availabilityZones": ["us-east-1a"]},
        }],
    }
    data.update(sections)
    return Config.from_dict(data)


def _wait_for(builder):
    return pulumi.Output.all(*[resource.urn for resource in builder.resources.values()])


def test_generate_resource_name():
    builder = StackBuilder(_config())

    assert builder.generate_resource_name("cpu") == "platform-web-dev-use1-cpu"


def test_unknown_region_is_abbreviated_by_prefix():
    builder = StackBuilder(_config(region="xx-central-9"))

    assert builder.get_abbreviation("xx-central-9") == "xx"


def test_build_args_accepts_camel_case_keys():
    args = build_args(StepPolicyArgs, {"adjustmentType": "ChangeInCapacity", "metric_aggregation_type": "Average"})

    assert args.adjustment_type == "ChangeInCapacity"
    assert args.metric_aggregation_type == "Average"


def test_resolve_value_leaves_plain_values_alone():
    assert resolve_value({"a": ["x", 1, {"b": True}]}, {}) == {"a": ["x", 1, {"b": True}]}


def test_resolve_value_rejects_unknown_reference():
    with pytest.raises(ConfigurationError, match="missing"):
        resolve_value("ref:missing", {})


@pulumi.runtime.test
def test_build_creates_resources_roles_and_policies(mocks):
    builder = StackBuilder(_config(
        roles=[{
            "name": "task-role",
            "args": {"description": "web tasks", "policyArns": ["arn:aws:iam::aws:policy/ReadOnlyAccess"]},
        }],
        scaling_policies=[
            {
                "name": "cpu",
                "group": "web-asg",
                "kind": "predefined_metric",
                "args": {"predefinedMetricType": "ASGAverageCPUUtilization", "targetValue": 50},
            },
            {
                "name": "queue",
                "group": "web-asg",
                "kind": "custom_metric",
                "args": {
                    "targetValue": 100,
                    "metric": {"namespace": "AWS/SQS", "name": "Depth", "dimensions": {"QueueName": "jobs"}},
                },
            },
            {
                "name": "steps",
                "group": "web-asg",
                "kind": "step",
                "args": {"stepAdjustments": [{"scalingAdjustment": 1, "metricIntervalLowerBound": "0"}]},
            },
        ],
    ))
    builder.build()

    assert set(builder.resources) == {"web-asg", "task-role", "cpu", "queue", "steps"}

    def check(_):
        by_name = {r.name: r for r in mocks.resources}
        group = by_name["platform-web-dev-use1-web-asg"]
        assert group.inputs["tags"] == [{"key": "team", "value": "platform", "propagateAtLaunch": True}]
        role = by_name["platform-web-dev-use1-task-role"]
        assert role.inputs["description"] == "web tasks"
        assert role.inputs["tags"] == {"team": "platform"}
        cpu = by_name["platform-web-dev-use1-cpu"].inputs
        assert cpu["autoscalingGroupName"] == "web-asg"
        assert cpu["targetTrackingConfiguration"]["predefinedMetricSpecification"] == {
            "predefinedMetricType": "ASGAverageCPUUtilization"}
        queue = by_name["platform-web-dev-use1-queue"].inputs
        assert queue["targetTrackingConfiguration"]["customizedMetricSpecification"]["metricDimensions"] == [
            {"name": "QueueName", "value": "jobs"}]
        steps = by_name["platform-web-dev-use1-steps"].inputs
        assert steps["policyType"] == "StepScaling"
        assert steps["stepAdjustments"] == [{"scalingAdjustment": 1, "metricIntervalLowerBound": "0"}]

    return _wait_for(builder).apply(check)


@pulumi.runtime.test
def test_custom_name_overrides_generated_name(mocks):
    config = _config()
    config.aws_resources[0].custom_name = "legacy-asg"
    builder = StackBuilder(config)
    builder.build()

    def check(_):
        assert [r.name for r in mocks.resources] == ["legacy-asg"]

    return _wait_for(builder).apply(check)


@pulumi.runtime.test
def test_unknown_resource_type_is_skipped(mocks):
    config = _config()
    config.aws_resources[0].type = "autoscaling.NoSuchThing"
    builder = StackBuilder(config)

    builder.build()

    assert builder.resources == {}


@pulumi.runtime.test
def test_unknown_policy_kind(mocks):
    builder = StackBuilder(_config(scaling_policies=[
        {"name": "odd", "group": "web-asg", "kind": "predictive", "args": {}},
    ]))

    with pytest.raises(ConfigurationError, match="predictive"):
        builder.build()


@pulumi.runtime.test
def test_policy_for_unknown_group(mocks):
    builder = StackBuilder(_config(scaling_policies=[
        {"name": "cpu", "group": "api-asg", "kind": "simple", "args": {"scalingAdjustment": 1}},
    ]))

    with pytest.raises(ConfigurationError, match="api-asg"):
        builder.build()
