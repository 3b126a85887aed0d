"""
Scaling policy arguments and the functions that lower them into
``aws.autoscaling.Policy`` resources.

``aws.autoscaling.Policy`` shares one set of fields between the SimpleScaling,
StepScaling and TargetTrackingScaling policy types, and the provider keeps the
previous value of any field that is left out. Each policy kind therefore sets
the fields that belong to the other kinds to ``None`` explicitly.
"""

from typing import Any, Dict, Mapping, Optional, Sequence, Union

import pulumi
import pulumi_aws as aws

from .._builder import ArgsBuilder
from ..cloudwatch import Metric, statistic_string

__all__ = [
    'PolicyArgs',
    'StepAdjustmentArgs',
    'SimplePolicyArgs',
    'StepPolicyArgs',
    'TargetTrackingPolicyArgs',
    'PredefinedMetricTargetTrackingPolicyArgs',
    'CustomMetricTargetTrackingPolicyArgs',
    'ApplicationTargetGroupTrackingPolicyArgs',
    'lower_policy',
    'convert_dimensions',
    'create_policy',
    'create_simple_policy',
    'create_step_policy',
    'create_target_tracking_policy',
    'create_predefined_metric_target_tracking_policy',
    'create_custom_metric_target_tracking_policy',
]

SIMPLE_SCALING = "SimpleScaling"
STEP_SCALING = "StepScaling"
TARGET_TRACKING_SCALING = "TargetTrackingScaling"

ADJUSTMENT_TYPES = ("ChangeInCapacity", "ExactCapacity", "PercentChangeInCapacity")
METRIC_AGGREGATION_TYPES = ("Minimum", "Maximum", "Average")
PREDEFINED_METRIC_TYPES = (
    "ASGAverageCPUUtilization",
    "ASGAverageNetworkIn",
    "ASGAverageNetworkOut",
    "ALBRequestCountPerTarget",
)

# Fields owned by a single policy kind; every other kind clears them.
KIND_FIELDS = (
    "cooldown",
    "metric_aggregation_type",
    "scaling_adjustment",
    "step_adjustments",
    "target_tracking_configuration",
)


@pulumi.input_type
class PolicyArgs:
    def __init__(__self__, *,
                 adjustment_type: Optional[pulumi.Input[str]] = None,
                 estimated_instance_warmup: Optional[pulumi.Input[int]] = None,
                 min_adjustment_magnitude: Optional[pulumi.Input[int]] = None):
        """
        Arguments shared by every scaling policy kind.
        :param pulumi.Input[str] adjustment_type: Whether the adjustment is an absolute number or a percentage of the current capacity.
        :param pulumi.Input[int] estimated_instance_warmup: Estimated time, in seconds, until a newly launched instance will contribute CloudWatch metrics.
        :param pulumi.Input[int] min_adjustment_magnitude: Minimum number of instances to scale when `adjustment_type` is `PercentChangeInCapacity`.
        """
        if adjustment_type is not None:
            pulumi.set(__self__, "adjustment_type", adjustment_type)
        if estimated_instance_warmup is not None:
            pulumi.set(__self__, "estimated_instance_warmup", estimated_instance_warmup)
        if min_adjustment_magnitude is not None:
            pulumi.set(__self__, "min_adjustment_magnitude", min_adjustment_magnitude)

    @staticmethod
    def builder(defaults: Optional['PolicyArgs'] = None) -> ArgsBuilder['PolicyArgs']:
        return ArgsBuilder(PolicyArgs, defaults)

    @property
    @pulumi.getter(name="adjustmentType")
    def adjustment_type(self) -> Optional[pulumi.Input[str]]:
        return pulumi.get(self, "adjustment_type")

    @property
    @pulumi.getter(name="estimatedInstanceWarmup")
    def estimated_instance_warmup(self) -> Optional[pulumi.Input[int]]:
        return pulumi.get(self, "estimated_instance_warmup")

    @property
    @pulumi.getter(name="minAdjustmentMagnitude")
    def min_adjustment_magnitude(self) -> Optional[pulumi.Input[int]]:
        return pulumi.get(self, "min_adjustment_magnitude")


@pulumi.input_type
class StepAdjustmentArgs:
    def __init__(__self__, *,
                 scaling_adjustment: pulumi.Input[int],
                 metric_interval_lower_bound: Optional[pulumi.Input[str]] = None,
                 metric_interval_upper_bound: Optional[pulumi.Input[str]] = None):
        """
        :param pulumi.Input[int] scaling_adjustment: Number of members by which to scale when the adjustment bounds are breached. A positive value scales up, a negative value scales down.
        :param pulumi.Input[str] metric_interval_lower_bound: Lower bound for the difference between the alarm threshold and the metric. Without a value AWS treats this bound as negative infinity.
        :param pulumi.Input[str] metric_interval_upper_bound: Upper bound for the difference between the alarm threshold and the metric. Without a value AWS treats this bound as infinity.
        """
        pulumi.set(__self__, "scaling_adjustment", scaling_adjustment)
        if metric_interval_lower_bound is not None:
            pulumi.set(__self__, "metric_interval_lower_bound", metric_interval_lower_bound)
        if metric_interval_upper_bound is not None:
            pulumi.set(__self__, "metric_interval_upper_bound", metric_interval_upper_bound)

    @staticmethod
    def builder(defaults: Optional['StepAdjustmentArgs'] = None) -> ArgsBuilder['StepAdjustmentArgs']:
        return ArgsBuilder(StepAdjustmentArgs, defaults)

    @property
    @pulumi.getter(name="scalingAdjustment")
    def scaling_adjustment(self) -> pulumi.Input[int]:
        return pulumi.get(self, "scaling_adjustment")

    @property
    @pulumi.getter(name="metricIntervalLowerBound")
    def metric_interval_lower_bound(self) -> Optional[pulumi.Input[str]]:
        return pulumi.get(self, "metric_interval_lower_bound")

    @property
    @pulumi.getter(name="metricIntervalUpperBound")
    def metric_interval_upper_bound(self) -> Optional[pulumi.Input[str]]:
        return pulumi.get(self, "metric_interval_upper_bound")


@pulumi.input_type
class SimplePolicyArgs:
    def __init__(__self__, *,
                 adjustment_type: Optional[pulumi.Input[str]] = None,
                 cooldown: Optional[pulumi.Input[int]] = None,
                 estimated_instance_warmup: Optional[pulumi.Input[int]] = None,
                 min_adjustment_magnitude: Optional[pulumi.Input[int]] = None,
                 scaling_adjustment: Optional[pulumi.Input[int]] = None):
        """
        :param pulumi.Input[int] cooldown: Time, in seconds, after a scaling activity completes and before the next one can start.
        :param pulumi.Input[int] scaling_adjustment: Number of instances by which to scale, interpreted according to `adjustment_type`.
        """
        if adjustment_type is not None:
            pulumi.set(__self__, "adjustment_type", adjustment_type)
        if cooldown is not None:
            pulumi.set(__self__, "cooldown", cooldown)
        if estimated_instance_warmup is not None:
            pulumi.set(__self__, "estimated_instance_warmup", estimated_instance_warmup)
        if min_adjustment_magnitude is not None:
            pulumi.set(__self__, "min_adjustment_magnitude", min_adjustment_magnitude)
        if scaling_adjustment is not None:
            pulumi.set(__self__, "scaling_adjustment", scaling_adjustment)

    @staticmethod
    def builder(defaults: Optional['SimplePolicyArgs'] = None) -> ArgsBuilder['SimplePolicyArgs']:
        return ArgsBuilder(SimplePolicyArgs, defaults)

    @property
    @pulumi.getter(name="adjustmentType")
    def adjustment_type(self) -> Optional[pulumi.Input[str]]:
        return pulumi.get(self, "adjustment_type")

    @property
    @pulumi.getter
    def cooldown(self) -> Optional[pulumi.Input[int]]:
        return pulumi.get(self, "cooldown")

    @property
    @pulumi.getter(name="estimatedInstanceWarmup")
    def estimated_instance_warmup(self) -> Optional[pulumi.Input[int]]:
        return pulumi.get(self, "estimated_instance_warmup")

    @property
    @pulumi.getter(name="minAdjustmentMagnitude")
    def min_adjustment_magnitude(self) -> Optional[pulumi.Input[int]]:
        return pulumi.get(self, "min_adjustment_magnitude")

    @property
    @pulumi.getter(name="scalingAdjustment")
    def scaling_adjustment(self) -> Optional[pulumi.Input[int]]:
        return pulumi.get(self, "scaling_adjustment")


@pulumi.input_type
class StepPolicyArgs:
    def __init__(__self__, *,
                 adjustment_type: Optional[pulumi.Input[str]] = None,
                 estimated_instance_warmup: Optional[pulumi.Input[int]] = None,
                 metric_aggregation_type: Optional[pulumi.Input[str]] = None,
                 min_adjustment_magnitude: Optional[pulumi.Input[int]] = None,
                 step_adjustments: Optional[pulumi.Input[Sequence[pulumi.Input['StepAdjustmentArgs']]]] = None):
        """
        :param pulumi.Input[str] metric_aggregation_type: Aggregation type for the policy's metrics. Without a value AWS treats the aggregation type as `Average`.
        :param pulumi.Input[Sequence[pulumi.Input['StepAdjustmentArgs']]] step_adjustments: Adjustments that manage group scaling.
        """
        if adjustment_type is not None:
            pulumi.set(__self__, "adjustment_type", adjustment_type)
        if estimated_instance_warmup is not None:
            pulumi.set(__self__, "estimated_instance_warmup", estimated_instance_warmup)
        if metric_aggregation_type is not None:
            pulumi.set(__self__, "metric_aggregation_type", metric_aggregation_type)
        if min_adjustment_magnitude is not None:
            pulumi.set(__self__, "min_adjustment_magnitude", min_adjustment_magnitude)
        if step_adjustments is not None:
            pulumi.set(__self__, "step_adjustments", step_adjustments)

    @staticmethod
    def builder(defaults: Optional['StepPolicyArgs'] = None) -> ArgsBuilder['StepPolicyArgs']:
        return ArgsBuilder(StepPolicyArgs, defaults)

    @property
    @pulumi.getter(name="adjustmentType")
    def adjustment_type(self) -> Optional[pulumi.Input[str]]:
        return pulumi.get(self, "adjustment_type")

    @property
    @pulumi.getter(name="estimatedInstanceWarmup")
    def estimated_instance_warmup(self) -> Optional[pulumi.Input[int]]:
        return pulumi.get(self, "estimated_instance_warmup")

    @property
    @pulumi.getter(name="metricAggregationType")
    def metric_aggregation_type(self) -> Optional[pulumi.Input[str]]:
        return pulumi.get(self, "metric_aggregation_type")

    @property
    @pulumi.getter(name="minAdjustmentMagnitude")
    def min_adjustment_magnitude(self) -> Optional[pulumi.Input[int]]:
        return pulumi.get(self, "min_adjustment_magnitude")

    @property
    @pulumi.getter(name="stepAdjustments")
    def step_adjustments(self) -> Optional[pulumi.Input[Sequence[pulumi.Input['StepAdjustmentArgs']]]]:
        return pulumi.get(self, "step_adjustments")


@pulumi.input_type
class TargetTrackingPolicyArgs:
    def __init__(__self__, *,
                 target_value: pulumi.Input[float],
                 adjustment_type: Optional[pulumi.Input[str]] = None,
                 disable_scale_in: Optional[pulumi.Input[bool]] = None,
                 estimated_instance_warmup: Optional[pulumi.Input[int]] = None,
                 min_adjustment_magnitude: Optional[pulumi.Input[int]] = None):
        """
        :param pulumi.Input[float] target_value: Target value for the metric.
        :param pulumi.Input[bool] disable_scale_in: Whether scale in by the target tracking policy is disabled. Defaults to `false`.
        """
        pulumi.set(__self__, "target_value", target_value)
        if adjustment_type is not None:
            pulumi.set(__self__, "adjustment_type", adjustment_type)
        if disable_scale_in is not None:
            pulumi.set(__self__, "disable_scale_in", disable_scale_in)
        if estimated_instance_warmup is not None:
            pulumi.set(__self__, "estimated_instance_warmup", estimated_instance_warmup)
        if min_adjustment_magnitude is not None:
            pulumi.set(__self__, "min_adjustment_magnitude", min_adjustment_magnitude)

    @staticmethod
    def builder(defaults: Optional['TargetTrackingPolicyArgs'] = None) -> ArgsBuilder['TargetTrackingPolicyArgs']:
        return ArgsBuilder(TargetTrackingPolicyArgs, defaults)

    @property
    @pulumi.getter(name="targetValue")
    def target_value(self) -> pulumi.Input[float]:
        return pulumi.get(self, "target_value")

    @property
    @pulumi.getter(name="adjustmentType")
    def adjustment_type(self) -> Optional[pulumi.Input[str]]:
        return pulumi.get(self, "adjustment_type")

    @property
    @pulumi.getter(name="disableScaleIn")
    def disable_scale_in(self) -> Optional[pulumi.Input[bool]]:
        return pulumi.get(self, "disable_scale_in")

    @property
    @pulumi.getter(name="estimatedInstanceWarmup")
    def estimated_instance_warmup(self) -> Optional[pulumi.Input[int]]:
        return pulumi.get(self, "estimated_instance_warmup")

    @property
    @pulumi.getter(name="minAdjustmentMagnitude")
    def min_adjustment_magnitude(self) -> Optional[pulumi.Input[int]]:
        return pulumi.get(self, "min_adjustment_magnitude")


@pulumi.input_type
class PredefinedMetricTargetTrackingPolicyArgs:
    def __init__(__self__, *,
                 predefined_metric_type: pulumi.Input[str],
                 target_value: pulumi.Input[float],
                 adjustment_type: Optional[pulumi.Input[str]] = None,
                 disable_scale_in: Optional[pulumi.Input[bool]] = None,
                 estimated_instance_warmup: Optional[pulumi.Input[int]] = None,
                 min_adjustment_magnitude: Optional[pulumi.Input[int]] = None,
                 resource_label: Optional[pulumi.Input[str]] = None):
        """
        A predefined Auto Scaling metric to track.
        :param pulumi.Input[str] predefined_metric_type: One of `ASGAverageCPUUtilization`, `ASGAverageNetworkIn`, `ASGAverageNetworkOut` or `ALBRequestCountPerTarget`.
        :param pulumi.Input[str] resource_label: Identifies the resource associated with the metric type.
        """
        pulumi.set(__self__, "predefined_metric_type", predefined_metric_type)
        pulumi.set(__self__, "target_value", target_value)
        if adjustment_type is not None:
            pulumi.set(__self__, "adjustment_type", adjustment_type)
        if disable_scale_in is not None:
            pulumi.set(__self__, "disable_scale_in", disable_scale_in)
        if estimated_instance_warmup is not None:
            pulumi.set(__self__, "estimated_instance_warmup", estimated_instance_warmup)
        if min_adjustment_magnitude is not None:
            pulumi.set(__self__, "min_adjustment_magnitude", min_adjustment_magnitude)
        if resource_label is not None:
            pulumi.set(__self__, "resource_label", resource_label)

    @staticmethod
    def builder(defaults: Optional['PredefinedMetricTargetTrackingPolicyArgs'] = None) -> ArgsBuilder['PredefinedMetricTargetTrackingPolicyArgs']:
        return ArgsBuilder(PredefinedMetricTargetTrackingPolicyArgs, defaults)

    @property
    @pulumi.getter(name="predefinedMetricType")
    def predefined_metric_type(self) -> pulumi.Input[str]:
        return pulumi.get(self, "predefined_metric_type")

    @property
    @pulumi.getter(name="targetValue")
    def target_value(self) -> pulumi.Input[float]:
        return pulumi.get(self, "target_value")

    @property
    @pulumi.getter(name="adjustmentType")
    def adjustment_type(self) -> Optional[pulumi.Input[str]]:
        return pulumi.get(self, "adjustment_type")

    @property
    @pulumi.getter(name="disableScaleIn")
    def disable_scale_in(self) -> Optional[pulumi.Input[bool]]:
        return pulumi.get(self, "disable_scale_in")

    @property
    @pulumi.getter(name="estimatedInstanceWarmup")
    def estimated_instance_warmup(self) -> Optional[pulumi.Input[int]]:
        return pulumi.get(self, "estimated_instance_warmup")

    @property
    @pulumi.getter(name="minAdjustmentMagnitude")
    def min_adjustment_magnitude(self) -> Optional[pulumi.Input[int]]:
        return pulumi.get(self, "min_adjustment_magnitude")

    @property
    @pulumi.getter(name="resourceLabel")
    def resource_label(self) -> Optional[pulumi.Input[str]]:
        return pulumi.get(self, "resource_label")


@pulumi.input_type
class CustomMetricTargetTrackingPolicyArgs:
    def __init__(__self__, *,
                 metric: Metric,
                 target_value: pulumi.Input[float],
                 adjustment_type: Optional[pulumi.Input[str]] = None,
                 disable_scale_in: Optional[pulumi.Input[bool]] = None,
                 estimated_instance_warmup: Optional[pulumi.Input[int]] = None,
                 min_adjustment_magnitude: Optional[pulumi.Input[int]] = None):
        """
        A CloudWatch metric of your choosing to track. The metric should change in
        inverse proportion to the group's capacity.
        :param Metric metric: The metric to track.
        """
        pulumi.set(__self__, "metric", metric)
        pulumi.set(__self__, "target_value", target_value)
        if adjustment_type is not None:
            pulumi.set(__self__, "adjustment_type", adjustment_type)
        if disable_scale_in is not None:
            pulumi.set(__self__, "disable_scale_in", disable_scale_in)
        if estimated_instance_warmup is not None:
            pulumi.set(__self__, "estimated_instance_warmup", estimated_instance_warmup)
        if min_adjustment_magnitude is not None:
            pulumi.set(__self__, "min_adjustment_magnitude", min_adjustment_magnitude)

    @staticmethod
    def builder(defaults: Optional['CustomMetricTargetTrackingPolicyArgs'] = None) -> ArgsBuilder['CustomMetricTargetTrackingPolicyArgs']:
        return ArgsBuilder(CustomMetricTargetTrackingPolicyArgs, defaults)

    @property
    @pulumi.getter
    def metric(self) -> Metric:
        return pulumi.get(self, "metric")

    @property
    @pulumi.getter(name="targetValue")
    def target_value(self) -> pulumi.Input[float]:
        return pulumi.get(self, "target_value")

    @property
    @pulumi.getter(name="adjustmentType")
    def adjustment_type(self) -> Optional[pulumi.Input[str]]:
        return pulumi.get(self, "adjustment_type")

    @property
    @pulumi.getter(name="disableScaleIn")
    def disable_scale_in(self) -> Optional[pulumi.Input[bool]]:
        return pulumi.get(self, "disable_scale_in")

    @property
    @pulumi.getter(name="estimatedInstanceWarmup")
    def estimated_instance_warmup(self) -> Optional[pulumi.Input[int]]:
        return pulumi.get(self, "estimated_instance_warmup")

    @property
    @pulumi.getter(name="minAdjustmentMagnitude")
    def min_adjustment_magnitude(self) -> Optional[pulumi.Input[int]]:
        return pulumi.get(self, "min_adjustment_magnitude")


@pulumi.input_type
class ApplicationTargetGroupTrackingPolicyArgs:
    def __init__(__self__, *,
                 load_balancer: 'aws.lb.LoadBalancer',
                 target_group: 'aws.lb.TargetGroup',
                 target_value: pulumi.Input[float],
                 adjustment_type: Optional[pulumi.Input[str]] = None,
                 disable_scale_in: Optional[pulumi.Input[bool]] = None,
                 estimated_instance_warmup: Optional[pulumi.Input[int]] = None,
                 min_adjustment_magnitude: Optional[pulumi.Input[int]] = None):
        """
        Scale on the number of requests each target of an Application Load Balancer
        target group receives. The group must already be registered with the target group.
        :param aws.lb.LoadBalancer load_balancer: Load balancer that owns the target group.
        :param aws.lb.TargetGroup target_group: Target group whose per-target request count is tracked.
        """
        pulumi.set(__self__, "load_balancer", load_balancer)
        pulumi.set(__self__, "target_group", target_group)
        pulumi.set(__self__, "target_value", target_value)
        if adjustment_type is not None:
            pulumi.set(__self__, "adjustment_type", adjustment_type)
        if disable_scale_in is not None:
            pulumi.set(__self__, "disable_scale_in", disable_scale_in)
        if estimated_instance_warmup is not None:
            pulumi.set(__self__, "estimated_instance_warmup", estimated_instance_warmup)
        if min_adjustment_magnitude is not None:
            pulumi.set(__self__, "min_adjustment_magnitude", min_adjustment_magnitude)

    @staticmethod
    def builder(defaults: Optional['ApplicationTargetGroupTrackingPolicyArgs'] = None) -> ArgsBuilder['ApplicationTargetGroupTrackingPolicyArgs']:
        return ArgsBuilder(ApplicationTargetGroupTrackingPolicyArgs, defaults)

    @property
    @pulumi.getter(name="loadBalancer")
    def load_balancer(self) -> 'aws.lb.LoadBalancer':
        return pulumi.get(self, "load_balancer")

    @property
    @pulumi.getter(name="targetGroup")
    def target_group(self) -> 'aws.lb.TargetGroup':
        return pulumi.get(self, "target_group")

    @property
    @pulumi.getter(name="targetValue")
    def target_value(self) -> pulumi.Input[float]:
        return pulumi.get(self, "target_value")

    @property
    @pulumi.getter(name="adjustmentType")
    def adjustment_type(self) -> Optional[pulumi.Input[str]]:
        return pulumi.get(self, "adjustment_type")

    @property
    @pulumi.getter(name="disableScaleIn")
    def disable_scale_in(self) -> Optional[pulumi.Input[bool]]:
        return pulumi.get(self, "disable_scale_in")

    @property
    @pulumi.getter(name="estimatedInstanceWarmup")
    def estimated_instance_warmup(self) -> Optional[pulumi.Input[int]]:
        return pulumi.get(self, "estimated_instance_warmup")

    @property
    @pulumi.getter(name="minAdjustmentMagnitude")
    def min_adjustment_magnitude(self) -> Optional[pulumi.Input[int]]:
        return pulumi.get(self, "min_adjustment_magnitude")


PolicySpec = Union[
    SimplePolicyArgs,
    StepPolicyArgs,
    PredefinedMetricTargetTrackingPolicyArgs,
    CustomMetricTargetTrackingPolicyArgs,
    ApplicationTargetGroupTrackingPolicyArgs,
]


def lower_policy(policy_type: str,
                 group_name: pulumi.Input[str],
                 args: Optional[Any] = None,
                 **kind_fields: Any) -> Dict[str, Any]:
    """Return every ``aws.autoscaling.Policy`` argument for a policy of ``policy_type``.

    The shared fields are copied from ``args``. Of the kind-specific fields only
    those passed in ``kind_fields`` carry a value; the rest are present and ``None``.
    """
    unknown = set(kind_fields) - set(KIND_FIELDS)
    if unknown:
        raise TypeError(f"Unexpected policy field(s): {', '.join(sorted(unknown))}")

    payload: Dict[str, Any] = {
        "policy_type": policy_type,
        "autoscaling_group_name": group_name,
        "adjustment_type": getattr(args, "adjustment_type", None),
        "estimated_instance_warmup": getattr(args, "estimated_instance_warmup", None),
        "min_adjustment_magnitude": getattr(args, "min_adjustment_magnitude", None),
    }
    for field in KIND_FIELDS:
        payload[field] = kind_fields.get(field)
    return payload


def lower_target_tracking_policy(group_name: pulumi.Input[str],
                                 target_tracking_configuration: pulumi.Input['aws.autoscaling.PolicyTargetTrackingConfigurationArgs'],
                                 args: Optional[Any] = None) -> Dict[str, Any]:
    return lower_policy(TARGET_TRACKING_SCALING, group_name, args,
                        target_tracking_configuration=target_tracking_configuration)


def _lower_step_adjustments(step_adjustments):
    if not isinstance(step_adjustments, (list, tuple)):
        return step_adjustments
    lowered = []
    for step in step_adjustments:
        if isinstance(step, StepAdjustmentArgs):
            step = aws.autoscaling.PolicyStepAdjustmentArgs(
                scaling_adjustment=step.scaling_adjustment,
                metric_interval_lower_bound=step.metric_interval_lower_bound,
                metric_interval_upper_bound=step.metric_interval_upper_bound)
        lowered.append(step)
    return lowered


def convert_dimensions(dimensions: Optional[pulumi.Input[Mapping[str, pulumi.Input[str]]]]) -> pulumi.Output[list]:
    """Turn a dimension mapping into CloudWatch ``{name, value}`` pairs, in mapping order.

    Missing or empty dimensions both become an empty list.
    """
    def convert(d):
        if not d:
            return []
        return [{"name": key, "value": value} for key, value in d.items()]

    return pulumi.Output.from_input(dimensions).apply(convert)


def predefined_metric_configuration(args: PredefinedMetricTargetTrackingPolicyArgs) -> 'aws.autoscaling.PolicyTargetTrackingConfigurationArgs':
    return aws.autoscaling.PolicyTargetTrackingConfigurationArgs(
        disable_scale_in=args.disable_scale_in,
        target_value=args.target_value,
        predefined_metric_specification=aws.autoscaling.PolicyTargetTrackingConfigurationPredefinedMetricSpecificationArgs(
            predefined_metric_type=args.predefined_metric_type,
            resource_label=args.resource_label,
        ),
        customized_metric_specification=None,
    )


def custom_metric_configuration(args: CustomMetricTargetTrackingPolicyArgs) -> 'aws.autoscaling.PolicyTargetTrackingConfigurationArgs':
    metric = args.metric
    return aws.autoscaling.PolicyTargetTrackingConfigurationArgs(
        disable_scale_in=args.disable_scale_in,
        target_value=args.target_value,
        predefined_metric_specification=None,
        customized_metric_specification=aws.autoscaling.PolicyTargetTrackingConfigurationCustomizedMetricSpecificationArgs(
            namespace=metric.namespace,
            metric_name=metric.name,
            unit=metric.unit,
            statistic=statistic_string(metric),
            metric_dimensions=convert_dimensions(metric.dimensions),
        ),
    )


def _policy_options(group: 'aws.autoscaling.Group', opts: Optional[pulumi.ResourceOptions]) -> pulumi.ResourceOptions:
    return pulumi.ResourceOptions.merge(pulumi.ResourceOptions(parent=group), opts)


def _create(name: str, group: 'aws.autoscaling.Group', payload: Dict[str, Any],
            opts: Optional[pulumi.ResourceOptions]) -> aws.autoscaling.Policy:
    pulumi.log.debug(f"Creating {payload['policy_type']} policy '{name}'")
    return aws.autoscaling.Policy(name, opts=_policy_options(group, opts), **payload)


def create_simple_policy(name: str, group: 'aws.autoscaling.Group', args: SimplePolicyArgs,
                         opts: Optional[pulumi.ResourceOptions] = None) -> aws.autoscaling.Policy:
    payload = lower_policy(SIMPLE_SCALING, group.name, args,
                           cooldown=args.cooldown,
                           scaling_adjustment=args.scaling_adjustment)
    return _create(name, group, payload, opts)


def create_step_policy(name: str, group: 'aws.autoscaling.Group', args: StepPolicyArgs,
                       opts: Optional[pulumi.ResourceOptions] = None) -> aws.autoscaling.Policy:
    payload = lower_policy(STEP_SCALING, group.name, args,
                           metric_aggregation_type=args.metric_aggregation_type,
                           step_adjustments=_lower_step_adjustments(args.step_adjustments))
    return _create(name, group, payload, opts)


def create_target_tracking_policy(name: str, group: 'aws.autoscaling.Group',
                                  target_tracking_configuration: pulumi.Input['aws.autoscaling.PolicyTargetTrackingConfigurationArgs'],
                                  args: Optional[Any] = None,
                                  opts: Optional[pulumi.ResourceOptions] = None) -> aws.autoscaling.Policy:
    """Create a TargetTrackingScaling policy for ``group``.

    ``args`` supplies the shared fields; cooldown, aggregation type, scaling
    adjustment and step adjustments are always cleared.
    """
    payload = lower_target_tracking_policy(group.name, target_tracking_configuration, args)
    return _create(name, group, payload, opts)


def create_predefined_metric_target_tracking_policy(name: str, group: 'aws.autoscaling.Group',
                                                    args: PredefinedMetricTargetTrackingPolicyArgs,
                                                    opts: Optional[pulumi.ResourceOptions] = None) -> aws.autoscaling.Policy:
    return create_target_tracking_policy(name, group, predefined_metric_configuration(args), args, opts)


def create_custom_metric_target_tracking_policy(name: str, group: 'aws.autoscaling.Group',
                                                args: CustomMetricTargetTrackingPolicyArgs,
                                                opts: Optional[pulumi.ResourceOptions] = None) -> aws.autoscaling.Policy:
    return create_target_tracking_policy(name, group, custom_metric_configuration(args), args, opts)


def request_count_resource_label(load_balancer: 'aws.lb.LoadBalancer', target_group: 'aws.lb.TargetGroup') -> pulumi.Output[str]:
    return pulumi.Output.concat(load_balancer.arn_suffix, "/", target_group.arn_suffix)


def create_policy(name: str, group: 'aws.autoscaling.Group', args: PolicySpec,
                  opts: Optional[pulumi.ResourceOptions] = None) -> aws.autoscaling.Policy:
    """Create the policy kind that matches the type of ``args``."""
    if isinstance(args, SimplePolicyArgs):
        return create_simple_policy(name, group, args, opts)
    if isinstance(args, StepPolicyArgs):
        return create_step_policy(name, group, args, opts)
    if isinstance(args, PredefinedMetricTargetTrackingPolicyArgs):
        return create_predefined_metric_target_tracking_policy(name, group, args, opts)
    if isinstance(args, CustomMetricTargetTrackingPolicyArgs):
        return create_custom_metric_target_tracking_policy(name, group, args, opts)
    if isinstance(args, ApplicationTargetGroupTrackingPolicyArgs):
        predefined = PredefinedMetricTargetTrackingPolicyArgs(
            predefined_metric_type="ALBRequestCountPerTarget",
            resource_label=request_count_resource_label(args.load_balancer, args.target_group),
            target_value=args.target_value,
            adjustment_type=args.adjustment_type,
            disable_scale_in=args.disable_scale_in,
            estimated_instance_warmup=args.estimated_instance_warmup,
            min_adjustment_magnitude=args.min_adjustment_magnitude)
        return create_predefined_metric_target_tracking_policy(name, group, predefined, opts)
    raise TypeError(f"Unsupported scaling policy arguments: {type(args).__name__}")
