"""Shortcuts for the target tracking policies most groups need."""

from typing import Optional

import pulumi
import pulumi_aws as aws

from .policy import (
    ApplicationTargetGroupTrackingPolicyArgs,
    CustomMetricTargetTrackingPolicyArgs,
    PredefinedMetricTargetTrackingPolicyArgs,
    TargetTrackingPolicyArgs,
    create_custom_metric_target_tracking_policy,
    create_policy,
    create_predefined_metric_target_tracking_policy,
)


def _track_predefined(name: str, group: aws.autoscaling.Group, metric_type: str,
                      args: TargetTrackingPolicyArgs,
                      opts: Optional[pulumi.ResourceOptions]) -> aws.autoscaling.Policy:
    predefined = PredefinedMetricTargetTrackingPolicyArgs(
        predefined_metric_type=metric_type,
        target_value=args.target_value,
        adjustment_type=args.adjustment_type,
        disable_scale_in=args.disable_scale_in,
        estimated_instance_warmup=args.estimated_instance_warmup,
        min_adjustment_magnitude=args.min_adjustment_magnitude)
    return create_predefined_metric_target_tracking_policy(name, group, predefined, opts)


def scale_to_track_average_cpu_utilization(name: str, group: aws.autoscaling.Group,
                                           args: TargetTrackingPolicyArgs,
                                           opts: Optional[pulumi.ResourceOptions] = None) -> aws.autoscaling.Policy:
    """Keep the group's average CPU utilization at ``args.target_value`` percent."""
    return _track_predefined(name, group, "ASGAverageCPUUtilization", args, opts)


def scale_to_track_average_network_in(name: str, group: aws.autoscaling.Group,
                                      args: TargetTrackingPolicyArgs,
                                      opts: Optional[pulumi.ResourceOptions] = None) -> aws.autoscaling.Policy:
    """Keep the average bytes received per instance at ``args.target_value``."""
    return _track_predefined(name, group, "ASGAverageNetworkIn", args, opts)


def scale_to_track_average_network_out(name: str, group: aws.autoscaling.Group,
                                       args: TargetTrackingPolicyArgs,
                                       opts: Optional[pulumi.ResourceOptions] = None) -> aws.autoscaling.Policy:
    """Keep the average bytes sent per instance at ``args.target_value``."""
    return _track_predefined(name, group, "ASGAverageNetworkOut", args, opts)


def scale_to_track_request_count_per_target(name: str, group: aws.autoscaling.Group,
                                            args: ApplicationTargetGroupTrackingPolicyArgs,
                                            opts: Optional[pulumi.ResourceOptions] = None) -> aws.autoscaling.Policy:
    return create_policy(name, group, args, opts)


def scale_to_track_metric(name: str, group: aws.autoscaling.Group,
                          args: CustomMetricTargetTrackingPolicyArgs,
                          opts: Optional[pulumi.ResourceOptions] = None) -> aws.autoscaling.Policy:
    return create_custom_metric_target_tracking_policy(name, group, args, opts)
