from .policy import (
    ApplicationTargetGroupTrackingPolicyArgs,
    CustomMetricTargetTrackingPolicyArgs,
    PolicyArgs,
    PolicySpec,
    PredefinedMetricTargetTrackingPolicyArgs,
    SimplePolicyArgs,
    StepAdjustmentArgs,
    StepPolicyArgs,
    TargetTrackingPolicyArgs,
    convert_dimensions,
    create_custom_metric_target_tracking_policy,
    create_policy,
    create_predefined_metric_target_tracking_policy,
    create_simple_policy,
    create_step_policy,
    create_target_tracking_policy,
    lower_policy,
    lower_target_tracking_policy,
)
from .tracking import (
    scale_to_track_average_cpu_utilization,
    scale_to_track_average_network_in,
    scale_to_track_average_network_out,
    scale_to_track_metric,
    scale_to_track_request_count_per_target,
)
