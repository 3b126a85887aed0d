import pulumi
import pytest

from awsxclassic.autoscaling import (
    CustomMetricTargetTrackingPolicyArgs,
    TargetTrackingPolicyArgs,
    scale_to_track_average_cpu_utilization,
    scale_to_track_average_network_in,
    scale_to_track_average_network_out,
    scale_to_track_metric,
)
from awsxclassic.cloudwatch import Metric


@pytest.mark.parametrize("track, metric_type", [
    (scale_to_track_average_cpu_utilization, "ASGAverageCPUUtilization"),
    (scale_to_track_average_network_in, "ASGAverageNetworkIn"),
    (scale_to_track_average_network_out, "ASGAverageNetworkOut"),
])
@pulumi.runtime.test
def test_predefined_shortcuts(mocks, group_factory, track, metric_type):
    policy = track("tracked", group_factory(), TargetTrackingPolicyArgs(target_value=60, disable_scale_in=True))

    def check(_):
        (recorded,) = [r for r in mocks.resources if r.name == "tracked"]
        config = recorded.inputs["targetTrackingConfiguration"]
        assert config["predefinedMetricSpecification"] == {"predefinedMetricType": metric_type}
        assert config["disableScaleIn"] is True
        assert config["targetValue"] == 60

    return policy.urn.apply(check)


@pulumi.runtime.test
def test_scale_to_track_metric(mocks, group_factory):
    metric = Metric(name="Latency", namespace="Custom/Web").with_extended_statistic(99)
    policy = scale_to_track_metric("latency", group_factory(), CustomMetricTargetTrackingPolicyArgs(
        metric=metric, target_value=0.25))

    def check(_):
        (recorded,) = [r for r in mocks.resources if r.name == "latency"]
        spec = recorded.inputs["targetTrackingConfiguration"]["customizedMetricSpecification"]
        assert spec["statistic"] == "p99"
        assert spec["metricDimensions"] == []

    return policy.urn.apply(check)
