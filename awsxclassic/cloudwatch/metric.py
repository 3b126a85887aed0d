"""
CloudWatch metric descriptors used to drive custom-metric scaling policies.
"""

import dataclasses
from dataclasses import dataclass
from typing import Mapping, Optional

import pulumi

DEFAULT_PERIOD = 300
DEFAULT_STATISTIC = "Average"


@dataclass(frozen=True)
class Metric:
    """A CloudWatch metric: the namespace/name pair plus the dimensions, unit and
    statistic it should be read with.

    Instances are immutable; the ``with_*`` methods return modified copies.
    """
    name: pulumi.Input[str]
    namespace: pulumi.Input[str]
    dimensions: Optional[pulumi.Input[Mapping[str, pulumi.Input[str]]]] = None
    period: pulumi.Input[int] = DEFAULT_PERIOD
    statistic: Optional[pulumi.Input[str]] = None
    extended_statistic: Optional[pulumi.Input[float]] = None
    unit: Optional[pulumi.Input[str]] = None

    def with_dimensions(self, dimensions: Optional[pulumi.Input[Mapping[str, pulumi.Input[str]]]]) -> "Metric":
        """Return a copy whose dimensions are this metric's merged with ``dimensions``."""
        if dimensions is None:
            return self
        if isinstance(self.dimensions, pulumi.Output) or isinstance(dimensions, pulumi.Output):
            merged = pulumi.Output.all(self.dimensions, dimensions).apply(
                lambda d: {**(d[0] or {}), **(d[1] or {})})
        else:
            merged = {**(self.dimensions or {}), **dimensions}
        return dataclasses.replace(self, dimensions=merged)

    def with_period(self, period: pulumi.Input[int]) -> "Metric":
        return dataclasses.replace(self, period=period)

    def with_statistic(self, statistic: Optional[pulumi.Input[str]]) -> "Metric":
        return dataclasses.replace(self, statistic=statistic)

    def with_extended_statistic(self, extended_statistic: Optional[pulumi.Input[float]]) -> "Metric":
        return dataclasses.replace(self, extended_statistic=extended_statistic)

    def with_unit(self, unit: Optional[pulumi.Input[str]]) -> "Metric":
        return dataclasses.replace(self, unit=unit)


def _format_statistic(extended_statistic, statistic) -> str:
    if statistic is not None and extended_statistic is not None:
        raise ValueError("[statistic] and [extended_statistic] cannot both be provided.")
    if extended_statistic is not None:
        return f"p{extended_statistic}"
    return statistic if statistic is not None else DEFAULT_STATISTIC


def statistic_string(metric: Metric) -> pulumi.Output[str]:
    """The statistic CloudWatch should report for ``metric``, e.g. ``Average`` or ``p99``."""
    return pulumi.Output.all(metric.extended_statistic, metric.statistic).apply(
        lambda values: _format_statistic(values[0], values[1]))
