from typing import List

import pulumi
import pytest


class RecordingMocks(pulumi.runtime.Mocks):
    """Echo inputs back as outputs and remember every registered resource."""

    def __init__(self):
        self.resources: List[pulumi.runtime.MockResourceArgs] = []

    def new_resource(self, args: pulumi.runtime.MockResourceArgs):
        self.resources.append(args)
        outputs = dict(args.inputs)
        if args.typ in ("aws:lb/loadBalancer:LoadBalancer", "aws:lb/targetGroup:TargetGroup"):
            outputs.setdefault("arnSuffix", f"{args.name}/arn-suffix")
        return [f"{args.name}_id", outputs]

    def call(self, args: pulumi.runtime.MockCallArgs):
        return {}

    def of_type(self, typ: str) -> List[pulumi.runtime.MockResourceArgs]:
        return [r for r in self.resources if r.typ == typ]


@pytest.fixture
def mocks():
    recording = RecordingMocks()
    pulumi.runtime.set_mocks(recording, preview=False)
    return recording


@pytest.fixture
def group_factory(mocks):
    import pulumi_aws as aws

    def make(name: str = "web-asg"):
        return aws.autoscaling.Group(
            name,
            name=name,
            min_size=1,
            max_size=4,
            availability_zones=["us-east-1a"])

    return make
