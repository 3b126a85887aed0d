import pytest

from awsxclassic.config import Config, RoleConfig, load_config
from awsxclassic.errors import ConfigurationError

CONFIG_YAML = """
team: platform
service: web
environment: dev
region: us-east-1
tags:
  team: platform
aws_resources:
  - name: web-asg
    type: autoscaling.Group
    args:
      minSize: 1
      maxSize: 2
roles:
  - name: task-role
    args:
      policyArns: [arn:aws:iam::aws:policy/ReadOnlyAccess]
scaling_policies:
  - name: cpu
    group: web-asg
    kind: predefined_metric
    args:
      predefinedMetricType: ASGAverageCPUUtilization
      targetValue: 50
"""


def test_load_config(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(CONFIG_YAML)

    config = Config.from_dict(load_config(str(path)))

    assert (config.team, config.service, config.environment, config.region) == ("platform", "web", "dev", "us-east-1")
    assert config.tags == {"team": "platform"}
    assert config.aws_resources[0].type == "autoscaling.Group"
    assert config.roles == [RoleConfig(name="task-role", args={"policyArns": ["arn:aws:iam::aws:policy/ReadOnlyAccess"]})]
    assert config.scaling_policies[0].kind == "predefined_metric"
    assert config.scaling_policies[0].group == "web-asg"


def test_load_config_requires_the_naming_keys(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("team: platform\nservice: web\nenvironment: dev\n")

    with pytest.raises(ConfigurationError, match="region"):
        load_config(str(path))


def test_load_config_rejects_non_mapping(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("- just\n- a list\n")

    with pytest.raises(ConfigurationError):
        load_config(str(path))


def test_from_dict_rejects_unknown_entry_keys():
    data = {
        "team": "platform", "service": "web", "environment": "dev", "region": "us-east-1",
        "roles": [{"name": "task-role", "policy": "oops"}],
    }

    with pytest.raises(ConfigurationError):
        Config.from_dict(data)


def test_optional_sections_default_to_empty():
    config = Config.from_dict({"team": "t", "service": "s", "environment": "e", "region": "r"})

    assert config.tags == {}
    assert config.aws_resources == config.roles == config.scaling_policies == []
