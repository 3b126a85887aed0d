"""Argument binders and scaling policy helpers layered over pulumi_aws."""

from . import autoscaling, cloudwatch, iam
from ._builder import ArgsBuilder, args_to_dict
from .errors import (
    AwsxClassicError,
    ConfigurationError,
    MissingRequiredArgumentError,
    UnknownArgumentError,
)

__version__ = "0.1.0"
