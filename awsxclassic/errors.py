"""Exceptions raised by awsxclassic itself.

Provider-side validation errors (for example setting both ``name`` and
``name_prefix`` on a role) are not represented here; they surface from the
Pulumi engine when the resource is created.
"""


class AwsxClassicError(Exception):
    """Base class for errors raised by this package."""


class UnknownArgumentError(AwsxClassicError, AttributeError):
    def __init__(self, args_type: type, field: str):
        super().__init__(f"'{args_type.__name__}' has no argument named '{field}'")
        self.args_type = args_type
        self.field = field


class MissingRequiredArgumentError(AwsxClassicError, TypeError):
    def __init__(self, args_type: type, fields):
        missing = ", ".join(sorted(fields))
        super().__init__(f"Missing required argument(s) for '{args_type.__name__}': {missing}")
        self.args_type = args_type
        self.fields = sorted(fields)


class ConfigurationError(AwsxClassicError, ValueError):
    """Raised when the stack configuration cannot be turned into resources."""
