"""Failures raised by the sampler commands.

Every error terminates the single command invocation; the host command layer
presents the message to the user.
"""


class SamplerCommandError(Exception):
    """Base class for sampler command failures."""


class InvalidArgument(SamplerCommandError, ValueError):
    """A required argument is missing or has the wrong type."""


class InvalidValue(InvalidArgument):
    """A value could not be coerced for the target parameter."""


class NotFound(SamplerCommandError, LookupError):
    """No parameter matches the requested name or id."""


class StaleControlError(SamplerCommandError, ReferenceError):
    """The UI element behind a control handle no longer exists."""
