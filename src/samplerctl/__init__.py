"""samplerctl — get and set sampler parameter controls of a chat UI settings panel.

Core exports for library usage. Importing this module triggers
registration of ParameterReceiver commands.
"""

from samplerctl._version import __version__
from samplerctl.config import SamplerConfig, configure, get_sampler_config
from samplerctl.errors import (
    SamplerCommandError,
    InvalidArgument,
    InvalidValue,
    NotFound,
    StaleControlError,
)
from samplerctl.tree import Element, Event, UIDocument
from samplerctl.targets import (
    ControlHandle,
    ParameterKind,
    ParameterSuggestion,
    SamplerParameter,
)
from samplerctl.models import Result, ResultStatus, CommandInfo
from samplerctl.command.basic import CommandBasic, ReceiverBasic, ReceiverFactory
from samplerctl.command.puppeteer import CommandDispatcher, ReceiverManager
from samplerctl.command.executor import ActionExecutor

# Import control module to trigger @ParameterReceiver.register decorators
import samplerctl.control.controller  # noqa: F401

from samplerctl.control.controller import ParameterReceiver
from samplerctl.control.inspector import ParameterEnumerator

__all__ = [
    "__version__",
    # Config
    "SamplerConfig",
    "configure",
    "get_sampler_config",
    # Errors
    "SamplerCommandError",
    "InvalidArgument",
    "InvalidValue",
    "NotFound",
    "StaleControlError",
    # UI tree
    "Element",
    "Event",
    "UIDocument",
    # Parameters
    "ControlHandle",
    "ParameterKind",
    "ParameterSuggestion",
    "SamplerParameter",
    # Models
    "Result",
    "ResultStatus",
    "CommandInfo",
    # Command layer
    "CommandBasic",
    "ReceiverBasic",
    "ReceiverFactory",
    "CommandDispatcher",
    "ReceiverManager",
    "ActionExecutor",
    # Control layer
    "ParameterReceiver",
    "ParameterEnumerator",
]
