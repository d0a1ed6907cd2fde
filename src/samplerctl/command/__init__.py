"""Command layer — command pattern implementation for sampler commands."""

from samplerctl.command.basic import CommandBasic, ReceiverBasic, ReceiverFactory
from samplerctl.command.puppeteer import CommandDispatcher, ReceiverManager
from samplerctl.command.executor import ActionExecutor

__all__ = [
    "CommandBasic",
    "ReceiverBasic",
    "ReceiverFactory",
    "CommandDispatcher",
    "ReceiverManager",
    "ActionExecutor",
]
