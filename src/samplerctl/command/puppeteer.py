# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""CommandDispatcher and ReceiverManager — command orchestration layer."""

from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Any, Deque, Dict, List, Optional, Type, Union

from samplerctl.command.basic import CommandBasic, ReceiverBasic, ReceiverFactory
from samplerctl.config import SamplerConfig
from samplerctl.tree import UIDocument

if TYPE_CHECKING:
    from samplerctl.control.controller import ParameterReceiver
    from samplerctl.targets import ParameterSuggestion


class CommandDispatcher:
    """Routes sampler command invocations to their receiver."""

    def __init__(
        self, document: UIDocument, config: Optional[SamplerConfig] = None
    ) -> None:
        self.document = document
        self.command_queue: Deque[CommandBasic] = deque()
        self.receiver_manager = ReceiverManager()
        self.receiver_manager.create_parameter_receiver(document, config)

    def create_command(
        self,
        command_name: str,
        params: Optional[Dict[str, Any]] = None,
        unnamed: Any = None,
    ) -> CommandBasic:
        receiver = self.receiver_manager.get_receiver_from_command_name(command_name)
        command = receiver.command_registry.get(command_name.lower(), None)

        if command is None:
            raise ValueError(f"Command {command_name} is not supported.")

        return command(receiver, params, unnamed)

    def execute_command(
        self,
        command_name: str,
        params: Optional[Dict[str, Any]] = None,
        unnamed: Any = None,
    ) -> Any:
        command = self.create_command(command_name, params, unnamed)
        return command.execute()

    def add_command(
        self,
        command_name: str,
        params: Optional[Dict[str, Any]] = None,
        unnamed: Any = None,
    ) -> None:
        command = self.create_command(command_name, params, unnamed)
        self.command_queue.append(command)

    def execute_all_commands(self) -> List[Any]:
        results = []
        while self.command_queue:
            command = self.command_queue.popleft()
            results.append(command.execute())
        return results

    def get_command_queue_length(self) -> int:
        return len(self.command_queue)

    def list_commands(self) -> set:
        command_list = []
        for receiver in self.receiver_manager.receiver_list:
            command_list.extend(receiver.list_commands())
        return set(command_list)

    def get_command_class(self, command_name: str) -> Type[CommandBasic]:
        receiver = self.receiver_manager.get_receiver_from_command_name(command_name)
        return receiver.command_registry[command_name.lower()]

    def suggestions_for(self, command_name: str) -> List[ParameterSuggestion]:
        """Completion entries for a command's parameter-name argument."""
        command = self.get_command_class(command_name)
        arguments = command.named_arguments + command.unnamed_arguments
        if not any(arg.has_suggestions for arg in arguments):
            return []
        receiver = self.receiver_manager.get_receiver_from_command_name(command_name)
        return receiver.suggestions()

    @staticmethod
    def get_command_string(
        command_name: str, params: Dict[str, Any], unnamed: Any = None
    ) -> str:
        parts = [f"{k}={v}" for k, v in params.items()]
        if unnamed is not None:
            parts.append(str(unnamed))
        return " ".join([f"/{command_name}"] + parts)


class ReceiverManager:
    """Manages receivers and maps command names to the right receiver."""

    _receiver_factory_registry: Dict[str, Dict[str, Union[str, ReceiverFactory]]] = {}

    def __init__(self) -> None:
        self.receiver_registry: Dict[str, ReceiverBasic] = {}
        self.parameter_receiver: Optional[ParameterReceiver] = None
        self._receiver_list: List[ReceiverBasic] = []

    def create_parameter_receiver(
        self, document: UIDocument, config: Optional[SamplerConfig] = None
    ) -> ParameterReceiver:
        factory: ReceiverFactory = self.receiver_factory_registry.get(
            "SamplerParameter"
        ).get("factory")
        self.parameter_receiver = factory.create_receiver(document, config)
        # Replace a previous parameter receiver instead of accumulating them
        self._receiver_list = [
            r for r in self._receiver_list
            if not isinstance(r, type(self.parameter_receiver))
        ]
        self._receiver_list.append(self.parameter_receiver)
        self._update_receiver_registry()
        return self.parameter_receiver

    def _update_receiver_registry(self) -> None:
        for receiver in self.receiver_list:
            if receiver is not None:
                self.receiver_registry.update(receiver.self_command_mapping())

    def get_receiver_from_command_name(self, command_name: str) -> ReceiverBasic:
        receiver = self.receiver_registry.get(command_name.lower(), None)
        if receiver is None:
            raise ValueError(f"Receiver for command {command_name} is not found.")
        return receiver

    @property
    def receiver_list(self) -> List[ReceiverBasic]:
        return self._receiver_list

    @property
    def receiver_factory_registry(
        self,
    ) -> Dict[str, Dict[str, Union[str, ReceiverFactory]]]:
        return self._receiver_factory_registry

    @classmethod
    def register(
        cls, receiver_factory_class: Type[ReceiverFactory]
    ) -> Type[ReceiverFactory]:
        """Decorator to register a receiver factory class."""
        cls._receiver_factory_registry[receiver_factory_class.name()] = {
            "factory": receiver_factory_class(),
        }
        return receiver_factory_class
