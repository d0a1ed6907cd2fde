# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, List, Optional, Type

from samplerctl.models import ArgumentInfo


class ReceiverBasic(ABC):
    """The abstract receiver interface."""

    _command_registry: Dict[str, Type[CommandBasic]] = {}

    @property
    def command_registry(self) -> Dict[str, Type[CommandBasic]]:
        return self._command_registry

    def list_commands(self) -> List[str]:
        return list(self.command_registry.keys())

    @property
    def supported_command_names(self) -> List[str]:
        return list(self.command_registry.keys())

    def self_command_mapping(self) -> Dict[str, ReceiverBasic]:
        return {command_name: self for command_name in self.supported_command_names}

    @classmethod
    def register(cls, command_class: Type[CommandBasic]) -> Type[CommandBasic]:
        """Decorator to register a command class."""
        cls._command_registry[command_class.name()] = command_class
        return command_class

    @property
    def type_name(self) -> str:
        return self.__class__.__name__


class CommandBasic(ABC):
    """The abstract command interface.

    ``params`` carries the named arguments and ``unnamed`` the positional
    one, matching how the host's command parser hands them over.
    """

    help_string: ClassVar[str] = ""
    returns: ClassVar[str] = "void"
    named_arguments: ClassVar[List[ArgumentInfo]] = []
    unnamed_arguments: ClassVar[List[ArgumentInfo]] = []

    def __init__(
        self,
        receiver: ReceiverBasic,
        params: Optional[Dict[str, Any]] = None,
        unnamed: Any = None,
    ) -> None:
        self.receiver = receiver
        self.params = params if params is not None else {}
        self.unnamed = unnamed

    @abstractmethod
    def execute(self) -> Any:
        pass

    @classmethod
    @abstractmethod
    def name(cls) -> str:
        return cls.__name__


class ReceiverFactory(ABC):
    """The abstract receiver factory interface."""

    @abstractmethod
    def create_receiver(self, *args, **kwargs) -> ReceiverBasic:
        pass

    @classmethod
    def name(cls) -> str:
        return cls.__name__
