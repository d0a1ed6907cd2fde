# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""ParameterReceiver and the sampler-get / sampler-set commands."""

from __future__ import annotations

import logging
import math
from typing import Any, Dict, List, Optional, Type

from samplerctl._utils import format_number, is_true_boolean, parse_float
from samplerctl.command.basic import CommandBasic, ReceiverBasic, ReceiverFactory
from samplerctl.command.puppeteer import ReceiverManager
from samplerctl.config import SamplerConfig, get_sampler_config
from samplerctl.control.inspector import ParameterEnumerator
from samplerctl.errors import InvalidArgument, InvalidValue, NotFound
from samplerctl.models import ArgumentInfo
from samplerctl.targets import ParameterKind, ParameterSuggestion, SamplerParameter
from samplerctl.tree import UIDocument

logger = logging.getLogger(__name__)


def _require_string(value: Any, what: str) -> str:
    if not value:
        raise InvalidArgument(f"{what} is required.")
    if not isinstance(value, str):
        raise InvalidArgument(f"{what} must be a string.")
    return value


def clamp(number: float, low: float, high: float) -> float:
    """Clamp ``number`` into ``[low, high]``; a NaN bound leaves that side open."""
    if not math.isnan(low):
        number = max(number, low)
    if not math.isnan(high):
        number = min(number, high)
    return number


class ParameterReceiver(ReceiverBasic):
    """The parameter receiver — reads and writes sampler controls of a document."""

    _command_registry: Dict[str, Type[CommandBasic]] = {}

    def __init__(
        self, document: UIDocument, config: Optional[SamplerConfig] = None
    ) -> None:
        self.document = document
        self.config = config or get_sampler_config()
        self.enumerator = ParameterEnumerator(document, self.config)

    @property
    def type_name(self) -> str:
        return "SamplerParameter"

    def lookup(self, name: Any) -> SamplerParameter:
        name = _require_string(name, "Parameter name").strip().lower()
        parameter = self.enumerator.find(name)
        if parameter is None:
            raise NotFound(f'Parameter "{name}" not found.')
        return parameter

    def get_parameter(self, name: Any) -> str:
        parameter = self.lookup(name)
        if parameter.type == ParameterKind.CHECKBOX:
            return "true" if parameter.checked else "false"
        return format_number(parameter.value)

    def set_parameter(self, name: Any, value: Any) -> str:
        parameter = self.lookup(name)
        value = _require_string(value, "Value")
        handle = parameter.control

        if parameter.type == ParameterKind.CHECKBOX:
            # Unrecognised tokens clear the box rather than failing.
            handle.set_checked(is_true_boolean(value, self.config.truthy_tokens))
            logger.info(f"Set {parameter.id} checked={handle.checked}")
        else:
            number = parse_float(value)
            if math.isnan(number) or math.isinf(number):
                raise InvalidValue("Value must be convertible to a finite number.")
            clamped = clamp(number, parameter.min, parameter.max)
            handle.set_value(clamped)
            logger.info(f"Set {parameter.id} value={format_number(clamped)}")

        handle.notify_changed()
        return ""

    def suggestions(self) -> List[ParameterSuggestion]:
        return self.enumerator.suggestions()


@ReceiverManager.register
class ParameterReceiverFactory(ReceiverFactory):
    """Factory for the parameter receiver."""

    def create_receiver(
        self, document: UIDocument, config: Optional[SamplerConfig] = None
    ) -> ParameterReceiver:
        return ParameterReceiver(document, config)

    @classmethod
    def name(cls) -> str:
        return "SamplerParameter"


class ParameterCommand(CommandBasic):
    """Base class for parameter commands."""

    def __init__(
        self,
        receiver: ParameterReceiver,
        params: Optional[Dict[str, Any]] = None,
        unnamed: Any = None,
    ) -> None:
        super().__init__(receiver, params, unnamed)
        self.receiver: ParameterReceiver = receiver


@ParameterReceiver.register
class SamplerGetCommand(ParameterCommand):
    help_string = "Gets the value of a sampling parameter."
    returns = "number / boolean"
    unnamed_arguments = [
        ArgumentInfo(
            description="The name of the parameter to get.",
            types=["string"],
            has_suggestions=True,
        ),
    ]

    def execute(self) -> str:
        return self.receiver.get_parameter(self.unnamed)

    @classmethod
    def name(cls) -> str:
        return "sampler-get"


@ParameterReceiver.register
class SamplerSetCommand(ParameterCommand):
    help_string = "Sets the value of a sampling parameter."
    returns = "void"
    named_arguments = [
        ArgumentInfo(
            name="name",
            description="The name of the parameter to set.",
            types=["string"],
            has_suggestions=True,
        ),
    ]
    unnamed_arguments = [
        ArgumentInfo(
            description="The value to set.",
            types=["number", "boolean"],
        ),
    ]

    def execute(self) -> str:
        return self.receiver.set_parameter(self.params.get("name"), self.unnamed)

    @classmethod
    def name(cls) -> str:
        return "sampler-set"
