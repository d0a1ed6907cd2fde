"""Command result models — Result, CommandInfo and related data structures."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class ResultStatus(str, Enum):
    """Represents the status of a command execution result."""

    SUCCESS = "success"
    FAILURE = "failure"
    NONE = "none"


class Result(BaseModel):
    """Represents the result of a command execution."""

    status: ResultStatus = Field(..., description="Execution status")
    error: Optional[str] = Field(default=None, description="Error message if failed")
    error_type: Optional[str] = Field(default=None, description="Exception class name")
    result: Any = Field(default=None, description="Result payload")

    @property
    def ok(self) -> bool:
        return self.status == ResultStatus.SUCCESS


class ArgumentInfo(BaseModel):
    """Describes one argument a command accepts."""

    name: Optional[str] = None
    description: str = ""
    types: List[str] = Field(default_factory=lambda: ["string"])
    required: bool = True
    has_suggestions: bool = False


class CommandInfo(BaseModel):
    """What command was called, with which arguments, and how it went."""

    function: str = ""
    arguments: Dict[str, Any] = Field(default_factory=dict)
    result: Result = Field(default_factory=lambda: Result(status="none"))
    action_string: str = ""

    def model_post_init(self, __context: Any) -> None:
        self.action_string = CommandInfo.to_string(self.function, self.arguments)

    @staticmethod
    def to_string(command_name: str, params: Dict[str, Any]) -> str:
        """Generate a function call string."""
        args_str = ", ".join(f"{k}={v!r}" for k, v in params.items())
        return f"{command_name}({args_str})"

    def to_representation(self) -> str:
        """Generate a human-readable representation."""
        components = [f"[Command] {self.action_string}"]
        components.append(f"[Status] {self.result.status.value}")
        if self.result.error:
            components.append(f"[Error] {self.result.error}")
        components.append(f"[Result] {self.result.result!r}")
        return "\n".join(components)
