"""ActionExecutor — runs commands and reports outcomes as Result objects."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from samplerctl.command.puppeteer import CommandDispatcher
from samplerctl.errors import SamplerCommandError
from samplerctl.models import CommandInfo, Result, ResultStatus

logger = logging.getLogger(__name__)


class ActionExecutor:
    """Executes sampler commands and records each invocation.

    Command failures never escape ``execute``: they come back as a
    ``Result`` with ``failure`` status and the error message, for the host
    to show to the user.
    """

    def __init__(self, dispatcher: CommandDispatcher) -> None:
        self.dispatcher = dispatcher
        self.history: List[CommandInfo] = []

    def execute(
        self,
        command_name: str,
        params: Optional[Dict[str, Any]] = None,
        unnamed: Any = None,
    ) -> Result:
        params = params or {}
        arguments = dict(params)
        if unnamed is not None:
            arguments["_unnamed"] = unnamed

        try:
            value = self.dispatcher.execute_command(command_name, params, unnamed)
            result = Result(status=ResultStatus.SUCCESS, result=value)
        except (SamplerCommandError, ValueError) as e:
            logger.info("Command %s failed: %s", command_name, e)
            result = Result(
                status=ResultStatus.FAILURE,
                error=str(e),
                error_type=type(e).__name__,
            )

        self.history.append(
            CommandInfo(function=command_name, arguments=arguments, result=result)
        )
        return result
