"""Output formatting for CLI — text (human) and JSON (script) modes."""

from __future__ import annotations

import json
import sys
from typing import Any, List

from samplerctl._utils import format_number
from samplerctl.targets import ParameterKind, SamplerParameter


def _safe_print(text: str, file=None) -> None:
    """Print text, replacing characters the stream encoding cannot represent."""
    file = file or sys.stdout
    try:
        print(text, file=file)
    except UnicodeEncodeError:
        encoding = getattr(file, "encoding", "utf-8") or "utf-8"
        print(text.encode(encoding, errors="replace").decode(encoding), file=file)


def output(data: Any, as_json: bool = False) -> None:
    """Print data to stdout in the requested format."""
    if as_json:
        if isinstance(data, (dict, list)):
            _safe_print(json.dumps(data, indent=2, ensure_ascii=False))
        else:
            _safe_print(json.dumps({"result": str(data)}, ensure_ascii=False))
    else:
        if isinstance(data, str):
            _safe_print(data)
        elif isinstance(data, dict):
            for k, v in data.items():
                _safe_print(f"{k}: {v}")
        elif isinstance(data, list):
            for item in data:
                _safe_print(str(item))
        else:
            _safe_print(str(data))


def output_error(message: str, as_json: bool = False) -> None:
    """Print an error message to stderr."""
    if as_json:
        _safe_print(json.dumps({"error": message}, ensure_ascii=False), file=sys.stderr)
    else:
        _safe_print(f"Error: {message}", file=sys.stderr)


def format_parameter_list(
    parameters: List[SamplerParameter], as_json: bool = False
) -> Any:
    """Format parameters for display, one ``[id] [type] "name" = value`` per line."""
    if as_json:
        # model_dump_json writes non-finite bounds of checkboxes as null
        return [json.loads(p.model_dump_json()) for p in parameters]
    lines = []
    for p in parameters:
        if p.type == ParameterKind.CHECKBOX:
            current = "true" if p.checked else "false"
        else:
            current = f"{format_number(p.value)} [{format_number(p.min)}..{format_number(p.max)}]"
        lines.append(f'[{p.id}] [{p.type.value}] "{p.name}" = {current}')
    return "\n".join(lines)
