from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass
class SamplerConfig:
    """Configuration for sampler parameter discovery and coercion."""

    panel_id: str = "left-nav-panel"
    excluded_section_id: str = "openai_settings"
    # Removed once each, in this order, from a control's raw id.
    id_strip_tokens: Tuple[str, ...] = (
        "_counter",
        "_textgenerationwebui",
        "_openai",
        "_novel",
        "openai_",
        "oai_",
    )
    truthy_tokens: Tuple[str, ...] = field(default=("on", "true", "1"))
    change_event: str = "input"


# Module-level late-binding singleton
_config: Optional[SamplerConfig] = None


def configure(**kwargs) -> SamplerConfig:
    """Create and set the global SamplerConfig.

    :param kwargs: Fields to override on SamplerConfig.
    :return: The configured SamplerConfig instance.
    """
    global _config
    _config = SamplerConfig(**kwargs)
    return _config


def get_sampler_config() -> SamplerConfig:
    """Return the current config, creating a default if needed."""
    global _config
    if _config is None:
        _config = SamplerConfig()
    return _config
