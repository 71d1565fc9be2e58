from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Tuple
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from ..api.meta import schedule_declarations
from ..config import AppSettings, get_settings
from .prompts import CLOCK_PROMPT_TEMPLATE, TOOL_USAGE_PROMPT_TEMPLATE

logger = logging.getLogger(__name__)


def _localize(instant: datetime, zone_name: Optional[str]) -> Tuple[datetime, str]:
    if zone_name:
        try:
            return instant.astimezone(ZoneInfo(zone_name)), zone_name
        except (ZoneInfoNotFoundError, ValueError):
            logger.warning("Unknown time zone %r; using the host's local zone.", zone_name)
    local = instant.astimezone()
    return local, local.tzname() or "local"


def system_instruction_parts(settings: AppSettings, *, now: Optional[datetime] = None) -> List[Dict[str, str]]:
    current, zone_label = _localize(now or datetime.now(timezone.utc), settings.live.timezone)
    return [
        {"text": TOOL_USAGE_PROMPT_TEMPLATE.format(default_name=settings.default_name)},
        {
            "text": CLOCK_PROMPT_TEMPLATE.format(
                today=current.date().isoformat(),
                now=current.isoformat(timespec="seconds"),
                timezone=zone_label,
            )
        },
        {"text": settings.live.language_prompt},
    ]


def function_declarations() -> List[Dict[str, Any]]:
    return schedule_declarations()


def build_live_config(settings: Optional[AppSettings] = None, *, now: Optional[datetime] = None) -> Dict[str, Any]:
    """Session setup sent once when the assistant mounts."""

    resolved = settings or get_settings()
    return {
        "model": resolved.live.model,
        "config": {
            "responseModalities": ["AUDIO"],
            "speechConfig": {
                "voiceConfig": {"prebuiltVoiceConfig": {"voiceName": resolved.live.voice}},
            },
            "systemInstruction": {"parts": system_instruction_parts(resolved, now=now)},
            "tools": [{"functionDeclarations": function_declarations()}],
        },
    }


__all__ = ["build_live_config", "function_declarations", "system_instruction_parts"]
