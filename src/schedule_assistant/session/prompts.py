from __future__ import annotations

TOOL_USAGE_PROMPT_TEMPLATE = (
    "You are a helpful assistant. For schedule queries call \"get_schedule_details\" with name and optional "
    "date/range. For changes call \"update_schedule\" with name, date, workType, and content. "
    "If the user says \"my schedule\" or omits name, default to {default_name}. If name not found, use nearest "
    "match. Offer concise selectable options in replies when appropriate."
)

CLOCK_PROMPT_TEMPLATE = (
    "Current date: {today}. Current time: {now}. Time zone: {timezone}. "
    "Use today when the user asks for \"today\" or current week."
)
