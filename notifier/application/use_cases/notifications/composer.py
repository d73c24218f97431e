"""Render notification content for an event from the message catalogue."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from notifier.utils import truncate

from .templates import (
    ACTION_URL_PATTERNS,
    DEFAULT_ACTION_URL,
    DEFAULT_ENTITY_NAME,
    DEFAULT_TEMPLATE,
    DERIVED_FIELDS,
    FIELD_FORMATTERS,
    Clause,
    Part,
    get_template,
)

SHORT_MESSAGE_LIMIT = 100


@dataclass(frozen=True)
class ComposedMessage:
    """Content shared by every notification created for one event."""

    title: str
    message: str
    short_message: str
    action_url: str | None = None


class _RenderContext(dict):
    def __missing__(self, key: str) -> str:
        return ""


def _is_present(value: Any) -> bool:
    return value is not None and value != ""


def _build_context(event_type: str, data: Mapping[str, Any]) -> tuple[dict, _RenderContext]:
    raw: dict[str, Any] = dict(data)
    for field, derive in DERIVED_FIELDS.items():
        raw[field] = derive(data)

    context = _RenderContext()
    for key, value in raw.items():
        if not _is_present(value):
            continue
        formatter = FIELD_FORMATTERS.get(key)
        context[key] = formatter(value) if formatter else str(value)

    name = data.get("entityName")
    context["name"] = str(name) if _is_present(name) else DEFAULT_ENTITY_NAME
    context["eventType"] = event_type
    return raw, context


def _render(parts: Iterable[Part], raw: Mapping[str, Any], context: _RenderContext) -> str:
    rendered: list[str] = []
    for part in parts:
        if isinstance(part, Clause):
            if all(_is_present(raw.get(field)) for field in part.requires):
                rendered.append(part.text.format_map(context))
            elif part.otherwise:
                rendered.append(part.otherwise.format_map(context))
        else:
            rendered.append(part.format_map(context))
    return "".join(rendered)


def build_action_url(data: Mapping[str, Any]) -> str | None:
    """Return the dashboard link for the entity referenced by ``data``."""

    entity_type = data.get("entityType") or data.get("relatedEntityType")
    entity_id = data.get("entityId") or data.get("relatedEntityId")
    if not entity_type or not _is_present(entity_id):
        return None
    pattern = ACTION_URL_PATTERNS.get(str(entity_type))
    if pattern is None:
        return DEFAULT_ACTION_URL
    return pattern.format(id=entity_id)


def compose(event_type: str, event_data: Mapping[str, Any] | None) -> ComposedMessage:
    """Return the title, messages and action link for ``event_type``.

    A caller supplied ``message`` is used verbatim together with the caller's
    ``shortMessage`` (or the first 100 characters of the message).
    """

    data = event_data or {}
    template = get_template(event_type)

    custom_message = data.get("message")
    if _is_present(custom_message):
        message = str(custom_message)
        short_message = data.get("shortMessage")
        short = str(short_message) if _is_present(short_message) else truncate(
            message, SHORT_MESSAGE_LIMIT
        )
    else:
        raw, context = _build_context(event_type, data)
        message = _render(template.message, raw, context)
        short = _render(template.short, raw, context) or truncate(
            message, SHORT_MESSAGE_LIMIT
        )

    title = data.get("title")
    action_url = data.get("actionUrl")
    return ComposedMessage(
        title=str(title) if _is_present(title) else template.title,
        message=message,
        short_message=short,
        action_url=str(action_url) if _is_present(action_url) else build_action_url(data),
    )


def compose_fallback(event_type: str) -> ComposedMessage:
    """Return the generic content used when an event payload cannot be rendered."""

    raw, context = _build_context(event_type, {})
    message = _render(DEFAULT_TEMPLATE.message, raw, context)
    return ComposedMessage(
        title=DEFAULT_TEMPLATE.title,
        message=message,
        short_message=_render(DEFAULT_TEMPLATE.short, raw, context)
        or truncate(message, SHORT_MESSAGE_LIMIT),
    )


__all__ = [
    "ComposedMessage",
    "SHORT_MESSAGE_LIMIT",
    "build_action_url",
    "compose",
    "compose_fallback",
]
