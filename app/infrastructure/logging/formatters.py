"""structlog processors used by the catalog's logging pipeline."""

from collections.abc import Mapping, Sequence
from typing import Any

EventDict = dict[str, Any]


def add_service_info(service: str, git_sha: str = "unknown"):
    """Stamp every entry with the service name and deployed commit."""

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict.setdefault("service", service)
        event_dict.setdefault("git_sha", git_sha)
        return event_dict

    return processor


def summarize_catalog_values(max_length: int = 500, max_items: int = 20):
    """Keep catalog payloads from flooding a log line.

    Long strings (generated scripts, messages) are cut to ``max_length``.
    Mappings and lists with more than ``max_items`` entries, such as a whole
    namespace or a key list, are replaced by a short summary.

    Args:
        max_length: Longest string kept verbatim.
        max_items: Largest collection kept verbatim.

    Returns:
        A structlog processor function.
    """

    def summarize(value: Any) -> Any:
        if isinstance(value, str):
            if len(value) > max_length:
                return f"{value[:max_length]}...[{len(value)} chars]"
            return value
        if isinstance(value, Mapping) and len(value) > max_items:
            return f"<{len(value)} entries>"
        if (
            isinstance(value, Sequence)
            and not isinstance(value, (bytes, bytearray))
            and len(value) > max_items
        ):
            return [*value[:max_items], f"...[{len(value) - max_items} more]"]
        return value

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        for key, value in event_dict.items():
            if key != "event":
                event_dict[key] = summarize(value)
        return event_dict

    return processor
