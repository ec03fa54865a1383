"""Output formatting for llm-quota."""

from llmquota.display.json import encode_json, output_json_pretty

__all__ = [
    "encode_json",
    "output_json_pretty",
]
