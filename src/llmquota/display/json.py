"""JSON output utilities for llm-quota."""

from __future__ import annotations

import json
import sys

import msgspec

__all__ = [
    "encode_json",
    "output_json_pretty",
]


def encode_json(data: object) -> bytes:
    """Encode data as JSON bytes.

    Args:
        data: Any msgspec-serializable object

    Returns:
        JSON-encoded bytes
    """
    return msgspec.json.encode(data)


def output_json_pretty(data: object, indent: int = 2) -> None:
    """Output data as pretty-printed JSON to stdout.

    Args:
        data: Any msgspec-serializable object (Struct, dict, list, etc.)
        indent: Number of spaces for indentation
    """
    # msgspec handles Structs and omitted defaults; json does the layout
    python_obj = msgspec.json.decode(encode_json(data))
    json_str = json.dumps(python_obj, indent=indent, ensure_ascii=False)
    sys.stdout.write(json_str)
    sys.stdout.write("\n")
    sys.stdout.flush()
