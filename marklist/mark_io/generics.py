# marklist/mark_io/generics.py
# Generic filesystem & JSON helpers

import json
from pathlib import Path
from typing import Any, Union

from ..core.exceptions import JSONParsingError
from ..core.verbose import vlog_file_read, vlog_file_write


def ensure_parent(path: Union[Path, str]) -> None:
    Path(path).parent.mkdir(parents=True, exist_ok=True)


# write JSON w/ UTF-8 encoding, creating parent dirs as needed
def write_json_safe(obj: dict[str, Any], path: Path) -> None:
    ensure_parent(path)
    content = json.dumps(obj, indent=2, ensure_ascii=False)
    path.write_text(content, encoding="utf-8")
    vlog_file_write(path, len(content))


# * Read a JSON object; decode errors carry a numbered snippet around the bad line
def read_json_safe(path: Path) -> dict[str, Any]:
    text = Path(path).read_text(encoding="utf-8")
    vlog_file_read(path, len(text))
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise JSONParsingError(
            f"Invalid JSON in {path}:\n{_error_snippet(text, e.lineno)}\nError: {e.msg}"
        ) from e

    if not isinstance(data, dict):
        raise JSONParsingError(
            f"Expected a JSON object in {path}, got {type(data).__name__}"
        )
    return data


def _error_snippet(text: str, lineno: int, context: int = 2) -> str:
    lines = text.split("\n")
    # JSONDecodeError line numbers are 1-based
    start = max(0, lineno - 1 - context)
    end = min(len(lines), lineno + context)
    numbered = []
    for i, line in enumerate(lines[start:end], start=start + 1):
        marker = ">>> " if i == lineno else "    "
        numbered.append(f"{marker}{i:3}: {line}")
    return "\n".join(numbered)
