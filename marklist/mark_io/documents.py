# marklist/mark_io/documents.py
# Read & write reviewed text files as Buffers

from pathlib import Path

from ..core.buffer import Buffer
from ..core.exceptions import FileReadError, FileWriteError
from ..core.verbose import vlog_file_read, vlog_file_write
from .generics import ensure_parent


# * Load a UTF-8 text file into a fresh Buffer (cursor on the first line)
def read_buffer(path: Path) -> Buffer:
    try:
        # newline="" keeps CRLF & lone CR as written; Buffer.from_text decides the terminator
        with open(path, encoding="utf-8", newline="") as f:
            text = f.read()
    except FileNotFoundError:
        raise FileReadError(f"File not found: {path}", path)
    except UnicodeDecodeError as e:
        raise FileReadError(f"Cannot decode {path} as UTF-8: {e}", path)
    except OSError as e:
        raise FileReadError(f"Cannot read {path}: {e}", path) from e

    vlog_file_read(path, len(text))
    return Buffer.from_text(text)


# * Write the buffer back & clear its modified flag
def write_buffer(buffer: Buffer, path: Path) -> None:
    content = buffer.text
    try:
        ensure_parent(path)
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(content)
    except OSError as e:
        raise FileWriteError(f"Cannot write {path}: {e}", path) from e

    buffer.modified = False
    vlog_file_write(path, len(content))
