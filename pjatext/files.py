"""
File primitives consumed by the commands and the engine.

These are deliberately thin: existence is checked up front by the callers,
so reads and writes are "unchecked" and let OSError propagate to the caller,
which turns it into an error Output.
"""
import os.path


def exists(path, /):
    """
    Return True when `path` names an existing regular file.
    """
    return bool(path) and os.path.isfile(path)


def read_unchecked(path, /):
    # newline="" keeps "\r\n" intact so char counts match the file on disk
    with open(path, encoding="utf-8", newline="") as stream:
        return stream.read()


def write_unchecked(path, content, /):
    """
    Overwrite `path` with `content` (truncate-then-write).
    """
    with open(path, "w", encoding="utf-8", newline="") as stream:
        stream.write(content)


def get_size(path, /):
    return os.path.getsize(path)


__all__ = (
    "exists",
    "read_unchecked",
    "write_unchecked",
    "get_size",
)
