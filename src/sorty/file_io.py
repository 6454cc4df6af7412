"""File I/O for the CLI: atomic writes, error reporting, and buffer round-trips."""

import os
import sys
import tempfile
from contextlib import contextmanager

import click

from sorty.editor.text_buffer import TextBuffer


def atomic_write(file_path: str, content: str, newline: str = '\n') -> None:
    """Replace a file's text atomically, writing each ``\\n`` as ``newline``."""
    dir_name = os.path.dirname(os.path.abspath(file_path))
    fd, tmp_path = tempfile.mkstemp(dir=dir_name, suffix='.tmp')
    try:
        with os.fdopen(fd, 'w', encoding='utf-8', newline=newline) as f:
            f.write(content)
        os.replace(tmp_path, file_path)
    except Exception:
        os.unlink(tmp_path)
        raise


@contextmanager
def with_error_handling():
    """Report bad input or an unusable file on stderr and exit 1."""
    try:
        yield
    except (ValueError, OSError) as e:
        click.echo(str(e), err=True)
        sys.exit(1)


def _line_separator(newlines) -> str:
    # f.newlines is None, one separator, or a tuple when the file mixes them
    if isinstance(newlines, str):
        return newlines
    if newlines:
        return newlines[0]
    return '\n'


@contextmanager
def with_text_buffer_update(text_file):
    """Yield a TextBuffer over the file's lines; write it back if they changed.

    Lines are read with universal newlines, so ``\\r`` never ends up inside a
    line, and the file is written back with the separator it was read with.
    """
    with open(text_file, "r", encoding="utf-8") as f:
        original_text = f.read()
        separator = _line_separator(f.newlines)
    buffer = TextBuffer.from_text(original_text)
    yield buffer
    result = buffer.to_text()
    if result != original_text:
        atomic_write(text_file, result, newline=separator)
