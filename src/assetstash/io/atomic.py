"""Atomic file persistence helpers."""

from __future__ import annotations

import os
import tempfile
from collections.abc import Iterator
from contextlib import contextmanager, suppress
from pathlib import Path
from typing import BinaryIO

DEFAULT_FILE_MODE = 0o666


def _current_umask() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return umask


@contextmanager
def atomic_open(path: Path, *, temp_prefix: str, temp_suffix: str) -> Iterator[BinaryIO]:
    """Yield a binary handle whose contents replace ``path`` only on success.

    The handle points at a temp file in the destination directory. It is renamed
    over ``path`` once the block exits cleanly, with the permissions a plain
    ``open`` would have given it under the current umask. On any failure,
    including a failed rename, the temp file is removed and the error re-raised.
    """
    path.parent.mkdir(parents=True, exist_ok=True)

    temp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            mode="wb",
            dir=path.parent,
            prefix=temp_prefix,
            suffix=temp_suffix,
            delete=False,
        ) as handle:
            temp_name = handle.name
            yield handle
        # NamedTemporaryFile creates files as 0600.
        os.chmod(temp_name, DEFAULT_FILE_MODE & ~_current_umask())
        os.replace(temp_name, path)
    except BaseException:
        if temp_name:
            with suppress(FileNotFoundError):
                Path(temp_name).unlink()
        raise
