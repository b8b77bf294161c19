from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path
from typing import Iterable, Union

from .errors import IoFailure

log = logging.getLogger(__name__)

PathLike = Union[str, Path]


def read_file(path: PathLike) -> bytes:
    p = Path(path)
    try:
        data = p.read_bytes()
    except OSError as e:
        raise IoFailure(f"Error opening file: {e.strerror or e}", path=str(p)) from e
    log.debug("read %d bytes from %s", len(data), p)
    return data


def write_file(path: PathLike, data: Union[bytes, Iterable[bytes]]) -> None:
    """Write data (or a sequence of byte chunks) to path atomically.

    The target is only replaced once every chunk has been written, so a
    failure never leaves a truncated output file.
    """
    p = Path(path)
    chunks = [data] if isinstance(data, (bytes, bytearray, memoryview)) else data
    parent = p.parent
    tmp_name = None
    try:
        parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{p.name}.", suffix=".tmp", dir=parent)
        with os.fdopen(fd, "wb") as f:
            for chunk in chunks:
                f.write(chunk)
        os.replace(tmp_name, p)
        tmp_name = None
    except OSError as e:
        raise IoFailure(f"Error writing file: {e.strerror or e}", path=str(p)) from e
    finally:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)
    log.debug("wrote %s", p)
