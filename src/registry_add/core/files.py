"""Atomic JSON file writing."""

import json
import os
import tempfile
from pathlib import Path
from typing import Any


def safe_write_json(path: Path, data: Any) -> None:
    """Write ``data`` as pretty JSON to ``path`` atomically.

    The document is written to a temporary file in the destination directory
    and renamed over ``path``, so readers never observe a partial file.
    Parent directories are created as needed.

    Raises:
        OSError: If the directory or file cannot be written
        TypeError: If ``data`` is not JSON serializable
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    content = json.dumps(data, indent=2) + "\n"

    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    tmp_path = Path(tmp_name)
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(content)
        os.replace(tmp_path, path)
    except BaseException:
        tmp_path.unlink(missing_ok=True)
        raise
