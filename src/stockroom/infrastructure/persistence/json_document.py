"""Read and replace whole JSON documents on disk.

A document is written to a sibling temporary file and then moved over the
target with ``os.replace``, so readers see either the old or the new
contents and never a truncated file.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


def load(path: Path) -> list[dict]:
    return json.loads(path.read_text(encoding="utf-8"))


def replace(path: Path, records: list[dict]) -> None:
    payload = json.dumps(records, indent=2) + "\n"
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as tmp:
            tmp.write(payload)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def ensure(path: Path, label: str) -> None:
    if not path.exists():
        logger.info("Creating %s store at %s", label, path)
        path.parent.mkdir(parents=True, exist_ok=True)
        replace(path, [])
