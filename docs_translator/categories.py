# docs_translator/categories.py
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Mapping

from .errors import FilesystemError

logger = logging.getLogger("translator.categories")

CATEGORY_FILE = "_category_.json"


def category_descriptor(dir_name: str, labels: Mapping[str, str]) -> Dict[str, Any]:
    """Docusaurus sidebar descriptor for one docs directory."""
    return {
        "label": labels.get(dir_name, dir_name),
        "position": 1,
        "link": {"type": "generated-index"},
    }


def write_category_files(output_root: Path, labels: Mapping[str, str]) -> List[str]:
    """
    Write <output_root>/<dir>/_category_.json for every immediate subdirectory.

    Content depends only on the directory name and ``labels``, so running
    this twice gives byte-identical files. Returns the directory names.
    """
    output_root = Path(output_root)
    if not output_root.is_dir():
        logger.info(f"[CATEGORY] Output dir {output_root} does not exist, nothing to do")
        return []

    created: List[str] = []
    for entry in sorted(output_root.iterdir(), key=lambda p: p.name):
        if not entry.is_dir():
            continue
        descriptor = category_descriptor(entry.name, labels)
        text = json.dumps(descriptor, ensure_ascii=False, indent=2)
        path = entry / CATEGORY_FILE
        try:
            path.write_text(text, encoding="utf-8", newline="")
        except OSError as e:
            raise FilesystemError(f"Cannot write {path}: {e}") from e
        created.append(entry.name)

    logger.info(
        f"[CATEGORY] Wrote {len(created)} category files: {', '.join(created)}"
    )
    return created
