# SPDX-License-Identifier: Apache-2.0
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List


def ensure_dir(path: Path) -> None:
    path.mkdir(parents=True, exist_ok=True)


def read_json(path: Path) -> Any:
    return json.loads(Path(path).read_text(encoding="utf-8"))


def write_json(path: Path, data: Any) -> None:
    path = Path(path)
    ensure_dir(path.parent)
    path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")


def load_keypoints(path: Path) -> List[Dict[str, Any]]:
    """Read a keypoint file.

    Accepts either a bare list of ``{name, x, y}`` objects or a detector dump
    of the form ``{"keypoints": [...]}``.
    """
    data = read_json(path)
    if isinstance(data, dict):
        data = data.get("keypoints", [])
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a list of keypoints")
    return data
