from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Union

from smarthome.io.schema import HomeInput


def parse_home_input(data: Dict[str, Any]) -> HomeInput:
    """Validate a decoded payload (`devices`, `rates`, `maxPower`) into HomeInput."""
    return HomeInput.model_validate(data)


def load_home_input(path: Union[str, Path]) -> HomeInput:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Input file not found: {path}")
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    return parse_home_input(data)
