from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict

ENDPOINTS_FILE = Path(__file__).resolve().parents[1] / "endpoints.json"


@lru_cache(maxsize=1)
def load_endpoints() -> Dict[str, Any]:
    """Endpoint catalogue served at ``GET /api``."""
    with ENDPOINTS_FILE.open(encoding="utf-8") as fh:
        return json.load(fh)
