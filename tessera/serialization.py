"""
JSON rendering of Tessera records for display and debugging.

Records (Tile, Neighbor, Floor, Step, Path, ExplorerConfig) expose to_dict();
nesting mirrors ownership and no derived fields are added.
"""

from __future__ import annotations
import json
from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Any

import numpy as np


class RecordEncoder(json.JSONEncoder):
    """JSON encoder for records, enums and numpy values."""

    def default(self, obj):
        if hasattr(obj, 'to_dict'):
            return obj.to_dict()
        if isinstance(obj, Enum):
            return obj.value
        if isinstance(obj, np.ndarray):
            return obj.tolist()
        if isinstance(obj, np.integer):
            return int(obj)
        if isinstance(obj, np.floating):
            return float(obj)
        if isinstance(obj, np.bool_):
            return bool(obj)
        if is_dataclass(obj) and not isinstance(obj, type):
            return asdict(obj)
        return super().default(obj)


def to_json(record: Any, indent: int = 2) -> str:
    """Render a record (or a list/dict of records) as JSON text."""
    return json.dumps(record, cls=RecordEncoder, indent=indent)
