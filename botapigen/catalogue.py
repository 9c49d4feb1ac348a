"""Loading of the declaration file.

The file is JSON::

    {
        "types": [
            {"name": "Update"},
            {"name": "InputMedia",
             "declaration": {"type": "union", "members": ["InputMediaPhoto", "InputMediaVideo"]}},
            {"name": "Message",
             "overrides": {"date": {"type": "number", "isRequired": true}}}
        ],
        "methods": [
            {"name": "getMe", "type": "User"}
        ]
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from botapigen.exceptions import CatalogueError
from botapigen.types import Catalogue

logger = logging.getLogger(__name__)


def parse_catalogue(data: Any, source: str = "<data>") -> Catalogue:
    return Catalogue.from_dict(data, source)


def load_catalogue(path: str | Path) -> Catalogue:
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise CatalogueError(str(path), str(exc)) from exc
    except json.JSONDecodeError as exc:
        raise CatalogueError(str(path), f"not valid JSON: {exc}") from exc

    catalogue = parse_catalogue(data, str(path))
    logger.debug(
        "Loaded %s: %d type(s), %d method(s)",
        path,
        len(catalogue.types),
        len(catalogue.methods),
    )
    return catalogue
