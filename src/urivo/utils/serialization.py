"""utils/serialization.py

Serialization utilities for Urivo.
"""

import json
from typing import Any, Dict

from urivo.uri.components import UriComponents

FIELDS = ("scheme", "userinfo", "host", "port", "path", "query", "fragment")


def to_dict(components: UriComponents) -> Dict[str, Any]:
    """Map field names to values, None for absent components."""
    return {name: getattr(components, name) for name in FIELDS}


def to_json(components: UriComponents) -> str:
    """Serializes components to a JSON object string."""
    return json.dumps(to_dict(components))
