"""Data preparation for export."""

import datetime
import json
from typing import Any, Dict

from .. import __version__
from ..core.models import AIResponse


def prepare_export(command: str, inputs: Dict[str, Any], response: AIResponse) -> Dict[str, Any]:
    """Wrap a capability response with the inputs that produced it."""
    return {
        "command": command,
        "inputs": inputs,
        "result": response.to_dict(),
        "metadata": {
            "export_timestamp": None,  # Will be set by export_to_json
            "version": __version__,
        },
    }


def export_to_json(data: Dict[str, Any], filename: str) -> None:
    """Export data to JSON file."""
    data.setdefault("metadata", {})["export_timestamp"] = datetime.datetime.now().isoformat()
    
    with open(filename, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
