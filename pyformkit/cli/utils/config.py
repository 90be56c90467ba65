"""Configuration file helpers for the pyformkit CLI."""

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

from rich.console import Console

console = Console(stderr=True)

config_dir = os.path.expanduser("~/.config/pyformkit")
config_path = os.path.join(config_dir, "config.json")


def load_config(path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """Load render configuration from file.

    An explicit path that cannot be read is reported; the default path is
    simply skipped when absent.
    """
    target = str(path) if path else config_path
    if not path and not os.path.exists(target):
        return {}
    try:
        with open(target, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as exc:
        console.print(f"[yellow]Warning:[/yellow] Could not load config file: {exc}")
        return {}
    if not isinstance(data, dict):
        console.print(
            f"[yellow]Warning:[/yellow] Ignoring config file {target}: "
            "expected a JSON object"
        )
        return {}
    return data
