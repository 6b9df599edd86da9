from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping

from pydantic import ValidationError

from .errors import InvalidConfiguration
from .schemas import InstallationSchema
from .simulation.system import SystemConfig

DEFAULT_INSTALLATION_PATH = Path(__file__).resolve().parent / "data" / "observatory_60kwp.json"

InstallationSource = str | Path | Mapping[str, Any] | None


def load_installation_data(source: InstallationSource = None) -> dict[str, Any]:
    """
    Load installation data from JSON or return the provided mapping.

    Args:
        source: Path to a JSON file, mapping, or None for the bundled
            reference installation.

    Returns:
        Dictionary containing the raw installation definition.

    Raises:
        InvalidConfiguration: If the file is missing, unreadable, not
            UTF-8 or not valid JSON.
    """
    if source is None:
        source = DEFAULT_INSTALLATION_PATH
    if isinstance(source, (str, Path)):
        path = Path(source)
        try:
            return json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            raise InvalidConfiguration(f"Installation file not found: {path}") from None
        except json.JSONDecodeError as exc:
            raise InvalidConfiguration(f"Installation file {path} is not valid JSON: {exc}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise InvalidConfiguration(f"Cannot read installation file {path}: {exc}") from exc
    return dict(source)


def load_installation(source: InstallationSource = None) -> InstallationSchema:
    """Load and validate an installation definition."""
    data = load_installation_data(source)
    try:
        return InstallationSchema.model_validate(data)
    except ValidationError as exc:
        raise InvalidConfiguration(f"Invalid installation definition: {exc}") from exc


def build_system_config(source: InstallationSource = None) -> SystemConfig:
    """Build the :class:`SystemConfig` described by an installation source."""
    return load_installation(source).to_system_config()
