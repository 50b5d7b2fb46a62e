"""Load [tool.magic-numbers] from pyproject.toml. Infrastructure I/O only."""

import logging
import tomllib
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

TOOL_SECTION: str = "magic-numbers"


class ConfigFileLoader:
    """Loads the magic number options from the nearest pyproject.toml."""

    @staticmethod
    def load_config_from_fs(start: Optional[Path] = None) -> dict[str, object]:
        """Walk up from ``start`` (default: cwd) and return the first [tool.magic-numbers] found."""
        current_path = (start or Path.cwd()).resolve()
        while True:
            config_file = current_path / "pyproject.toml"
            if config_file.exists():
                try:
                    with config_file.open("rb") as f:
                        data = tomllib.load(f)
                    tool_section = data.get("tool", {}) or {}
                    config_dict = tool_section.get(TOOL_SECTION, {}) or {}
                    logger.debug("Loaded magic number options from %s", config_file)
                    return dict(config_dict)
                except tomllib.TOMLDecodeError as exc:
                    logger.warning("Ignoring malformed %s: %s", config_file, exc)
                    return {}
                except OSError:
                    pass
            if current_path.parent == current_path:
                return {}
            current_path = current_path.parent
