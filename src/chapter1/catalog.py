"""Catalog of the exercises shipped with chapter1.

The catalog is a YAML file listing each exercise's name, the module that
holds its ``main()`` and a one-line title.
"""

from __future__ import annotations

import importlib
import logging
from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import yaml

from chapter1.config import CATALOG_PATH

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExerciseConfig:
    """Configuration for a single exercise.

    Attributes:
        name: Exercise identifier.
        module: Dotted module path exposing ``main() -> int``.
        title: One-line description.
        enabled: Whether the exercise is listed and runnable.
    """

    name: str
    module: str
    title: str = ""
    enabled: bool = True

    def load_main(self) -> Callable[[], int]:
        """Import the exercise module and return its ``main``."""
        return importlib.import_module(self.module).main


@dataclass
class ExerciseCatalog:
    """Collection of exercise configurations.

    Attributes:
        name: Catalog name.
        exercises: Exercise configurations, in file order.
        base_path: Directory holding the catalog file.
    """

    name: str
    exercises: list[ExerciseConfig]
    base_path: Path

    def names(self) -> list[str]:
        return [ex.name for ex in self.exercises if ex.enabled]

    def get_exercise(self, name: str) -> ExerciseConfig:
        """Look up an enabled exercise by name.

        Raises:
            KeyError: If no enabled exercise has that name.
        """
        for ex in self.exercises:
            if ex.name == name and ex.enabled:
                return ex
        raise KeyError(name)


def load_catalog(config_path: Path | str = CATALOG_PATH) -> ExerciseCatalog:
    """Load the exercise catalog from YAML.

    Args:
        config_path: Path to the catalog file.

    Returns:
        ExerciseCatalog configuration.

    Raises:
        ValueError: If the file or an entry is not a mapping, or an
            ``enabled`` flag is not a boolean.
    """
    config_path = Path(config_path)
    with config_path.open() as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        msg = f"Catalog {config_path} must be a mapping, got {type(data).__name__}"
        raise ValueError(msg)

    exercises = []
    for ex_data in data.get("exercises") or []:
        if not isinstance(ex_data, dict):
            msg = f"Catalog entry must be a mapping, got {ex_data!r}"
            raise ValueError(msg)
        module = ex_data.get("module")
        enabled = ex_data.get("enabled", True)
        if not isinstance(enabled, bool):
            msg = f"Catalog entry {module!r}: enabled must be true or false, got {enabled!r}"
            raise ValueError(msg)
        if not module:
            logger.warning("Skipping catalog entry without module: %r", ex_data)
            continue
        exercises.append(
            ExerciseConfig(
                name=ex_data.get("name", module.rsplit(".", 1)[-1]),
                module=module,
                title=ex_data.get("title", ""),
                enabled=enabled,
            )
        )

    return ExerciseCatalog(
        name=data.get("name", "exercises"),
        exercises=exercises,
        base_path=config_path.parent,
    )
