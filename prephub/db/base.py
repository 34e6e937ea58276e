"""ORM nexus. Auto-discover models."""

from __future__ import annotations

import importlib
import logging
import os
from pathlib import Path

from sqlalchemy.orm import DeclarativeBase

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """Base mold."""
    pass


def discover_feature_models() -> int:
    """Sweep feature model modules so ``Base.metadata`` is complete."""
    if os.getenv("SKIP_MODEL_DISCOVERY", "false").lower() == "true":
        logger.info("Skip sweep (env flag).")
        return 0

    root = Path(__file__).resolve().parent.parent  # prephub/
    features_dir = root / "features"
    if not features_dir.is_dir():
        logger.warning("No features dir: %s", features_dir)
        return 0

    # Feature packages are namespace packages, so walk the files directly.
    discovered = 0
    for models_file in sorted(features_dir.glob("*/models.py")):
        importlib.import_module(f"prephub.features.{models_file.parent.name}.models")
        discovered += 1
    logger.debug("Discovered %d model modules", discovered)
    return discovered


def list_models() -> list[str]:
    """List model names."""
    return [m.class_.__name__ for m in Base.registry.mappers]


__all__ = ["Base", "discover_feature_models", "list_models"]
