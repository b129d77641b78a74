"""
Module loader.

Turns a module name into a module object.  Dotted names are imported;
names that look like file paths are loaded from the file.
"""

from pathlib import Path
from types import ModuleType
import importlib
import importlib.util
import logging
import os

logger = logging.getLogger(__name__)


def _looks_like_path(name: str) -> bool:
    if name.endswith(".py") or os.sep in name:
        return True
    return os.altsep is not None and os.altsep in name


def load_module_from_path(path: str) -> ModuleType:
    """
    Load a Python source file as a module.

    The module is named after the file stem and is not added to
    ``sys.modules``.
    """
    path = Path(path).resolve()

    if not path.exists():
        raise FileNotFoundError(f"Module not found: {path}")

    spec = importlib.util.spec_from_file_location(path.stem, path)
    if spec is None or spec.loader is None:
        raise ImportError(f"Cannot load module from {path}", path=str(path))

    module = importlib.util.module_from_spec(spec)
    logger.debug("Executing module file %s", path)
    spec.loader.exec_module(module)
    return module


def load_module_by_name(name: str) -> ModuleType:
    """Load a module by dotted name or by file path."""
    if _looks_like_path(name):
        return load_module_from_path(name)
    return importlib.import_module(name)
