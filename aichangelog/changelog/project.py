"""Project metadata lookup for the release being described."""

import json
import logging
import tomllib
from pathlib import Path
from typing import Optional, Tuple


logger = logging.getLogger(__name__)


def detect_project_version(path: Optional[str] = None) -> Optional[Tuple[str, str]]:
    """Find the project name and version from its packaging metadata.

    ``pyproject.toml`` (``[project]`` table) is checked first, then
    ``package.json``.

    Args:
        path: Project root (defaults to the current directory)

    Returns:
        Tuple of (name, version) or None if no version could be found
    """
    root = Path(path or '.')

    pyproject = root / 'pyproject.toml'
    if pyproject.is_file():
        try:
            with open(pyproject, 'rb') as f:
                project = tomllib.load(f).get('project', {})
            if project.get('version'):
                return project.get('name', 'unknown'), str(project['version'])
        except (OSError, tomllib.TOMLDecodeError) as e:
            logger.warning(f"Could not read {pyproject}: {e}")

    package_json = root / 'package.json'
    if package_json.is_file():
        try:
            with open(package_json, 'r', encoding='utf-8') as f:
                pkg = json.load(f)
            if isinstance(pkg, dict) and pkg.get('version'):
                return pkg.get('name', 'unknown'), str(pkg['version'])
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Could not read {package_json}: {e}")

    return None
