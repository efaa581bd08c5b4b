"""Version information for shortcut-recorder.

The version is read from pyproject.toml when running from a source checkout,
and from the installed distribution's metadata otherwise.
"""

import tomllib
from dataclasses import dataclass
from importlib import metadata
from pathlib import Path

DISTRIBUTION_NAME = 'shortcut-recorder'


def _find_pyproject_toml() -> Path | None:
    """Find pyproject.toml in the project root or the working directory."""
    # common/ -> src/ -> project root
    project_root = Path(__file__).resolve().parent.parent.parent
    for candidate in (project_root / 'pyproject.toml', Path.cwd() / 'pyproject.toml'):
        if candidate.exists():
            return candidate
    return None


@dataclass
class VersionInfo:
    """Version information.

    Attributes:
        version: Version string (e.g., "1.0.0")
        release_date: Release date in ISO format (e.g., "2026-10-19"), or None
    """

    version: str
    release_date: str | None = None

    def __str__(self) -> str:
        if self.release_date:
            return f'v{self.version} ({self.release_date})'
        return f'v{self.version}'


def _read_pyproject(path: Path) -> VersionInfo | None:
    try:
        with path.open('rb') as f:
            data = tomllib.load(f)
    except (OSError, tomllib.TOMLDecodeError):
        return None

    project_data = data.get('project', {})
    if project_data.get('name') != DISTRIBUTION_NAME or not project_data.get('version'):
        return None

    tool_data = data.get('tool', {}).get(DISTRIBUTION_NAME, {})
    release_date = tool_data.get('release_date')
    return VersionInfo(
        version=str(project_data['version']),
        release_date=str(release_date) if release_date else None,
    )


def get_version_info() -> VersionInfo:
    """Get version information.

    Returns:
        VersionInfo from pyproject.toml, else from package metadata, else
        VersionInfo(version='unknown').
    """
    pyproject_path = _find_pyproject_toml()
    if pyproject_path is not None:
        info = _read_pyproject(pyproject_path)
        if info is not None:
            return info

    try:
        return VersionInfo(version=metadata.version(DISTRIBUTION_NAME))
    except metadata.PackageNotFoundError:
        return VersionInfo(version='unknown')


def get_version() -> str:
    """Get the version string."""
    return get_version_info().version


__version__ = get_version()
