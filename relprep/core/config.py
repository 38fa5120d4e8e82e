"""Typed configuration loading.

Settings come from, in order: an explicit file, ``relprep.toml`` at the
repository root, the ``[tool.relprep]`` table of ``pyproject.toml``, or the
built-in defaults.

Example ``relprep.toml``:

    changelog = "CHANGELOG.md"
    commit_message = "chore(release): update changelog for {version}"
    generator = ["git", "cliff"]
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_str, get_str_list, get_table

__all__ = [
    "Settings",
    "ConfigError",
    "load_settings",
    "resolve_settings",
    "CONFIG_FILENAME",
    "DEFAULT_CHANGELOG",
    "DEFAULT_COMMIT_MESSAGE",
    "DEFAULT_GENERATOR",
]

CONFIG_FILENAME = "relprep.toml"
PYPROJECT_FILENAME = "pyproject.toml"

DEFAULT_CHANGELOG = "CHANGELOG.md"
DEFAULT_COMMIT_MESSAGE = "chore(release): update changelog for {version}"
DEFAULT_GENERATOR: tuple[str, ...] = ("git", "cliff")

_VERSION_PLACEHOLDER = "{version}"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when settings cannot be loaded or are invalid."""

    message: str
    path: Path | None = None


@dataclass(frozen=True, slots=True)
class Settings:
    """Release-preparation settings.

    Attributes:
        changelog: Changelog artifact path, relative to the repository root
        commit_message: Commit message template containing ``{version}``
        generator: Command prefix of the changelog generator
    """

    changelog: str = DEFAULT_CHANGELOG
    commit_message: str = DEFAULT_COMMIT_MESSAGE
    generator: tuple[str, ...] = DEFAULT_GENERATOR

    def changelog_path(self, root: Path) -> Path:
        return root / self.changelog

    def commit_message_for(self, version: str) -> str:
        """Render the commit message for ``version``.

        Only the ``{version}`` placeholder is substituted; other braces are
        kept literally.
        """
        return self.commit_message.replace(_VERSION_PLACEHOLDER, version)

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Result[Settings, str]:
        """Create Settings from a mapping (parsed TOML)."""
        commit_message = get_str(data, "commit_message") or DEFAULT_COMMIT_MESSAGE
        if _VERSION_PLACEHOLDER not in commit_message:
            return Err(f"commit_message must contain {_VERSION_PLACEHOLDER}")

        generator = DEFAULT_GENERATOR
        if "generator" in data:
            items = get_str_list(data, "generator")
            if not items or not all(s.strip() for s in items):
                return Err("generator must be a non-empty list of strings")
            generator = tuple(items)

        return Ok(
            cls(
                changelog=get_str(data, "changelog") or DEFAULT_CHANGELOG,
                commit_message=commit_message,
                generator=generator,
            )
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def _settings_from(data: Mapping[str, object], path: Path) -> Result[Settings, ConfigError]:
    result = Settings.from_dict(data)
    if isinstance(result, Err):
        return Err(ConfigError(f"Invalid config: {result.error}", path=path))
    return Ok(result.value)


def load_settings(path: Path) -> Result[Settings, ConfigError]:
    """Load settings from a ``relprep.toml``-style file.

    Args:
        path: Path to the settings file (root table holds the keys)

    Returns:
        Ok(Settings) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result
    return _settings_from(result.value, path)


def _load_pyproject(path: Path) -> Result[Settings | None, ConfigError]:
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    tool = get_table(result.value, "tool") or {}
    table = get_table(tool, "relprep")
    if table is None:
        return Ok(None)

    settings = _settings_from(table, path)
    if isinstance(settings, Err):
        return settings
    return Ok(settings.value)


def resolve_settings(root: Path, explicit: Path | None = None) -> Result[Settings, ConfigError]:
    """Find and load the settings that apply to a repository.

    An explicit path must exist. The implicit files are optional; when none
    provides settings the defaults are returned.
    """
    if explicit is not None:
        return load_settings(explicit)

    candidate = root / CONFIG_FILENAME
    if candidate.is_file():
        return load_settings(candidate)

    pyproject = root / PYPROJECT_FILENAME
    if pyproject.is_file():
        result = _load_pyproject(pyproject)
        if isinstance(result, Err):
            return result
        if result.value is not None:
            return Ok(result.value)

    return Ok(Settings())
