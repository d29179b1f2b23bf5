"""Installer configuration data structures and loading.

Provides the immutable InstallerConfig, built once at the CLI entry point from
(lowest precedence first) built-in defaults, ~/.pyenv-bootstrap/config.toml,
environment variables, and CLI options.
"""

import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import tomlkit

from pyenv_bootstrap.core.errors import ConfigError

DEFAULT_PYTHON_VERSION = "3.7.2"
DEFAULT_REPOSITORY_URL = "https://github.com/pyenv/pyenv.git"
# Pinned pyenv release; its python-build must know DEFAULT_PYTHON_VERSION
DEFAULT_PINNED_REVISION = "v1.2.9"
DEFAULT_PINNED_BRANCH = "pyenv-bootstrap-pinned"
DEFAULT_VIRTUALENV_PACKAGE = "virtualenv"

ENV_PYTHON_VERSION = "PYTHON_VERSION"
ENV_SUPPRESS_PATH_HINTS = "PYENV_BOOTSTRAP_SUPPRESS_PATH_HINTS"
ENV_PYENV_ROOT = "PYENV_ROOT"
ENV_PYTHON_BIN_DIR = "PYENV_PYTHON_BIN_DIR"
ENV_DEBUG = "PYENV_BOOTSTRAP_DEBUG"

_TRUE_VALUES = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES = frozenset({"0", "false", "no", "off", ""})


@dataclass(frozen=True)
class InstallerConfig:
    """Immutable installer configuration.

    Loaded once at CLI entry point and stored in BootstrapContext.
    All fields are read-only after construction.
    """

    python_version: str
    pyenv_root: Path
    python_bin_dir: Path
    suppress_path_hints: bool
    repository_url: str
    pinned_revision: str
    pinned_branch: str
    virtualenv_package: str

    @property
    def pyenv_bin_dirs(self) -> list[Path]:
        """Directories exported ahead of the search path, in order."""
        return [self.pyenv_root / "bin", self.pyenv_root / "shims"]


def default_pyenv_root(home: Path) -> Path:
    return home / ".pyenv"


def default_python_bin_dir(pyenv_root: Path, python_version: str) -> Path:
    return pyenv_root / "versions" / python_version / "bin"


def installer_config_path(home: Path) -> Path:
    """Get the path to the installer config file.

    Returns:
        Path to config file (for error messages and debugging)
    """
    return home / ".pyenv-bootstrap" / "config.toml"


def parse_bool(value: str, *, source: str) -> bool:
    """Parse a boolean flag value from an environment variable.

    Args:
        value: Raw value (case-insensitive 1/true/yes/on or 0/false/no/off)
        source: Name of the variable, for the error message

    Raises:
        ConfigError: If the value is not a recognized boolean
    """
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigError(f"Invalid boolean for {source}: {value!r} (expected true or false)")


def _read_config_file(config_path: Path) -> dict[str, Any]:
    if not config_path.exists():
        return {}

    try:
        return tomllib.loads(config_path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Malformed config file {config_path}: {e}") from e


def _file_str(data: Mapping[str, Any], key: str, config_path: Path) -> str | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str) or not value:
        raise ConfigError(f"'{key}' in {config_path} must be a non-empty string")
    return value


def _file_bool(data: Mapping[str, Any], key: str, config_path: Path) -> bool | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise ConfigError(f"'{key}' in {config_path} must be true or false")
    return value


def load_installer_config(
    *,
    environ: Mapping[str, str],
    home: Path,
    config_path: Path | None = None,
    python_version: str | None = None,
    pyenv_root: Path | None = None,
    python_bin_dir: Path | None = None,
    suppress_path_hints: bool | None = None,
) -> InstallerConfig:
    """Build the effective InstallerConfig.

    Keyword arguments other than environ, home and config_path are CLI
    option values; None means the option was not given.

    Args:
        environ: Environment variables to read (usually os.environ)
        home: Home directory used for default paths
        config_path: Config file path (defaults to ~/.pyenv-bootstrap/config.toml)

    Returns:
        InstallerConfig instance with all sources applied

    Raises:
        ConfigError: If the config file or an environment value is invalid
    """
    path = config_path if config_path is not None else installer_config_path(home)
    data = _read_config_file(path)

    version = (
        python_version
        or environ.get(ENV_PYTHON_VERSION)
        or _file_str(data, "python_version", path)
        or DEFAULT_PYTHON_VERSION
    )

    root_value = environ.get(ENV_PYENV_ROOT) or _file_str(data, "pyenv_root", path)
    if pyenv_root is not None:
        root = pyenv_root
    elif root_value:
        root = Path(root_value)
    else:
        root = default_pyenv_root(home)
    root = root.expanduser()

    # Derived from the final root and version unless explicitly overridden
    bin_value = environ.get(ENV_PYTHON_BIN_DIR) or _file_str(data, "python_bin_dir", path)
    if python_bin_dir is not None:
        bin_dir = python_bin_dir.expanduser()
    elif bin_value:
        bin_dir = Path(bin_value).expanduser()
    else:
        bin_dir = default_python_bin_dir(root, version)

    if suppress_path_hints is not None:
        suppress = suppress_path_hints
    elif ENV_SUPPRESS_PATH_HINTS in environ:
        suppress = parse_bool(environ[ENV_SUPPRESS_PATH_HINTS], source=ENV_SUPPRESS_PATH_HINTS)
    else:
        suppress = bool(_file_bool(data, "suppress_path_hints", path))

    return InstallerConfig(
        python_version=version,
        pyenv_root=root,
        python_bin_dir=bin_dir,
        suppress_path_hints=suppress,
        repository_url=_file_str(data, "repository_url", path) or DEFAULT_REPOSITORY_URL,
        pinned_revision=_file_str(data, "pinned_revision", path) or DEFAULT_PINNED_REVISION,
        pinned_branch=_file_str(data, "pinned_branch", path) or DEFAULT_PINNED_BRANCH,
        virtualenv_package=(
            _file_str(data, "virtualenv_package", path) or DEFAULT_VIRTUALENV_PACKAGE
        ),
    )


def save_installer_config(config: InstallerConfig, config_path: Path) -> None:
    """Save InstallerConfig to config.toml.

    Creates the config directory if it doesn't exist. The runtime bin
    directory is only written when it differs from the derived default, so
    that changing python_version later keeps the two in step.
    """
    config_path.parent.mkdir(parents=True, exist_ok=True)

    doc = tomlkit.document()
    doc.add(tomlkit.comment("pyenv-bootstrap configuration"))
    doc["python_version"] = config.python_version
    doc["pyenv_root"] = str(config.pyenv_root)
    if config.python_bin_dir != default_python_bin_dir(config.pyenv_root, config.python_version):
        doc["python_bin_dir"] = str(config.python_bin_dir)
    doc["suppress_path_hints"] = config.suppress_path_hints
    doc["repository_url"] = config.repository_url
    doc["pinned_revision"] = config.pinned_revision
    doc["pinned_branch"] = config.pinned_branch
    doc["virtualenv_package"] = config.virtualenv_package

    config_path.write_text(tomlkit.dumps(doc), encoding="utf-8")
