import tomllib
from dataclasses import dataclass
from pathlib import Path

import tomlkit

from trellis.github.labels import LabelSpec

CONFIG_DIR_NAME = ".trellis"
CONFIG_FILE_NAME = "config.toml"

DEFAULT_BRANCH = "main"
DEFAULT_MODE = "solo"


@dataclass(frozen=True)
class LoadedConfig:
    """In-memory representation of `.trellis/config.toml`.

    Every default is optional; command-line flags take precedence.
    """

    repo: str | None
    owner: str | None
    project_title: str | None
    mode: str | None
    branch: str | None
    source_repo: str | None
    source_branch: str | None
    extra_labels: tuple[LabelSpec, ...]

    @staticmethod
    def empty() -> "LoadedConfig":
        return LoadedConfig(
            repo=None,
            owner=None,
            project_title=None,
            mode=None,
            branch=None,
            source_repo=None,
            source_branch=None,
            extra_labels=(),
        )


DEFAULT_KEYS = (
    "repo",
    "owner",
    "project_title",
    "mode",
    "branch",
    "source_repo",
    "source_branch",
)


def config_path(config_dir: Path) -> Path:
    return config_dir / CONFIG_FILE_NAME


def _optional_str(table: dict, key: str) -> str | None:
    value = table.get(key)
    if value is None:
        return None
    return str(value)


def _table(data: dict, key: str, cfg_path: Path, prefix: str = "") -> dict:
    """Sub-table at key, empty if absent.

    Raises:
        ValueError: If the value at key is not a table
    """
    value = data.get(key, {})
    if not isinstance(value, dict):
        msg = f"{cfg_path}: '{prefix}{key}' must be a table"
        raise ValueError(msg)
    return value


def load_config(config_dir: Path) -> LoadedConfig:
    """Load config.toml from the given directory if present; otherwise return defaults.

    Example config:
      [defaults]
      repo = "acme/widgets"
      owner = "acme"
      mode = "team"

      [labels.extra]
      "area:docs" = { color = "0E8A16", description = "Documentation" }

    Raises:
        ValueError: If the file is not valid TOML, a section is not a table, or a
            label entry is malformed
    """
    cfg_path = config_path(config_dir)
    if not cfg_path.exists():
        return LoadedConfig.empty()

    data = tomllib.loads(cfg_path.read_text(encoding="utf-8"))
    defaults = _table(data, "defaults", cfg_path)
    extra = _table(_table(data, "labels", cfg_path), "extra", cfg_path, prefix="labels.")

    extra_labels: list[LabelSpec] = []
    for name, entry in extra.items():
        if not isinstance(entry, dict) or "color" not in entry:
            msg = f"{cfg_path}: label {name!r} needs a 'color'"
            raise ValueError(msg)
        extra_labels.append(
            LabelSpec(
                name=str(name),
                color=str(entry["color"]).lstrip("#"),
                description=str(entry.get("description", "")),
            )
        )

    return LoadedConfig(
        repo=_optional_str(defaults, "repo"),
        owner=_optional_str(defaults, "owner"),
        project_title=_optional_str(defaults, "project_title"),
        mode=_optional_str(defaults, "mode"),
        branch=_optional_str(defaults, "branch"),
        source_repo=_optional_str(defaults, "source_repo"),
        source_branch=_optional_str(defaults, "source_branch"),
        extra_labels=tuple(extra_labels),
    )


def save_config(config_dir: Path, config: LoadedConfig) -> Path:
    """Save LoadedConfig to config.toml.

    Creates the config directory if it doesn't exist. Unset defaults are
    omitted rather than written as empty strings.
    """
    config_dir.mkdir(parents=True, exist_ok=True)
    cfg_path = config_path(config_dir)

    doc = tomlkit.document()
    doc.add(tomlkit.comment("trellis configuration; command-line flags take precedence"))

    defaults = tomlkit.table()
    for key in DEFAULT_KEYS:
        value = getattr(config, key)
        if value is not None:
            defaults[key] = value
    doc["defaults"] = defaults

    if config.extra_labels:
        extra = tomlkit.table()
        for label in config.extra_labels:
            entry = tomlkit.inline_table()
            entry["color"] = label.color
            entry["description"] = label.description
            extra[label.name] = entry
        labels = tomlkit.table()
        labels["extra"] = extra
        doc["labels"] = labels

    cfg_path.write_text(tomlkit.dumps(doc), encoding="utf-8")
    return cfg_path
