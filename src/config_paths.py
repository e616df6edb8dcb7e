"""Locate the footprint config and keep output paths inside the results tree."""

from __future__ import annotations

import os
from pathlib import Path, PurePosixPath
from typing import Mapping

REPO_ROOT = Path(__file__).resolve().parents[1]

CONFIG_ENV_VAR = "FOOTPRINT_CONFIG_PATH"
DEFAULT_CONFIG_NAME = "config.yaml"


def get_config_path(default: Path | None = None) -> Path:
    """Pick the config file: FOOTPRINT_CONFIG_PATH, then ``default``, then the repo config."""

    candidate = os.environ.get(CONFIG_ENV_VAR) or default or REPO_ROOT / DEFAULT_CONFIG_NAME
    return Path(candidate).expanduser().resolve()


def safe_relative_path(value: object, label: str = "path") -> str | None:
    """Reduce ``value`` to a relative POSIX path that cannot climb out of its parent.

    ``.``/``..`` segments and empty parts are dropped; backslashes count as
    separators. Returns ``None`` when nothing usable remains.
    """

    if value is None:
        return None
    text = str(value).strip().replace("\\", "/")
    if not text:
        return None
    if text.startswith("/") or Path(text).is_absolute():
        raise ValueError(f"{label} must be a relative path, got {value!r}.")
    kept = [part for part in PurePosixPath(text).parts if part not in (".", "..")]
    return "/".join(kept) or None


def get_results_run_directory(config: Mapping[str, object] | None) -> str | None:
    """Return the cleaned ``results.run_directory`` setting, if any."""

    results_cfg = config.get("results") if isinstance(config, Mapping) else None
    if not isinstance(results_cfg, Mapping):
        return None
    return safe_relative_path(results_cfg.get("run_directory"), "results.run_directory")


def resolve_output_directory(
    setting: str | Path,
    run_directory: str | None,
    *,
    repo_root: Path | None = None,
) -> Path:
    """Resolve an output path, inserting the run directory right after ``results/``."""

    root = (repo_root or REPO_ROOT).resolve()
    path = Path(setting)
    absolute = (path if path.is_absolute() else root / path).resolve()
    if not run_directory:
        return absolute

    try:
        parts = absolute.relative_to(root).parts
    except ValueError:
        return absolute
    if not parts or parts[0] != "results":
        return absolute
    if len(parts) > 1 and parts[1] == run_directory:
        return absolute
    return (root / "results" / run_directory / Path(*parts[1:])).resolve()
