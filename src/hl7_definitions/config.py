# src/hl7_definitions/config.py
"""
Build configuration for the hl7_definitions schema compiler.

Provides an immutable dataclass describing which capabilities are compiled
into the store (tables and individual HL7 versions) and a loader that reads it
from a YAML file. Nothing is enabled by default: tables and every version must
be opted in explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, FrozenSet, Iterable, Mapping, Optional

import yaml

DEFAULT_SOURCE_DIR = Path("assets")
DEFAULT_OUTPUT = Path("src/hl7_definitions/_generated.py")

TABLES_FILE = "tables.json"
DEFINITIONS_FILE = "defs.json"


@dataclass(frozen=True)
class BuildConfig:
    """
    Immutable build-time feature selection.

    Attributes
    ----------
    tables : bool
        Compile coded value tables into the store.
    versions : FrozenSet[str]
        HL7 versions (e.g. "2.5.1") to compile into the store.
    source_dir : Path
        Directory holding ``tables.json`` and ``defs.json``.
    output : Path
        Path of the generated Python module.
    """

    tables: bool = False
    versions: FrozenSet[str] = frozenset()
    source_dir: Path = DEFAULT_SOURCE_DIR
    output: Path = DEFAULT_OUTPUT

    @property
    def tables_path(self) -> Path:
        return self.source_dir / TABLES_FILE

    @property
    def definitions_path(self) -> Path:
        return self.source_dir / DEFINITIONS_FILE

    def override(
        self,
        *,
        tables: Optional[bool] = None,
        versions: Optional[Iterable[str]] = None,
        source_dir: Optional[Path] = None,
        output: Optional[Path] = None,
    ) -> "BuildConfig":
        """Return a copy with every non-None argument replacing the current value."""
        changes: dict = {}
        if tables is not None:
            changes["tables"] = tables
        if versions is not None:
            changes["versions"] = frozenset(versions)
        if source_dir is not None:
            changes["source_dir"] = source_dir
        if output is not None:
            changes["output"] = output
        return replace(self, **changes)


def _as_versions(raw: Any, path: Path) -> FrozenSet[str]:
    if not isinstance(raw, list) or not all(isinstance(v, str) for v in raw):
        raise TypeError(
            f"'versions' must be a list of strings, got {type(raw).__name__}. "
            f"Config file: {path}"
        )
    return frozenset(raw)


def load_config(path: Optional[Path]) -> BuildConfig:
    """
    Load the build configuration from a YAML file.

    Relative ``source_dir`` and ``output`` paths are resolved against the
    directory containing the config file.

    Parameters
    ----------
    path : Path or None
        Path to a YAML config file. If None, defaults are used.

    Returns
    -------
    BuildConfig
        The loaded configuration.

    Raises
    ------
    TypeError
        If the YAML file does not parse to a mapping at the top level, or a
        key holds a value of the wrong type.
    yaml.YAMLError
        If the file is not valid YAML.
    """
    if path is None:
        return BuildConfig()

    data: Any = yaml.safe_load(path.read_text())

    if data is None:
        return BuildConfig()

    if not isinstance(data, Mapping):
        raise TypeError(
            f"Config file must contain a mapping at top level, "
            f"got {type(data).__name__}. "
            f"Config file: {path}"
        )

    tables = data.get("tables", False)
    if not isinstance(tables, bool):
        raise TypeError(
            f"'tables' must be a boolean, got {type(tables).__name__}. "
            f"Config file: {path}"
        )

    versions = _as_versions(data.get("versions", []), path)

    base = path.parent
    source_dir = base / Path(data.get("source_dir", DEFAULT_SOURCE_DIR))
    output = base / Path(data.get("output", DEFAULT_OUTPUT))

    return BuildConfig(
        tables=tables, versions=versions, source_dir=source_dir, output=output
    )
