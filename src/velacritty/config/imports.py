"""Recursive expansion of ``import`` directives.

A configuration file may list other files to import:

    import = ["~/.config/velacritty/colors.toml", "keys.toml"]

The older ``[general] import = [...]`` spelling is also honored. Imported
files are merged in list order, so later imports win over earlier ones, and
the importing file's own values win over all of its imports.

Any failure inside one import is logged and that import is skipped. Depth
is bounded by a recursion budget passed down each descent; there is no
cycle detection beyond it.
"""

from pathlib import Path

import structlog

from velacritty.config.constants import COMPONENT_CONFIG, GENERAL_SECTION, IMPORT_KEY
from velacritty.config.errors import (
    ConfigError,
    ConfigIoError,
    ImportDirectiveError,
    RecursionLimitError,
)
from velacritty.config.filesystem import ConfigFileSource
from velacritty.config.formats import deserialize_config
from velacritty.config.merge import TreeValue, merge
from velacritty.config.paths import normalize_import


logger = structlog.get_logger()


def find_import_directive(config: dict[str, TreeValue]) -> TreeValue | None:
    """Return the raw ``import`` value, checking ``general.import`` second."""
    if IMPORT_KEY in config:
        return config[IMPORT_KEY]
    general = config.get(GENERAL_SECTION)
    if isinstance(general, dict) and IMPORT_KEY in general:
        return general[IMPORT_KEY]
    return None


def imports(
    config: dict[str, TreeValue],
    base_path: Path,
    recursion_limit: int,
    *,
    home: Path | None = None,
) -> list[Path | ImportDirectiveError]:
    """Get all import paths for a configuration.

    Args:
        config: Parsed document of the importing file.
        base_path: Path of the importing file.
        recursion_limit: Remaining import depth.
        home: Home directory for ``~/`` expansion.

    Returns:
        One entry per list element: the normalized path, or an
        ImportDirectiveError for an element that is not a string.

    Raises:
        ImportDirectiveError: If the directive is not a list.
        RecursionLimitError: If there are imports but no depth left.
    """
    directive = find_import_directive(config)
    if directive is None:
        return []
    if not isinstance(directive, list):
        msg = "Invalid import type: expected a sequence"
        raise ImportDirectiveError(msg)

    if directive and recursion_limit == 0:
        raise RecursionLimitError

    import_paths: list[Path | ImportDirectiveError] = []
    for element in directive:
        if not isinstance(element, str):
            import_paths.append(
                ImportDirectiveError(
                    "Invalid import element type: expected path string"
                )
            )
            continue
        import_paths.append(normalize_import(base_path, element, home=home))

    return import_paths


def load_imports(
    config: dict[str, TreeValue],
    base_path: Path,
    config_paths: list[Path],
    recursion_limit: int,
    *,
    source: ConfigFileSource,
    home: Path | None = None,
) -> dict[str, TreeValue]:
    """Load and merge every file imported by ``config``.

    Args:
        config: Parsed document of the importing file.
        base_path: Path of the importing file.
        config_paths: Log of visited files, appended in visit order.
        recursion_limit: Remaining import depth for ``config``.
        source: File access collaborator.
        home: Home directory for ``~/`` expansion.

    Returns:
        The merged imports, or an empty table if none could be loaded.
    """
    log = logger.bind(component=COMPONENT_CONFIG, path=str(base_path))

    try:
        import_paths = imports(config, base_path, recursion_limit, home=home)
    except ImportDirectiveError as e:
        log.error("config_import_directive_invalid", error=str(e))
        return {}

    merged: TreeValue = {}
    for import_path in import_paths:
        if isinstance(import_path, ImportDirectiveError):
            log.error("config_import_element_invalid", error=str(import_path))
            continue

        try:
            imported = parse_config(
                import_path,
                config_paths,
                recursion_limit - 1,
                source=source,
                home=home,
            )
        except ConfigIoError as e:
            if e.not_found:
                log.info("config_import_not_found", import_path=str(import_path))
            else:
                log.error(
                    "config_import_failed", import_path=str(import_path), error=str(e)
                )
            continue
        except ConfigError as e:
            log.error(
                "config_import_failed", import_path=str(import_path), error=str(e)
            )
            continue

        merged = merge(merged, imported)

    return merged if isinstance(merged, dict) else {}


def parse_config(
    path: Path,
    config_paths: list[Path],
    recursion_limit: int,
    *,
    source: ConfigFileSource,
    warn_pruned: bool = False,
    home: Path | None = None,
) -> dict[str, TreeValue]:
    """Deserialize a file and everything it imports into one tree.

    Args:
        path: File to load.
        config_paths: Log of visited files; ``path`` is appended first.
        recursion_limit: Remaining import depth.
        source: File access collaborator.
        warn_pruned: Report pruned YAML null keys for this file only.
        home: Home directory for ``~/`` expansion.

    Returns:
        The file's own table merged over its imports.

    Raises:
        ConfigError: If this file itself cannot be read or parsed.
    """
    config_paths.append(path)

    config = deserialize_config(path, source=source, warn_pruned=warn_pruned)

    imported = load_imports(
        config, path, config_paths, recursion_limit, source=source, home=home
    )
    merged = merge(imported, config)
    return merged if isinstance(merged, dict) else {}
