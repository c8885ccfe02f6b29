"""Reading configuration files into generic trees.

TOML is the canonical format. Files with a ``.yaml``/``.yml`` extension are
parsed as YAML, stripped of null values (TOML has no null), re-emitted as
TOML text and then parsed like any other file.
"""

import re
import tomllib
from pathlib import Path

import structlog
import tomli_w
import yaml

from velacritty.config.constants import (
    BYTE_ORDER_MARK,
    COMPONENT_CONFIG,
    LEGACY_EXTENSIONS,
)
from velacritty.config.errors import (
    ConfigIoError,
    ConfigParseError,
    LegacyParseError,
    LegacySerializeError,
)
from velacritty.config.filesystem import ConfigFileSource
from velacritty.config.merge import TreeValue


logger = structlog.get_logger()

_BOOL_TAG = "tag:yaml.org,2002:bool"


class LegacyYamlLoader(yaml.SafeLoader):
    """SafeLoader that only reads true and false as booleans.

    YAML 1.1 also maps on, off, yes and no to booleans, which would turn
    values such as ``blinking: On`` into ``true``.
    """


LegacyYamlLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != _BOOL_TAG]
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}
LegacyYamlLoader.add_implicit_resolver(
    _BOOL_TAG,
    re.compile(r"^(?:true|True|TRUE|false|False|FALSE)$"),
    list("tTfF"),
)


def is_legacy_format(path: Path) -> bool:
    """Check whether a path uses the deprecated YAML format."""
    return path.suffix.lower() in LEGACY_EXTENSIONS


def prune_yaml_nulls(value: object, warn_pruned: bool = False) -> object:
    """Remove null values so the document can be expressed as TOML.

    A null is dropped from its parent; a list or mapping left empty is
    dropped in turn. If the whole document prunes away, an empty mapping
    is returned.

    Args:
        value: Parsed YAML document.
        warn_pruned: Log each mapping key that gets removed.

    Returns:
        The pruned document.
    """
    pruned, empty = _prune(value, warn_pruned)
    return {} if empty else pruned


def _prune(value: object, warn_pruned: bool) -> tuple[object, bool]:
    if value is None:
        return None, True

    if isinstance(value, list):
        kept = []
        for item in value:
            pruned, empty = _prune(item, warn_pruned)
            if not empty:
                kept.append(pruned)
        return kept, not kept

    if isinstance(value, dict):
        kept_mapping = {}
        for key, item in value.items():
            pruned, empty = _prune(item, warn_pruned)
            if empty:
                if warn_pruned and isinstance(key, str):
                    logger.warning(
                        "removing_null_key",
                        component=COMPONENT_CONFIG,
                        key=key,
                    )
                continue
            kept_mapping[key] = pruned
        return kept_mapping, not kept_mapping

    return value, False


def yaml_to_toml(contents: str, path: Path, warn_pruned: bool = False) -> str:
    """Convert legacy YAML text into canonical TOML text.

    Raises:
        LegacyParseError: If the YAML is malformed.
        LegacySerializeError: If the pruned document is not representable
            as a TOML table.
    """
    try:
        value = yaml.load(contents, Loader=LegacyYamlLoader)
    except yaml.YAMLError as e:
        raise LegacyParseError(path, str(e)) from e

    value = prune_yaml_nulls(value, warn_pruned)
    if not isinstance(value, dict):
        msg = f"expected a mapping at the document root, got {type(value).__name__}"
        raise LegacySerializeError(path, msg)

    try:
        return tomli_w.dumps(value)
    except (TypeError, ValueError) as e:
        raise LegacySerializeError(path, str(e)) from e


def read_config_text(path: Path, source: ConfigFileSource) -> str:
    """Read a config file, dropping a leading byte order mark.

    Raises:
        ConfigIoError: If the file cannot be read.
    """
    try:
        contents = source.read_text(path)
    # ValueError covers undecodable bytes and paths with an embedded NUL
    except (OSError, ValueError) as e:
        raise ConfigIoError(path, e) from e

    if contents.startswith(BYTE_ORDER_MARK):
        contents = contents[len(BYTE_ORDER_MARK) :]
    return contents


def deserialize_config(
    path: Path,
    *,
    source: ConfigFileSource,
    warn_pruned: bool = False,
) -> dict[str, TreeValue]:
    """Deserialize a single configuration file into a generic tree.

    Imports are not followed here; see ``velacritty.config.imports``.

    Args:
        path: File to read.
        source: File access collaborator.
        warn_pruned: Log keys removed while pruning YAML nulls. Only the
            top-level caller should enable this.

    Returns:
        The parsed document table.

    Raises:
        ConfigIoError: If the file cannot be read.
        LegacyParseError: If a YAML file is malformed.
        LegacySerializeError: If YAML content cannot be converted.
        ConfigParseError: If the TOML text is malformed.
    """
    contents = read_config_text(path, source)

    if is_legacy_format(path) and contents.strip():
        logger.warning(
            "yaml_config_deprecated",
            component=COMPONENT_CONFIG,
            path=str(path),
            hint="please migrate your configuration to TOML",
        )
        contents = yaml_to_toml(contents, path, warn_pruned)

    try:
        return tomllib.loads(contents)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(path, str(e)) from e
