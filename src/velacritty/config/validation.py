"""Conversion of a merged configuration tree into the typed UiConfig."""

from collections.abc import Iterator
from copy import deepcopy

import structlog
from pydantic import BaseModel, ValidationError

from velacritty.config.constants import COMPONENT_CONFIG, GENERAL_SECTION, IMPORT_KEY
from velacritty.config.errors import ConfigValidationError
from velacritty.config.merge import TreeValue
from velacritty.config.schemas.ui_config import UiConfig


logger = structlog.get_logger()


def strip_import_directives(tree: dict[str, TreeValue]) -> dict[str, TreeValue]:
    """Return a copy of ``tree`` without the consumed ``import`` directives."""
    stripped = deepcopy(tree)
    stripped.pop(IMPORT_KEY, None)
    general = stripped.get(GENERAL_SECTION)
    if isinstance(general, dict):
        general.pop(IMPORT_KEY, None)
    return stripped


def unused_keys(
    model: type[BaseModel], tree: dict[str, TreeValue], prefix: str = ""
) -> Iterator[str]:
    """Yield dotted paths of keys in ``tree`` that ``model`` does not declare.

    Only nested tables whose field is itself a model are inspected; opaque
    fields such as bindings are not descended into.
    """
    for key, value in tree.items():
        field = model.model_fields.get(key)
        path = f"{prefix}{key}"
        if field is None or field.exclude:
            yield path
            continue
        annotation = field.annotation
        if (
            isinstance(value, dict)
            and isinstance(annotation, type)
            and issubclass(annotation, BaseModel)
        ):
            yield from unused_keys(annotation, value, prefix=f"{path}.")


def deserialize(
    tree: dict[str, TreeValue], *, file_path: str | None = None
) -> UiConfig:
    """Validate a merged configuration tree.

    Args:
        tree: Fully merged document.
        file_path: Root file the tree was loaded from, for error reporting.

    Returns:
        The typed configuration. Absent fields take their defaults.

    Raises:
        ConfigValidationError: If any field has the wrong type or violates
            a bound, such as a scrollback history above the maximum.
    """
    document = strip_import_directives(tree)

    for key in unused_keys(UiConfig, document):
        logger.warning(
            "unused_config_key", component=COMPONENT_CONFIG, key=key, path=file_path
        )

    try:
        return UiConfig.model_validate(document)
    except ValidationError as e:
        errors = [
            {
                "loc": ".".join(str(loc) for loc in err["loc"]),
                "msg": err["msg"],
                "type": err["type"],
            }
            for err in e.errors()
        ]
        raise ConfigValidationError(errors, file_path) from e
