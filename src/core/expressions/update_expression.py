"""Builder for DynamoDB ``SET`` update expressions."""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from core.models.errors import ValidationError
from core.utils.constants import (
    ERROR_CODE_UNKNOWN_FIELD,
    POST_ID_FIELD,
    UPDATABLE_FIELDS,
)

SET_PREFIX = "set "
CLAUSE_SEPARATOR = ", "


@dataclass(frozen=True)
class UpdateExpression:
    """Store-ready description of the attributes to set on a post."""

    update_expression: str = ""
    attribute_names: dict[str, str] = field(default_factory=dict)
    attribute_values: dict[str, Any] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return not self.update_expression

    @property
    def fields(self) -> list[str]:
        return list(self.attribute_names.values())


def build_update_expression(
    changes: Mapping[str, Any],
    *,
    allowed_fields: Iterable[str] = UPDATABLE_FIELDS,
) -> UpdateExpression:
    """Build a ``set #a = :a, #b = :b`` expression from a partial post.

    Keys are visited in the order given and ``id`` is skipped. Any key
    outside ``allowed_fields`` is rejected.

    Raises:
        ValidationError: If ``changes`` names an attribute that cannot be updated
    """
    allowed = frozenset(allowed_fields)

    unknown = [name for name in changes if name != POST_ID_FIELD and name not in allowed]
    if unknown:
        raise ValidationError(
            message=f"Cannot update unknown field(s): {', '.join(unknown)}",
            error_code=ERROR_CODE_UNKNOWN_FIELD,
            details={"fields": unknown, "allowed": sorted(allowed)},
        )

    expression = ""
    names: dict[str, str] = {}
    values: dict[str, Any] = {}
    prefix = SET_PREFIX

    for name, value in changes.items():
        if name == POST_ID_FIELD:
            continue

        expression += f"{prefix}#{name} = :{name}"
        names[f"#{name}"] = name
        values[f":{name}"] = value
        prefix = CLAUSE_SEPARATOR

    return UpdateExpression(
        update_expression=expression,
        attribute_names=names,
        attribute_values=values,
    )
