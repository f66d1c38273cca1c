"""
Variable coercion for the selected operation.

Each variable declared by the operation is checked against its declared input
type before execution. Leaf values are handed to the schema's scalar
``parse_value``; the wrapping types (non-null, list, input object, enum) are
walked here so that failures carry a path rooted at ``["variable", <name>]``.
"""

from __future__ import annotations

from typing import Any

from graphql import (
    GraphQLInputType,
    GraphQLSchema,
    OperationDefinitionNode,
    Undefined,
    is_enum_type,
    is_input_object_type,
    is_list_type,
    is_non_null_type,
    type_from_ast,
    value_from_ast,
)

from gqltransport.core.constants import (
    VARIABLE_CANNOT_BE_NULL_ERROR,
    VARIABLE_INVALID_ENUM_ERROR,
    VARIABLE_MUST_BE_DEFINED_ERROR,
    VARIABLE_PATH_ROOT,
    VARIABLE_UNKNOWN_FIELD_ERROR,
    VARIABLE_WRONG_TYPE_ERROR,
)
from gqltransport.core.domain.outcomes import PathSegment, VariableFailed


class _CoercionError(Exception):
    def __init__(self, message: str, path: tuple[PathSegment, ...]) -> None:
        super().__init__(message)
        self.message = message
        self.path = path


def value_kind(value: Any) -> str:
    """Name the JSON kind of a decoded value, as used in error messages."""
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, int):
        return "int"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if isinstance(value, dict):
        return "map"
    if isinstance(value, list):
        return "list"
    return type(value).__name__


def _wrong_type(value: Any, type_: Any, path: tuple[PathSegment, ...]) -> _CoercionError:
    return _CoercionError(
        VARIABLE_WRONG_TYPE_ERROR.format(kind=value_kind(value), type_name=type_.name),
        path,
    )


def _coerce_value(
    value: Any, type_: GraphQLInputType, path: tuple[PathSegment, ...]
) -> Any:
    if is_non_null_type(type_):
        if value is None:
            raise _CoercionError(VARIABLE_CANNOT_BE_NULL_ERROR, path)
        return _coerce_value(value, type_.of_type, path)

    if value is None:
        return None

    if is_list_type(type_):
        item_type = type_.of_type
        if isinstance(value, list):
            return [
                _coerce_value(item, item_type, (*path, index))
                for index, item in enumerate(value)
            ]
        # A single value is accepted where a list is expected
        return [_coerce_value(value, item_type, path)]

    if is_input_object_type(type_):
        if not isinstance(value, dict):
            raise _wrong_type(value, type_, path)
        for key in value:
            if key not in type_.fields:
                raise _CoercionError(VARIABLE_UNKNOWN_FIELD_ERROR, (*path, key))
        coerced: dict[str, Any] = {}
        for field_name, field in type_.fields.items():
            field_path = (*path, field_name)
            out_name = field.out_name or field_name
            if field_name not in value:
                if field.default_value is not Undefined:
                    coerced[out_name] = field.default_value
                elif is_non_null_type(field.type):
                    raise _CoercionError(VARIABLE_MUST_BE_DEFINED_ERROR, field_path)
                continue
            coerced[out_name] = _coerce_value(value[field_name], field.type, field_path)
        return type_.out_type(coerced)

    if is_enum_type(type_):
        if not isinstance(value, str):
            raise _wrong_type(value, type_, path)
        if value not in type_.values:
            raise _CoercionError(
                VARIABLE_INVALID_ENUM_ERROR.format(value=value, type_name=type_.name),
                path,
            )
        return type_.parse_value(value)

    try:
        result = type_.parse_value(value)
    except Exception:
        # Custom scalars signal bad input with arbitrary exception types
        raise _wrong_type(value, type_, path) from None
    if result is Undefined:
        raise _wrong_type(value, type_, path)
    return result


def coerce_variables(
    schema: GraphQLSchema,
    operation: OperationDefinitionNode,
    inputs: dict[str, Any],
) -> dict[str, Any] | VariableFailed:
    """Coerce the supplied variables against the operation's declarations.

    Variables that the operation does not declare are ignored. Declared
    defaults satisfy required variables that are absent from ``inputs``.

    Args:
        schema: Schema the operation was validated against
        operation: The selected operation definition
        inputs: Variables exactly as decoded from the request body

    Returns:
        The coerced variable values, or ``VariableFailed`` for the first
        variable that cannot be coerced
    """
    coerced: dict[str, Any] = {}
    for var_def in operation.variable_definitions or ():
        name = var_def.variable.name.value
        var_type = type_from_ast(schema, var_def.type)
        path: tuple[PathSegment, ...] = (VARIABLE_PATH_ROOT, name)

        if name not in inputs:
            if var_def.default_value is not None:
                coerced[name] = value_from_ast(var_def.default_value, var_type)
            elif is_non_null_type(var_type):
                return VariableFailed(message=VARIABLE_MUST_BE_DEFINED_ERROR, path=path)
            continue

        try:
            coerced[name] = _coerce_value(inputs[name], var_type, path)
        except _CoercionError as err:
            return VariableFailed(message=err.message, path=err.path)

    return coerced
