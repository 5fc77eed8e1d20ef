"""Reflect pydantic models into named JSON schema definitions.

Every nested model becomes its own definition, referenced by
``#/definitions/<Name>`` rather than inlined, so a sub-model shared by
several shapes appears exactly once.
"""

from typing import Any, Dict, Type
from pydantic import BaseModel, PydanticUserError

from .errors import IntrospectionError
from .schema import ReflectedSchema, REF_TEMPLATE


def reflect(model: Type[BaseModel]) -> ReflectedSchema:
    """Reflect ``model`` and everything it references.

    The nested ``$defs`` pydantic produces are lifted into a flat
    definitions map, and the model's own top-level schema is added to that
    map under the model's class name.

    Args:
        model: A pydantic model class

    Returns:
        ReflectedSchema whose ``root`` is the model's class name

    Raises:
        IntrospectionError: If ``model`` is not a pydantic model class, or
            pydantic cannot produce a JSON schema for it
    """
    if not (isinstance(model, type) and issubclass(model, BaseModel)):
        raise IntrospectionError(f"Cannot reflect {model!r}: not a pydantic model class")

    name = model.__name__
    try:
        schema = model.model_json_schema(by_alias=True, ref_template=REF_TEMPLATE)
    except PydanticUserError as e:
        raise IntrospectionError(f"Cannot reflect {name}: {e}") from e

    definitions: Dict[str, Dict[str, Any]] = dict(schema.pop("$defs", {}))

    # Self-referencing models are already emitted as a definition, with the
    # top-level schema reduced to a bare $ref.
    if name not in definitions:
        definitions[name] = schema

    return ReflectedSchema(root=name, definitions=definitions)
