"""Projection of domain objects onto response models.

A response model declares the subset of domain attributes exposed to
clients.  ``project`` copies those attributes by name, letting pydantic
check that every declared field exists on the source and has a
compatible type.  Anything it cannot satisfy raises ``MappingError``.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

M = TypeVar("M", bound=BaseModel)


class MappingError(Exception):
    """A response model could not be filled from its source object."""


def project(target: type[M], source: Any) -> M:
    try:
        return target.model_validate(source, from_attributes=True)
    except PydanticValidationError as exc:
        fields = ", ".join(
            ".".join(str(part) for part in err["loc"]) for err in exc.errors()
        )
        raise MappingError(
            f"Cannot map {type(source).__name__} onto {target.__name__}: {fields}"
        ) from exc


def project_many(target: type[M], sources: Iterable[Any]) -> list[M]:
    return [project(target, source) for source in sources]
