"""Request Body Parsing: JSON or form-encoded bodies into entity body models.

Invariants:
    - application/json must decode to an object, else InvalidBodyError (400)
    - Form bodies (urlencoded or multipart) map each field to its last value
    - Any other content type, or an empty body, yields an empty mapping
    - Missing fields are never rejected; they become None on the body model
"""

from typing import Any, Callable, TypeVar

from fastapi import Depends, Request

from restaurantes_api.core.errors import InvalidBodyError
from restaurantes_api.schemas.entities import EntityBody

BodyT = TypeVar("BodyT", bound=EntityBody)

_FORM_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


async def read_fields(request: Request) -> dict[str, Any]:
    """Decode the request body into a field mapping."""
    content_type = request.headers.get("content-type", "").lower()
    if content_type.startswith(_FORM_TYPES):
        form = await request.form()
        return dict(form)
    if not content_type.startswith("application/json"):
        return {}

    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        data = await request.json()
    except ValueError:
        raise InvalidBodyError("Malformed JSON body")
    if not isinstance(data, dict):
        raise InvalidBodyError("JSON body must be an object")
    return data


def body_of(model: type[BodyT]) -> Callable[..., Any]:
    """Build a dependency that parses the request body into `model`."""

    async def dependency(
        fields: dict[str, Any] = Depends(read_fields),
    ) -> BodyT:
        return model.model_validate(fields)

    return dependency
