"""
Request validation

Checks submitted campground and review payloads against the schemas and
turns every field error into one human readable message. The FastAPI
dependencies at the bottom run before the route handler, so a bad payload
never reaches the database.
"""
import logging
import re
from typing import Any, Dict, NamedTuple, Optional, Sequence, Type

from fastapi import Request
from pydantic import BaseModel, ValidationError

from errors import AppError
from schemas import CampgroundForm, CampgroundIn, ReviewForm, ReviewIn

logger = logging.getLogger(__name__)

_BRACKETS = re.compile(r"\[([^\]]*)\]")


class ValidationResult(NamedTuple):
    value: Optional[BaseModel] = None
    errors: Sequence[str] = ()

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def message(self) -> str:
        return ",".join(self.errors)


def _format_error(error: Dict[str, Any]) -> str:
    loc = ".".join(str(part) for part in error["loc"])
    return f'"{loc}" {error["msg"]}' if loc else error["msg"]


def _validate(form_model: Type[BaseModel], key: str, payload: Any) -> ValidationResult:
    try:
        form = form_model.model_validate(payload)
    except ValidationError as e:
        return ValidationResult(errors=tuple(_format_error(err) for err in e.errors()))
    return ValidationResult(value=getattr(form, key))


def validate_campground(payload: Any) -> ValidationResult:
    """Validate a `{"campground": {...}}` payload."""
    return _validate(CampgroundForm, "campground", payload)


def validate_review(payload: Any) -> ValidationResult:
    """Validate a `{"review": {...}}` payload."""
    return _validate(ReviewForm, "review", payload)


def nest_form_fields(items) -> Dict[str, Any]:
    """
    Expand bracket keys from an HTML form into nested dicts:
    ``campground[title]=x`` becomes ``{"campground": {"title": "x"}}``.
    """
    data: Dict[str, Any] = {}
    for key, value in items:
        head = key.split("[", 1)[0]
        parts = [head] + _BRACKETS.findall(key[len(head):])
        target = data
        for part in parts[:-1]:
            nested = target.get(part)
            if not isinstance(nested, dict):
                nested = target[part] = {}
            target = nested
        target[parts[-1]] = value
    return data


async def read_payload(request: Request) -> Dict[str, Any]:
    content_type = request.headers.get("content-type", "")
    if content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError:
            raise AppError("Request body is not valid JSON", 400)
        return body if isinstance(body, dict) else {}
    form = await request.form()
    return nest_form_fields(form.multi_items())


async def campground_payload(request: Request) -> CampgroundIn:
    result = validate_campground(await read_payload(request))
    if not result.ok:
        logger.info("Rejected campground payload: %s", result.message)
        raise AppError(result.message, 400)
    return result.value


async def review_payload(request: Request) -> ReviewIn:
    result = validate_review(await read_payload(request))
    if not result.ok:
        logger.info("Rejected review payload: %s", result.message)
        raise AppError(result.message, 400)
    return result.value
