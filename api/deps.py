from datetime import datetime, timezone
from typing import Annotated, Any

from fastapi import Depends, Query, Request
from fastapi.exceptions import RequestValidationError
from pydantic import TypeAdapter, ValidationError

from core.config import settings
from database.storage import MemStorage


def get_storage(request: Request) -> MemStorage:
    # Built once in create_app() and handed to every request.
    return request.app.state.storage


StorageDep = Annotated[MemStorage, Depends(get_storage)]


def get_user_id(user_id: Annotated[str | None, Query(alias="userId")] = None) -> str:
    # No auth: requests without a userId act on the default user.
    return user_id or settings.default_user_id


UserIdDep = Annotated[str, Depends(get_user_id)]


def today_utc() -> str:
    return datetime.now(timezone.utc).date().isoformat()


def optional_query(name: str, value: str | None, type_: Any) -> Any:
    # A blank query value (?category=) means "no filter", not an invalid value.
    if not value:
        return None
    try:
        return TypeAdapter(type_).validate_python(value)
    except ValidationError as exc:
        raise RequestValidationError(
            [{**err, "loc": ("query", name)} for err in exc.errors(include_url=False)]
        ) from exc
