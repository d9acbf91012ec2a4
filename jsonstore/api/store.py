"""
HTTP endpoints for reading and mutating a JSON store.

Every request goes straight to the store, so responses always reflect the
file as it is on disk. Endpoints are declared ``async`` and run on the event
loop one at a time, which keeps access to the file sequential.
"""

from typing import Any, Dict

from fastapi import APIRouter, HTTPException, Response, status

from jsonstore.domain.errors import SchemaError, SerializationError
from jsonstore.domain.models import KeyValueResponse, MergeValuesRequest, SetValueRequest
from jsonstore.storage.base import KeyValueStore


def _to_http_error(exc: Exception) -> HTTPException:
    """
    Map store errors to HTTP errors.

    SerializationError becomes 400 and SchemaError becomes 422.
    """
    if isinstance(exc, SerializationError):
        return HTTPException(status_code=400, detail=str(exc))
    return HTTPException(status_code=422, detail=str(exc))


def create_store_router(store: KeyValueStore) -> APIRouter:
    """
    Build a router bound to ``store``.

    Args:
        store: The store to expose.

    Returns:
        An APIRouter to be mounted with ``app.include_router``.
    """
    router = APIRouter()

    @router.get("")
    async def read_store() -> Dict[str, Any]:
        return store.read()

    @router.patch("")
    async def merge_values(body: MergeValuesRequest) -> Dict[str, Any]:
        try:
            store.set(body.values)
        except (SchemaError, SerializationError) as exc:
            raise _to_http_error(exc)
        return store.read()

    @router.post("/reset")
    async def reset_store() -> Dict[str, Any]:
        return store.reset()

    @router.get("/{key}", response_model=KeyValueResponse)
    async def get_value(key: str) -> KeyValueResponse:
        data = store.read()
        if key not in data:
            raise HTTPException(status_code=404, detail="Key not found")
        return KeyValueResponse(key=key, value=data[key])

    @router.put("/{key}", response_model=KeyValueResponse)
    async def set_value(key: str, body: SetValueRequest) -> KeyValueResponse:
        try:
            store.set(key, body.value)
        except (SchemaError, SerializationError) as exc:
            raise _to_http_error(exc)
        return KeyValueResponse(key=key, value=store.get(key))

    @router.delete("/{key}", status_code=status.HTTP_204_NO_CONTENT)
    async def delete_value(key: str) -> Response:
        try:
            deleted = store.delete(key)
        except SchemaError as exc:
            raise _to_http_error(exc)
        if not deleted:
            raise HTTPException(status_code=404, detail="Key not found")
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return router
