import logging
from typing import Any, Optional

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError

from ...errors import AutoformException
from ...inference import infer
from ...introspection import introspect
from ...overrides import layer_overrides

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/schema", tags=["schema"])


class InferRequest(BaseModel):
    value: Any = None
    max_depth: Optional[int] = Field(default=None, ge=0)


class InferResponse(BaseModel):
    success: bool = True
    schema_: Optional[dict] = Field(default=None, alias="schema")
    error: Optional[str] = None


class IntrospectRequest(BaseModel):
    schema_: Optional[dict] = Field(default=None, alias="schema")
    example: Any = None
    overrides: Optional[dict[str, dict[str, Any]]] = None
    max_depth: Optional[int] = Field(default=None, ge=0)


class IntrospectResponse(BaseModel):
    success: bool = True
    fields: Optional[list[dict]] = None
    error: Optional[str] = None


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "error": message})


def _max_depth(request: Request, requested: Optional[int]) -> int:
    if requested is not None:
        return requested
    return request.app.state.config.inference.max_depth


@router.post("/infer", response_model=InferResponse)
def infer_schema(body: InferRequest, request: Request):
    node = infer(body.value, max_depth=_max_depth(request, body.max_depth))
    return InferResponse(schema=node.model_dump(mode="json"))


@router.post("/introspect", response_model=IntrospectResponse, response_model_exclude_none=True)
def introspect_schema(body: IntrospectRequest, request: Request):
    if body.schema_ is not None:
        schema = body.schema_
    elif "example" in body.model_fields_set:
        schema = infer(body.example, max_depth=_max_depth(request, body.max_depth))
    else:
        return _error(400, "Missing 'schema' or 'example' field")

    try:
        overrides = layer_overrides(request.app.state.config.overrides, body.overrides)
    except ValidationError as e:
        return _error(400, f"Invalid overrides: {e}")

    try:
        fields = introspect(schema, overrides)
    except AutoformException as e:
        logger.info(f"Introspection rejected: {e}")
        return _error(400, str(e))

    return IntrospectResponse(fields=[field.to_dict() for field in fields])
