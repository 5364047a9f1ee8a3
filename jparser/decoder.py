"""
Strict JSON request body decoding.

Decodes exactly one JSON object from a request body into a closed pydantic
model and classifies every failure into one RequestBodyError:

1. empty body                          -> EmptyBodyError
2. syntax error                        -> MalformedJSONError(offset)
3. input ends mid-value                -> MalformedJSONError()
4. value of the wrong type             -> InvalidFieldValueError(field, offset)
5. key the model does not declare      -> UnknownFieldError(name)
6. anything after the first value      -> TrailingContentError
7. everything else                     -> InternalDecodeError (logged)

Only the first problem in document order is reported. Offsets are 1-based
byte offsets into the body.

Syntax is checked by a separate strict parse (NaN and Infinity are not
JSON), and unknown keys are found by walking that parse against the model's
wire names, so neither depends on how lenient pydantic's validator is.
"""

import logging
import math
import types
from dataclasses import dataclass, field
from typing import (
    Annotated,
    Any,
    Generic,
    Iterator,
    List,
    Optional,
    Sequence,
    Tuple,
    Type,
    TypeVar,
    Union,
    get_args,
    get_origin,
)

from fastapi import Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError
from pydantic_core import from_json

from jparser.errors import (
    EmptyBodyError,
    InternalDecodeError,
    InvalidFieldValueError,
    MalformedJSONError,
    MissingFieldError,
    NotAnObjectError,
    RequestBodyError,
    TrailingContentError,
    UnknownFieldError,
)
from jparser.utils.logging import get_logger
from jparser.utils.positions import Loc, PositionIndex, byte_offset, offset_from_line_column

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

JSON_WHITESPACE = b" \t\r\n"

# Root-level error types meaning "the body is not an object at all"
_NOT_AN_OBJECT = {"model_type", "model_attributes_type", "dict_type"}

_UNKNOWN_FIELD = "extra_forbidden"

_UnionType = getattr(types, "UnionType", None)


@dataclass(frozen=True)
class Accepted(Generic[ModelT]):
    """Successful decode: the populated model."""
    value: ModelT


@dataclass(frozen=True)
class Rejected:
    """Failed decode: status code and client-facing message."""
    status_code: int
    message: str
    error: RequestBodyError = field(compare=False, repr=False)

    @classmethod
    def from_error(cls, error: RequestBodyError) -> "Rejected":
        return cls(status_code=error.status_code, message=error.message, error=error)

    def to_response(self) -> JSONResponse:
        return self.error.to_response()


DecodeOutcome = Union[Accepted, Rejected]


def ensure_closed_shape(shape: Any) -> None:
    """
    Check that `shape` is a pydantic model that forbids unknown keys.

    Raises:
        TypeError: If shape is not a BaseModel subclass or allows extra keys.
    """
    if get_origin(shape) is not None or not (isinstance(shape, type) and issubclass(shape, BaseModel)):
        raise TypeError(f"Request body shape must be a pydantic model, got {shape!r}")
    if shape.model_config.get("extra") != "forbid":
        raise TypeError(
            f"{shape.__name__} must forbid unknown fields; "
            "subclass StrictRequestModel or set extra='forbid'"
        )


def _unwrap(annotation: Any) -> Any:
    """Strip Annotated[...] and Optional[...] down to the inner annotation."""
    while True:
        origin = get_origin(annotation)
        if origin is Annotated:
            annotation = get_args(annotation)[0]
        elif origin is Union or (_UnionType is not None and origin is _UnionType):
            members = [arg for arg in get_args(annotation) if arg is not type(None)]
            if len(members) != 1:
                return annotation
            annotation = members[0]
        else:
            return annotation


def _model_of(annotation: Any) -> Optional[Type[BaseModel]]:
    annotation = _unwrap(annotation)
    if get_origin(annotation) is None and isinstance(annotation, type) and issubclass(annotation, BaseModel):
        return annotation
    return None


def _element_of(annotation: Any) -> Any:
    """Item type of List[X] / values of Dict[K, X]; None when unknown."""
    args = get_args(_unwrap(annotation))
    return args[-1] if args else None


def _field_for_key(model: Type[BaseModel], key: str) -> Optional[str]:
    """Declared field name that wire key `key` populates, if any."""
    config = model.model_config
    by_name = bool(config.get("populate_by_name") or config.get("validate_by_name"))
    for name, info in model.model_fields.items():
        alias = info.validation_alias if isinstance(info.validation_alias, str) else info.alias
        if key == (alias or name) or (by_name and key == name):
            return name
    return None


def declared_field_name(shape: Type[BaseModel], loc: Sequence[Union[str, int]]) -> str:
    """
    Translate a wire-level error location into declared field names.

    Array indexes and mapping keys are dropped; nested model fields are
    joined with "." (e.g. ("sender", "name") -> "sender.name").
    """
    names: List[str] = []
    annotation: Any = shape
    for part in loc:
        model = _model_of(annotation) if isinstance(part, str) else None
        name = _field_for_key(model, part) if model is not None else None
        if name is not None:
            names.append(name)
            annotation = model.model_fields[name].annotation
        else:
            annotation = _element_of(annotation)
    return ".".join(names)


def unknown_keys(document: Any, annotation: Any, loc: Loc = ()) -> Iterator[Loc]:
    """
    Yield the location of every key in `document` that no field accepts.

    Keys are matched against wire names only: a declared name hidden behind
    an alias is unknown unless the model populates by name.
    """
    model = _model_of(annotation)
    if model is not None:
        if isinstance(document, dict):
            for key, value in document.items():
                name = _field_for_key(model, key)
                if name is None:
                    yield loc + (key,)
                else:
                    yield from unknown_keys(value, model.model_fields[name].annotation, loc + (key,))
        return

    element = _element_of(annotation)
    if element is None:
        return
    if isinstance(document, list):
        for position, item in enumerate(document):
            yield from unknown_keys(item, element, loc + (position,))
    elif isinstance(document, dict):
        for key, value in document.items():
            yield from unknown_keys(value, element, loc + (key,))


def _classify_syntax(body: bytes, shape: Type[BaseModel], message: str) -> RequestBodyError:
    if message.startswith("EOF while parsing"):
        return MalformedJSONError()

    offset = offset_from_line_column(body, message)

    if message.startswith("trailing characters") and offset is not None:
        # The first value still has to be clean before trailing content counts
        try:
            _decode(body[:offset - 1], shape)
        except RequestBodyError as first_value_error:
            return first_value_error
        return TrailingContentError()

    return MalformedJSONError(offset)


def _rejection(text: str, shape: Type[BaseModel], index: float, kind: str, loc: Loc) -> RequestBodyError:
    if kind == _UNKNOWN_FIELD:
        return UnknownFieldError(str(loc[-1]))
    if kind == "missing":
        return MissingFieldError(declared_field_name(shape, loc))

    offset = byte_offset(text, int(index))
    if not loc:
        if kind in _NOT_AN_OBJECT:
            return NotAnObjectError(offset)
        return InvalidFieldValueError("", offset)
    return InvalidFieldValueError(declared_field_name(shape, loc), offset)


def _classify(
    body: bytes,
    shape: Type[BaseModel],
    errors: List[dict],
    unknown: List[Loc],
) -> RequestBodyError:
    """Pick the problem that starts earliest in the document."""
    text = body.decode("utf-8")
    positions = PositionIndex(text)

    candidates: List[Tuple[float, str, Loc]] = [
        (positions.find(loc, key=True), _UNKNOWN_FIELD, loc) for loc in unknown
    ]
    reported = set(unknown)
    for error in errors:
        loc = tuple(error["loc"])
        kind = error["type"]
        if kind == _UNKNOWN_FIELD:
            if loc in reported:
                continue
            index: float = positions.find(loc, key=True)
        elif kind == "missing":
            index = math.inf
        else:
            index = positions.find(loc)
        candidates.append((index, kind, loc))

    # min() keeps the first of equal positions, i.e. pydantic's field order
    index, kind, loc = min(candidates, key=lambda candidate: candidate[0])
    return _rejection(text, shape, index, kind, loc)


def _decode(body: bytes, shape: Type[ModelT]) -> ModelT:
    if not body.strip(JSON_WHITESPACE):
        raise EmptyBodyError()

    try:
        document = from_json(body, allow_inf_nan=False)
    except ValueError as exc:
        raise _classify_syntax(body, shape, str(exc)) from exc

    unknown = list(unknown_keys(document, shape))

    try:
        value = shape.model_validate_json(body, strict=True)
    except ValidationError as exc:
        raise _classify(body, shape, exc.errors(include_url=False), unknown) from exc

    if unknown:
        raise _classify(body, shape, [], unknown)
    return value


def decode_json_body(
    body: bytes,
    shape: Type[ModelT],
    log: Optional[logging.Logger] = None,
) -> ModelT:
    """
    Decode a raw request body into `shape`.

    Args:
        body: Raw request body bytes
        shape: Closed pydantic model (see StrictRequestModel)
        log: Logger for rejections and internal failures (defaults to this
            module's logger)

    Returns:
        The populated model instance.

    Raises:
        RequestBodyError: Classified rejection (InternalDecodeError for
            anything unexpected, after logging it with its traceback).
        TypeError: If `shape` is not a closed pydantic model.
    """
    ensure_closed_shape(shape)
    log = log or logger

    try:
        return _decode(body, shape)
    except RequestBodyError as e:
        log.warning(f"Rejected request body for {shape.__name__}: {e.message}")
        raise
    except Exception as e:
        log.error(f"Unexpected error decoding request body into {shape.__name__}: {e}", exc_info=True)
        raise InternalDecodeError() from e


def decode_request_body(
    body: bytes,
    shape: Type[ModelT],
    log: Optional[logging.Logger] = None,
) -> DecodeOutcome:
    """
    Decode a raw request body into an Accepted or Rejected outcome.

    Never raises for bad input; TypeError still signals a misdeclared shape.
    """
    try:
        return Accepted(decode_json_body(body, shape, log=log))
    except RequestBodyError as e:
        return Rejected.from_error(e)


async def parse_json_request(
    request: Request,
    shape: Type[ModelT],
    log: Optional[logging.Logger] = None,
) -> ModelT:
    """
    Read the request body stream once and decode it into `shape`.

    Decoding runs in the threadpool so large bodies do not hold up the
    event loop. Failures while reading the stream (client disconnects,
    transport errors) are internal failures: logged, then raised as
    InternalDecodeError.

    Raises:
        RequestBodyError: See decode_json_body.
    """
    ensure_closed_shape(shape)
    log = log or logger

    try:
        body = await request.body()
    except Exception as e:
        log.error(
            f"Failed to read request body on {request.method} {request.url.path}: {e}",
            exc_info=True,
        )
        raise InternalDecodeError() from e

    return await run_in_threadpool(decode_json_body, body, shape, log)
