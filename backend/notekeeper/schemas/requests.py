"""
NoteKeeper Backend — Request Body Schemas
==========================================

What:  Pydantic models for the five JSON request bodies plus a lenient decoder.
How:   RequestBody.decode() turns raw bytes into a model instance that ALWAYS
       exists, even when the body is broken, and remembers the decode error
       separately. Services check required fields first and only then look at
       `decode_error`, so an empty-field complaint wins over a parse complaint.
Who:   Called by route handlers; consumed by the services layer.

Decoding rules:
    - Only the first JSON value is read; anything after it is ignored.
    - Empty body              → error "EOF", every field at its default.
    - `null`                  → every field at its default, no error.
    - Non-object value        → error, every field at its default.
    - Unknown keys            → ignored.
    - Key matching            → exact field name first, then case-insensitive.
    - `null` field value      → field keeps its default, no error.
    - Wrong type for a field  → error, but every well-typed field is kept.
    - Invalid UTF-8 bytes     → replaced by U+FFFD, no error.
    - Lone surrogate escapes  → replaced by U+FFFD in field values, no error.
    - NaN / Infinity literals → error, every field at its default.
    - Nesting too deep        → error, every field at its default.
    - Huge integer literals   → read as floats (so they never fit a field).

Defaults: "" for strings, 0 for integers.
"""

import json
import re
from typing import Any, Dict, Optional, Tuple

from pydantic import BaseModel, Field, PrivateAttr, StrictInt, StrictStr
from pydantic import ValidationError as PydanticValidationError

# Largest value of the unsigned 32-bit note id.
MAX_NOTE_ID = 2**32 - 1

# Longer integer literals are read as floats: int() refuses them and no
# field accepts them anyway.
MAX_INT_DIGITS = 4000

_LONE_SURROGATE = re.compile("[\ud800-\udfff]")


def _parse_int(literal: str) -> Any:
    if len(literal.lstrip("-")) > MAX_INT_DIGITS:
        return float(literal)
    return int(literal)


def _reject_constant(literal: str) -> Any:
    raise ValueError(f"invalid character {literal!r} looking for beginning of value")


_decoder = json.JSONDecoder(parse_int=_parse_int, parse_constant=_reject_constant)


def _json_kind(value: Any) -> str:
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def _read_object(raw: bytes) -> Tuple[Dict[str, Any], Optional[str]]:
    """Return the top-level JSON object of `raw` and the decode error, if any."""
    text = raw.decode("utf-8", errors="replace").lstrip()

    if not text:
        return {}, "EOF"

    try:
        value, _ = _decoder.raw_decode(text)
    except ValueError as exc:
        return {}, f"invalid JSON: {exc}"
    except RecursionError:
        return {}, "invalid JSON: exceeded max nesting depth"

    if value is None:
        return {}, None
    if not isinstance(value, dict):
        return {}, f"json: cannot unmarshal {_json_kind(value)} into request object"
    return value, None


class RequestBody(BaseModel):
    """
    Base class for request bodies decoded with the lenient rules above.

    Subclasses declare their fields with strict types and defaults; they must
    never be constructed from untrusted input except through decode().
    """

    model_config = {"extra": "ignore"}

    _decode_error: Optional[str] = PrivateAttr(default=None)

    @property
    def decode_error(self) -> Optional[str]:
        """Message describing why the body did not decode cleanly, or None."""
        return self._decode_error

    @classmethod
    def decode(cls, raw: bytes) -> "RequestBody":
        obj, error = _read_object(raw)
        data = cls._match_fields(obj)

        try:
            body = cls.model_validate(data)
        except PydanticValidationError as exc:
            problems = exc.errors()
            rejected = {problem["loc"][0] for problem in problems if problem["loc"]}
            first = problems[0]
            error = error or (
                f"json: cannot unmarshal {_json_kind(first['input'])} "
                f"into field {first['loc'][0]}: {first['msg']}"
            )
            body = cls.model_validate(
                {name: value for name, value in data.items() if name not in rejected}
            )

        body._decode_error = error
        return body

    @classmethod
    def _match_fields(cls, obj: Dict[str, Any]) -> Dict[str, Any]:
        folded = {name.lower(): name for name in cls.model_fields}
        data: Dict[str, Any] = {}
        for key, value in obj.items():
            name = key if key in cls.model_fields else folded.get(key.lower())
            if name is None or value is None:
                continue
            if isinstance(value, str):
                value = _LONE_SURROGATE.sub("\ufffd", value)
            data[name] = value
        return data


class SignupRequest(RequestBody):
    name: StrictStr = ""
    email: StrictStr = ""
    password: StrictStr = ""


class LoginRequest(RequestBody):
    email: StrictStr = ""
    password: StrictStr = ""


class SessionRequest(RequestBody):
    """Body of GET /notes: just the session id."""

    sid: StrictStr = ""


class CreateNoteRequest(RequestBody):
    sid: StrictStr = ""
    note: StrictStr = ""


class DeleteNoteRequest(RequestBody):
    sid: StrictStr = ""
    id: StrictInt = Field(default=0, ge=0, le=MAX_NOTE_ID)
