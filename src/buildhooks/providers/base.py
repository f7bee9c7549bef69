"""Shared hook provider contract and request helpers."""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from ..exceptions import EmptyBodyError, PayloadDecodeError
from ..schemas.trigger import HookCheckResult, TransformResult

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class HookProvider(ABC):
    """
    A webhook source the routing layer can hand requests to.

    The routing layer calls hook_check on candidate providers first, which
    must only look at headers. transform is called once a provider has
    accepted the request, and is the only step that reads the body.
    """

    @abstractmethod
    def hook_check(self, headers: Mapping[str, str]) -> HookCheckResult:
        """Decide from headers alone whether this provider handles the request."""

    @abstractmethod
    def transform(self, headers: Mapping[str, str], body: bytes | None) -> TransformResult:
        """Decode the body and apply the event rules."""


def get_header(headers: Mapping[str, str], name: str) -> str:
    """Case-insensitive header lookup, returning "" when absent."""
    wanted = name.lower()
    for key, value in headers.items():
        if key.lower() == wanted:
            return value
    return ""


def decode_json_body(body: bytes | None, model: type[ModelT]) -> ModelT:
    """
    Decode a raw webhook body into the given payload model.

    Raises EmptyBodyError when there is nothing to decode, and
    PayloadDecodeError when the bytes are not JSON of the expected shape.
    """
    if not body:
        raise EmptyBodyError()

    try:
        return model.model_validate_json(body)
    except ValidationError as e:
        detail = "; ".join(err["msg"] for err in e.errors())
        logger.debug(f"Could not decode {model.__name__}: {detail}")
        raise PayloadDecodeError(detail) from e
