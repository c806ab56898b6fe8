"""
Response utilities for parsing aptly HTTP responses.

This module provides reusable helpers for turning aptly responses into
typed models.
"""

import logging
from typing import Any, List, Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

M = TypeVar("M", bound=BaseModel)


def parse_json_response(response: httpx.Response, operation: str) -> Any:
    """
    Parse a JSON response body.

    Args:
        response: HTTP response to parse
        operation: Description of operation for error messages

    Returns:
        Decoded JSON (object or array)

    Raises:
        ValueError: If the body is not valid JSON
    """
    try:
        return response.json()
    except ValueError as e:
        logging.error("Failed to parse JSON response for %s: %s", operation, e)
        logging.debug("Response content: %s", response.text[:500])
        raise ValueError(f"Invalid JSON response from aptly during {operation}: {e}") from e


def parse_model_list(response: httpx.Response, model: Type[M], operation: str) -> List[M]:
    """
    Parse a JSON array response into a list of models.

    aptly answers ``null`` instead of ``[]`` for some empty listings; both
    yield an empty list.

    Raises:
        ValueError: If the body is not a JSON array of matching objects
    """
    data = parse_json_response(response, operation)
    if data is None:
        return []
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array from aptly during {operation}, got {type(data).__name__}")
    try:
        return [model.model_validate(item) for item in data]
    except ValidationError as e:
        raise ValueError(f"Unexpected response from aptly during {operation}: {e}") from e


def parse_optional_model(response: httpx.Response, model: Type[M], operation: str) -> Optional[M]:
    """
    Parse the body of an already successful response, if possible.

    aptly's status code is authoritative for write operations; a body that
    is not the expected JSON is logged and ignored rather than raised.

    Returns:
        The parsed model, or None when the body does not parse
    """
    try:
        return model.model_validate(response.json())
    except ValueError as e:
        logging.debug("Ignoring unparseable response body for %s: %s", operation, e)
        return None


def parse_optional_list(response: httpx.Response, operation: str) -> List[Any]:
    """
    Parse a JSON array body of an already successful response, if possible.

    Returns:
        The decoded array, or an empty list when the body is not one
    """
    try:
        data = response.json()
    except ValueError as e:
        logging.debug("Ignoring unparseable response body for %s: %s", operation, e)
        return []
    if not isinstance(data, list):
        logging.debug("Ignoring non-array response body for %s: %r", operation, data)
        return []
    return data


__all__ = ["parse_json_response", "parse_model_list", "parse_optional_list", "parse_optional_model"]
