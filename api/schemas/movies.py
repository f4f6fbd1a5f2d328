"""
Movie API Schemas - Request/response models for the movie registry

The same model is used for request bodies and responses: the client-supplied
`id` is accepted but always overwritten by the server.
"""

import logging
from typing import Any, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from movie_registry.errors import InvalidMovieError

logger = logging.getLogger(__name__)


class RecordModel(BaseModel):
    """
    Base for decoded records.

    JSON keys match field names case-insensitively ("Title" sets title).
    When several keys map to the same field, the last one wins.
    """

    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def fold_key_case(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        names = {name.lower(): name for name in cls.model_fields}
        folded = {}
        for key, value in data.items():
            if key not in cls.model_fields:
                key = names.get(key.lower(), key)
            folded[key] = value
        return folded


class Director(RecordModel):
    """Director of a movie"""

    firstname: str = Field("", description="Director first name")
    lastname: str = Field("", description="Director last name")

    @field_validator("firstname", "lastname", mode="before")
    @classmethod
    def null_to_empty(cls, value: Any) -> Any:
        # JSON null leaves a string at its zero value
        return "" if value is None else value


class Movie(RecordModel):
    """
    A single movie record.

    Missing or null string fields decode to "" and a missing director to None.
    Unknown fields are ignored.
    """

    id: str = Field("", description="Server-generated unique identifier")
    isbn: str = Field("", description="ISBN (free-form)")
    title: str = Field("", description="Movie title (free-form)")
    director: Optional[Director] = Field(None, description="Director details (nullable)")

    @field_validator("id", "isbn", "title", mode="before")
    @classmethod
    def null_to_empty(cls, value: Any) -> Any:
        return "" if value is None else value


def parse_movie(body: Union[bytes, str], message: Optional[str] = None) -> Movie:
    """
    Decode a raw request body into a Movie.

    Args:
        body: Raw JSON request body
        message: Error message returned to the client on failure

    Raises:
        InvalidMovieError: If the body is not a JSON object matching the Movie shape
    """
    try:
        return Movie.model_validate_json(body)
    except ValidationError as e:
        logger.debug(f"Rejected movie body: {e.error_count()} validation error(s)")
        raise InvalidMovieError(message) from e
