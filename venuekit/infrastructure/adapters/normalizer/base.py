"""
Pydantic base for venue payload models.
"""
import logging
from typing import Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from venuekit.exceptions import NormalizationError

logger = logging.getLogger(__name__)


class VenueModel(BaseModel):
    """
    Base for venue JSON shapes.

    Unknown fields are ignored; numbers sent where a string is declared
    are accepted as their string form.
    """

    model_config = ConfigDict(
        extra="ignore",
        coerce_numbers_to_str=True,
        frozen=True,
    )


M = TypeVar("M", bound=BaseModel)


def decode(model: Type[M], raw: bytes, kind: str) -> M:
    """
    Validate raw JSON bytes against a venue model.

    Raises:
        NormalizationError: If raw is empty or does not match the model
    """
    if not raw:
        raise NormalizationError(kind, f"empty {kind} response")
    try:
        return model.model_validate_json(raw)
    except ValidationError as e:
        raise NormalizationError(kind, f"invalid {model.__name__} payload: {e}") from e
