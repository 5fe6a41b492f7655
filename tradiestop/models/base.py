"""Base model for all records mirrored from the marketplace API.

The API speaks camelCase JSON (``imageUrl``, ``clientReviews``); the models
expose snake_case attributes and convert in both directions.
"""

from decimal import Decimal
from typing import Annotated, Any, Dict, Union

from pydantic import BaseModel, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

# Decimals travel as JSON numbers, not strings
Money = Annotated[
    Decimal, PlainSerializer(float, return_type=float, when_used="json")
]


def to_decimal(v: Union[str, int, float, Decimal]) -> Decimal:
    """Convert a JSON number or numeric string to Decimal without float noise.

    Raises:
        ValueError: If the value cannot be converted to Decimal
    """
    if isinstance(v, Decimal):
        return v
    if isinstance(v, bool):
        raise ValueError(f"Cannot convert {v!r} to Decimal")
    try:
        return Decimal(str(v))
    except (ArithmeticError, ValueError, TypeError) as e:
        raise ValueError(f"Cannot convert {v!r} to Decimal: {e}")


class BaseDataModel(BaseModel):
    """Base class for all data models.

    Provides:
    - camelCase aliases for API payloads, snake_case names in Python
    - validation on assignment
    - tolerance of fields the server adds that the client does not use

    Example:
        >>> class Contact(BaseDataModel):
        ...     image_url: str
        >>> Contact.model_validate({"imageUrl": "a.png"}).image_url
        'a.png'
        >>> Contact(image_url="a.png").to_api()
        {'imageUrl': 'a.png'}
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        validate_assignment=True,
        strict=False,
        extra="ignore",
        frozen=False,
    )

    def to_api(self, **kwargs: Any) -> Dict[str, Any]:
        """Serialize to the camelCase JSON body the API expects.

        Optional fields left as None are omitted.
        """
        return self.model_dump(by_alias=True, mode="json", exclude_none=True, **kwargs)
