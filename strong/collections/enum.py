from enum import Enum
from pydantic.fields import ModelField

from typing import Any, Dict, Union

from .exception import InvalidArgumentError


class PydanticEnum(Enum):
    """
    Subtypes of this enum variant that are embedded in a pydantic model or settings object will be:
      - coerced into an enum instance using member name (case insensitive)
      - and expose member names (upper case) in model json schema.


    Example:
    ```python
    class Direction(PydanticEnum):
        ASCENDING = 0
        DESCENDING = 1

    class Ordering(pydantic.BaseModel):
        direction: Direction
        ...

    Ordering(direction=Direction.ASCENDING)
    Ordering(direction="ASCENDING")
    Ordering(direction="ascending")

    Ordering(direction=0) # invalid
    ```
    """

    @classmethod
    def __modify_schema__(cls, field_schema: Dict[str, Any], field: ModelField) -> None:
        """Method used by pydantic to populate json schema fields and their associated types."""
        if "enum" in field_schema:
            field_schema["enum"] = [f.name.upper() for f in field.type_]
            field_schema["type"] = "string"

    @classmethod
    def __get_validators__(cls):
        """Method used by pydantic to retrieve a class's validators."""
        yield cls.validate

    @classmethod
    def validate(cls, v: Union[Enum, str]):
        """
        Validate and potentially coerce `v` into a `cls` member by name, ignoring case

        Args:
            v: A member of this enum or the name of one

        Returns:
            The matching member

        Raises:
            InvalidArgumentError: If no member has the given name. Pydantic reports it as a validation error
        """
        if isinstance(v, cls):
            return v

        v = str(v).upper()

        for name, value in cls.__members__.items():
            if name.upper() == v:
                return value

        raise InvalidArgumentError(
            f"{v!r} is not a member of {cls.__name__}; expected one of {list(cls.__members__)}"
        )
