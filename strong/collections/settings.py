"""
Environment driven configuration for the default comparers and maps
"""
import sys
import typing
from functools import lru_cache

from pydantic import BaseSettings
from pydantic import Field
from pydantic import ValidationError
from pydantic import validator

from .constants import DuplicateKeyPolicy
from .exception import InvalidArgumentError


class CollectionSettings(BaseSettings):
    float_epsilon: float = Field(sys.float_info.epsilon)
    """The largest difference between two numbers that are still considered equal"""

    default_duplicate_key_policy: DuplicateKeyPolicy = Field(DuplicateKeyPolicy.default())
    """The policy maps use when they are built without one"""

    @validator("float_epsilon")
    def _epsilon_must_be_positive(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("the epsilon must be greater than zero")
        return value

    @classmethod
    def usage(cls) -> str:
        """
        Return a formatted string describing every configuration variable
        """
        header = """
Usage: Provide the listed configuration variables as either environment
variables, in a '.env' file, or a mixture of both.

Configuration option names are case insensitive.

Configuration Variable:
"""
        items = [field_usage(cls, field_name) for field_name in cls.__fields__.keys()]
        return header + "\n".join(items)

    class Config(BaseSettings.Config):
        frozen = True
        case_sensitive = False
        env_prefix = "STRONG_COLLECTIONS_"
        env_file = ".env"
        env_file_encoding = "utf-8"
        fields = {
            "float_epsilon": {
                "description": "The largest difference between two numbers that are still considered equal"
            },
            "default_duplicate_key_policy": {
                "description": "The policy maps use when they are built without one "
                               "(THROW_EXCEPTION, IGNORE, or OVERWRITE)"
            },
        }


@lru_cache
def collection_settings() -> CollectionSettings:
    """
    The process-wide settings, read once from the environment
    """
    return _handle_settings(CollectionSettings)


_T = typing.TypeVar("_T", bound=BaseSettings)


def _handle_settings(cls: typing.Type[_T], **kwargs) -> _T:
    try:
        return cls(**kwargs)
    except ValidationError as e:
        usage: typing.List[str] = []
        for err in e.errors():
            field_name: str = err["loc"][0]
            usage.append(f"{field_usage(cls, field_name)}\nError: {err['msg']}\n")
        raise InvalidArgumentError(f"Collection configuration failure: {''.join(usage)}") from e


def field_usage(cls: typing.Type[BaseSettings], field_name: str) -> str:
    field_schema = cls.schema(by_alias=False)["properties"][field_name]
    field = cls.__fields__[field_name]

    names = ",".join(name.upper() for name in field_schema["env_names"])

    default = field.get_default()
    if isinstance(default, DuplicateKeyPolicy):
        default = default.name
    elif isinstance(default, str):
        default = repr(default)

    description = (
        f"\n\t{field_schema['description']}" if "description" in field_schema else ""
    )

    return f"{names}: {field.outer_type_.__name__} (default={default}){description}"
