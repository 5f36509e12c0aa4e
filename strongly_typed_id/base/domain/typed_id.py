# (c) Nelen & Schuurmans

import re
from typing import Any
from typing import ClassVar
from typing import Type
from typing import TypeVar
from uuid import UUID

import inject
from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .exceptions import InvalidFormat
from .generator_type import CASE_INSENSITIVE
from .generator_type import GeneratorType
from .generator_type import ID_FORMATS
from .id_generator import IdGenerator

__all__ = ["TypedId"]


T = TypeVar("T", bound="TypedId")


class TypedId:
    """An immutable identifier that is only equal to identifiers of the same class.

    Declare one subclass per entity. The accepted format defaults to the UUID
    shape and can be chosen with a class keyword::

        class UserId(TypedId):
            pass

        class OrderId(TypedId, id_format=GeneratorType.NANOID):
            pass

        class InvoiceId(TypedId, id_format="^inv_[0-9]{6}$"):
            pass

    A string ``id_format`` is compiled as a regular expression and matched
    against the whole value.
    """

    __slots__ = ("value",)

    value: str
    id_format: ClassVar[re.Pattern[str]] = ID_FORMATS[GeneratorType.UUID_V7]
    case_insensitive: ClassVar[bool] = True

    def __init_subclass__(
        cls, id_format: GeneratorType | str | None = None, **kwargs: Any
    ) -> None:
        super().__init_subclass__(**kwargs)
        if id_format is None:
            return
        if isinstance(id_format, GeneratorType):
            cls.id_format = ID_FORMATS[id_format]
            cls.case_insensitive = id_format in CASE_INSENSITIVE
        else:
            cls.id_format = re.compile(id_format)
            cls.case_insensitive = False

    def __init__(self, value: str):
        error = self.check(value)
        if error is not None:
            raise error
        object.__setattr__(self, "value", value)

    @classmethod
    def check(cls, value: Any) -> InvalidFormat | None:
        """Return the validation error for ``value``, or None if it is valid."""
        if not isinstance(value, str):
            return InvalidFormat(cls.__name__, value, "must be a string")
        if value == "" or value == "0":
            return InvalidFormat(cls.__name__, value, "cannot be empty")
        if cls.id_format.fullmatch(value) is None:
            return InvalidFormat(cls.__name__, value)
        return None

    @classmethod
    def from_string(cls: Type[T], value: str) -> T:
        if cls.case_insensitive and isinstance(value, str):
            value = value.lower()
        return cls(value)

    @classmethod
    def from_uuid(cls: Type[T], value: UUID) -> T:
        return cls.from_string(str(value))

    @classmethod
    def generate(cls: Type[T]) -> T:
        return cls.from_string(inject.instance(IdGenerator).generate())

    def to_string(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TypedId):
            return NotImplemented
        return type(self) is type(other) and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.__class__) + hash(self.value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{self.__class__.__name__} is immutable")

    def __reduce__(self):
        return (self.__class__, (self.value,))

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        from_str = core_schema.chain_schema(
            [
                core_schema.str_schema(),
                core_schema.no_info_plain_validator_function(cls.from_string),
            ]
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_str]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                str, return_schema=core_schema.str_schema()
            ),
        )
