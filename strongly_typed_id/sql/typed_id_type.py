# (c) Nelen & Schuurmans
from typing import Any
from typing import TypeVar

from sqlalchemy import String
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator

from ..base.domain import InvalidType
from ..base.domain import TypedId

__all__ = ["TypedIdType"]


T = TypeVar("T", bound=TypedId)


class TypedIdType(TypeDecorator[T]):
    """Stores a TypedId subclass in a string column.

    Usage::

        Column("id", TypedIdType(UserId), primary_key=True)

    Strings are validated on the way in (and stored unchanged); values read
    from the database are parsed with ``id_class.from_string``.
    """

    impl = String
    cache_ok = True

    def __init__(self, id_class: type[T], length: int = 255, key: str = "id"):
        if not isinstance(id_class, type) or not issubclass(id_class, TypedId):
            raise TypeError(f"{id_class!r} must be a subclass of TypedId")
        super().__init__(length)
        self.id_class = id_class
        self.key = key

    def process_bind_param(self, value: Any, dialect: Dialect) -> str | None:
        if value is None:
            return None
        if isinstance(value, TypedId):
            return value.value
        if isinstance(value, str):
            self.id_class.from_string(value)
            return value
        raise InvalidType.for_setter(self.key, value, self.id_class)

    def process_result_value(self, value: Any, dialect: Dialect) -> T | None:
        if value is None:
            return None
        if isinstance(value, self.id_class):
            return value
        if not isinstance(value, str):
            raise InvalidType.for_getter(self.key, value)
        return self.id_class.from_string(value)

    @property
    def python_type(self) -> type[T]:
        return self.id_class
