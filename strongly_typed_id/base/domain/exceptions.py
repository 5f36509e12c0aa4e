# (c) Nelen & Schuurmans

from typing import Any

__all__ = [
    "EntropyUnavailable",
    "InvalidAlphabet",
    "InvalidFormat",
    "InvalidGenerator",
    "InvalidType",
]


def _type_name(value: Any) -> str:
    return "None" if value is None else type(value).__name__


class EntropyUnavailable(Exception):
    def __init__(self, count: int):
        super().__init__(count)
        self.count = count

    def __str__(self):
        return f"entropy unavailable: could not read {self.count} random bytes"


class InvalidAlphabet(ValueError):
    def __init__(self, msg: str = "invalid alphabet"):
        super().__init__(msg)


class InvalidFormat(ValueError):
    def __init__(self, name: str, value: Any, reason: str | None = None):
        super().__init__(name, value)
        self.name = name
        self.value = value
        self.reason = reason

    def __str__(self) -> str:
        if self.reason:
            return f"{self.name} {self.reason}"
        return f"invalid format for {self.name}: {self.value!r}"


class InvalidGenerator(ValueError):
    @classmethod
    def invalid_config_value(cls, value: Any) -> "InvalidGenerator":
        return cls(
            "invalid generator configuration: expected a non-empty string, "
            f"got {_type_name(value)}"
        )

    @classmethod
    def unsupported_type(cls, name: str) -> "InvalidGenerator":
        return cls(
            f"unsupported generator type '{name}': use one of the GeneratorType "
            "values or the import path of an IdGenerator subclass"
        )


class InvalidType(TypeError):
    @classmethod
    def for_getter(cls, key: str, value: Any) -> "InvalidType":
        return cls(
            f"invalid type for column '{key}': expected str from the database, "
            f"got {_type_name(value)}"
        )

    @classmethod
    def for_setter(cls, key: str, value: Any, expected: type) -> "InvalidType":
        return cls(
            f"invalid value for column '{key}': expected None, str or "
            f"{expected.__name__}, got {_type_name(value)}"
        )
