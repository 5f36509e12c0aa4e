# (c) Nelen & Schuurmans
import importlib
import logging
import os
from collections.abc import Callable
from collections.abc import Mapping
from typing import Any

import inject
from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import ValidationError

from ...nanoid import Base58Generator
from ...nanoid import NanoIdGenerator
from ...prefixed import PrefixedIdGenerator
from ...random_id import RandomBytesGenerator
from ...random_id import RandomStringGenerator
from ...short_ids import HashidsGenerator
from ...short_ids import SqidsGenerator
from ...uuids import GuidGenerator
from ...uuids import UlidGenerator
from ...uuids import UuidV1Generator
from ...uuids import UuidV3Generator
from ...uuids import UuidV4Generator
from ...uuids import UuidV5Generator
from ...uuids import UuidV6Generator
from ...uuids import UuidV7Generator
from ...uuids import UuidV8Generator
from ..domain import GeneratorType
from ..domain import IdGenerator
from ..domain import InvalidGenerator

__all__ = [
    "IdGeneratorConfig",
    "make_generator",
    "bind_generator",
    "configure",
    "generate_id",
]

logger = logging.getLogger(__name__)

Json = dict[str, Any]

GENERATORS: dict[GeneratorType, Callable[..., IdGenerator]] = {
    GeneratorType.UUID_V1: UuidV1Generator,
    GeneratorType.UUID_V3: UuidV3Generator,
    GeneratorType.UUID_V4: UuidV4Generator,
    GeneratorType.UUID_V5: UuidV5Generator,
    GeneratorType.UUID_V6: UuidV6Generator,
    GeneratorType.UUID_V7: UuidV7Generator,
    GeneratorType.UUID_V8: UuidV8Generator,
    GeneratorType.ULID: UlidGenerator,
    GeneratorType.SQIDS: SqidsGenerator,
    GeneratorType.HASHIDS: HashidsGenerator,
    GeneratorType.NANOID: NanoIdGenerator,
    GeneratorType.BASE58: Base58Generator,
    GeneratorType.GUID: GuidGenerator,
    GeneratorType.RANDOM_STRING: RandomStringGenerator,
    GeneratorType.RANDOM_BYTES: RandomBytesGenerator,
}

# Stripe-style ids: random_string of 24 characters behind the prefix
DEFAULT_PREFIX = "id"
DEFAULT_PREFIXED_OPTIONS: Json = {"length": 24}


class IdGeneratorConfig(BaseModel):
    """Selects the generator that ``TypedId.generate()`` and ``generate_id()`` use.

    ``generator`` is either a GeneratorType value or the import path of an
    IdGenerator subclass (``package.module:ClassName`` or
    ``package.module.ClassName``). Options in ``generators`` (built-in types)
    or ``custom`` (import paths) are passed to the generator's constructor.

    The ``prefixed`` options are special: ``prefix`` and ``generator`` (the
    type of the inner generator); remaining keys go to the inner generator.
    """

    model_config = ConfigDict(frozen=True)

    generator: Any = GeneratorType.UUID_V7.value
    generators: dict[str, Json] = {}
    custom: dict[str, Json] = {}

    @classmethod
    def create(cls, **values) -> "IdGeneratorConfig":
        try:
            return cls(**values)
        except ValidationError as e:
            raise InvalidGenerator(str(e))

    @classmethod
    def from_env(
        cls, environ: Mapping[str, str] | None = None
    ) -> "IdGeneratorConfig":
        if environ is None:
            environ = os.environ
        prefixed: Json = {}
        if "STRONGLY_TYPED_ID_PREFIX" in environ:
            prefixed["prefix"] = environ["STRONGLY_TYPED_ID_PREFIX"]
        if "STRONGLY_TYPED_ID_PREFIXED_GENERATOR" in environ:
            prefixed["generator"] = environ["STRONGLY_TYPED_ID_PREFIXED_GENERATOR"]
        return cls.create(
            generator=environ.get(
                "STRONGLY_TYPED_ID_GENERATOR", GeneratorType.UUID_V7.value
            ),
            generators={GeneratorType.PREFIXED.value: prefixed} if prefixed else {},
        )

    def options(self, name: str) -> Json:
        if name in self.custom:
            return dict(self.custom[name])
        return dict(self.generators.get(name, {}))


def _import_generator_class(path: str) -> type[IdGenerator]:
    if ":" in path:
        module_name, _, class_name = path.partition(":")
    else:
        module_name, _, class_name = path.rpartition(".")
    if not module_name or not class_name:
        raise InvalidGenerator.unsupported_type(path)
    try:
        klass = getattr(importlib.import_module(module_name), class_name)
    except (ImportError, AttributeError):
        raise InvalidGenerator.unsupported_type(path)
    if not isinstance(klass, type) or not issubclass(klass, IdGenerator):
        raise InvalidGenerator.unsupported_type(path)
    logger.info("loaded custom id generator %s", path)
    return klass


def _make_prefixed(config: IdGeneratorConfig) -> PrefixedIdGenerator:
    options = config.options(GeneratorType.PREFIXED.value)
    prefix = options.pop("prefix", DEFAULT_PREFIX)
    inner = options.pop("generator", None)
    if inner is None:
        inner = GeneratorType.RANDOM_STRING.value
    if inner == GeneratorType.PREFIXED.value:
        raise InvalidGenerator("a prefixed generator cannot wrap another one")
    defaults = DEFAULT_PREFIXED_OPTIONS if inner == GeneratorType.RANDOM_STRING else {}
    inner_config = config.model_copy(
        update={
            "generator": inner,
            "generators": {
                **config.generators,
                inner: {**defaults, **config.options(inner), **options},
            },
            "custom": {},
        }
    )
    return PrefixedIdGenerator(prefix, make_generator(inner_config))


def make_generator(config: IdGeneratorConfig) -> IdGenerator:
    name = config.generator
    if isinstance(name, GeneratorType):
        name = name.value
    if not isinstance(name, str) or name == "":
        raise InvalidGenerator.invalid_config_value(name)
    try:
        generator_type = GeneratorType(name)
    except ValueError:
        if "." not in name and ":" not in name:
            raise InvalidGenerator.unsupported_type(name)
        return _import_generator_class(name)(**config.options(name))
    if generator_type is GeneratorType.PREFIXED:
        return _make_prefixed(config)
    return GENERATORS[generator_type](**config.options(name))


def bind_generator(binder: inject.Binder, config: IdGeneratorConfig) -> None:
    generator = make_generator(config)
    binder.bind(IdGenerator, generator)
    logger.info("bound id generator %s", type(generator).__name__)


def configure(config: IdGeneratorConfig | None = None) -> IdGenerator:
    """(Re)configure the inject container with an IdGenerator.

    Applications that set up inject themselves should call ``bind_generator``
    from their own binder function instead. Without a config, it is read from
    the environment.
    """
    if config is None:
        config = IdGeneratorConfig.from_env()
    # build before clearing, an invalid config keeps the current binding
    generator = make_generator(config)
    inject.clear_and_configure(lambda binder: binder.bind(IdGenerator, generator))
    logger.info("bound id generator %s", type(generator).__name__)
    return generator


def generate_id() -> str:
    return inject.instance(IdGenerator).generate()
