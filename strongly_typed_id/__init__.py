# -*- coding: utf-8 -*-
# (c) Nelen & Schuurmans

from .base.application.id_generator_config import *  # NOQA
from .base.domain.exceptions import *  # NOQA
from .base.domain.generator_type import GeneratorType  # NOQA
from .base.domain.id_generator import IdGenerator  # NOQA
from .base.domain.typed_id import TypedId  # NOQA
from .base.infrastructure.secure_byte_source import *  # NOQA
from .nanoid import *  # NOQA
from .prefixed import *  # NOQA
from .random_id import *  # NOQA
from .short_ids import *  # NOQA
from .uuids import *  # NOQA

# fmt: off
__version__ = '0.0.1.dev0'
# fmt: on
