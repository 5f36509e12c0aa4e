from .exceptions import *  # NOQA
from .generator_type import *  # NOQA
from .id_generator import *  # NOQA
from .typed_id import *  # NOQA
