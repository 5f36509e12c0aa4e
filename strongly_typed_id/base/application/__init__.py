from .id_generator_config import *  # NOQA
