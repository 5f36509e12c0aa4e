from .short_id_generators import *  # NOQA
