from .prefixed_id_generator import *  # NOQA
