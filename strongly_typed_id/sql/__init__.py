from .typed_id_type import *  # NOQA
