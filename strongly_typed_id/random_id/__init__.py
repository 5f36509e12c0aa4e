from .random_id import *  # NOQA
