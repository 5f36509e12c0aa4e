from .secure_byte_source import *  # NOQA
