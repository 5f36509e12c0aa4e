from .alphabet_encoder import *  # NOQA
from .nanoid import *  # NOQA
