from .ulid_generator import *  # NOQA
from .uuid_generators import *  # NOQA
