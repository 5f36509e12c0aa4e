# (c) Nelen & Schuurmans
from ..base.domain import IdGenerator

__all__ = ["PrefixedIdGenerator"]


class PrefixedIdGenerator(IdGenerator):
    """Stripe-style ids like ``cus_4f9a...``: prefix, underscore, inner id.

    The prefix is not validated; an empty prefix gives a leading underscore.
    """

    def __init__(self, prefix: str, generator: IdGenerator):
        self.prefix = prefix
        self.generator = generator

    def generate(self) -> str:
        return f"{self.prefix}_{self.generator.generate()}"
