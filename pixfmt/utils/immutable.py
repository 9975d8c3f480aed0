class Immutable:
    """Base for value types that refuse attribute writes once built."""

    __slots__ = ("_is_frozen",)

    def __setattr__(self, name, value):
        """Block attribute changes after __init__ finishes."""
        if getattr(self, "_is_frozen", False):
            raise AttributeError(f"{self.__class__.__name__} is immutable; cannot assign to {name}")
        super().__setattr__(name, value)

    def _freeze(self) -> None:
        object.__setattr__(self, "_is_frozen", True)
