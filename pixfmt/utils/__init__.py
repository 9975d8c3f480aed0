from .immutable import Immutable

__all__ = ["Immutable"]
