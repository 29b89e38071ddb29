from .zip import zip

__all__ = ("zip",)
