from .b64 import b64d, b64e, wrap_lines

__all__ = ["b64d", "b64e", "wrap_lines"]
