from .console import cnsl, set_logger

__all__ = ['cnsl', 'set_logger']
