from .error_adapter import FormErrorAdapter

__all__ = ['FormErrorAdapter']
