from .builders import JsonResponseBuilder, TransformableJsonResponseBuilder

__all__ = ['JsonResponseBuilder', 'TransformableJsonResponseBuilder']
