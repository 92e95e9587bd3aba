from .crud import CRUDViewSet

__all__ = ['CRUDViewSet']
