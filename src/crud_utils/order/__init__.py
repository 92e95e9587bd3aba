from .filters import CrudOrderingFilter
from .models import ASC, DESC, Order

__all__ = ['ASC', 'DESC', 'CrudOrderingFilter', 'Order']
