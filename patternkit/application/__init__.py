"""Application layer - use cases built on registries and repositories."""

from .notification.service import NotificationService
from .pricing.service import PricingService
from .user.service import UserService

__all__ = ['NotificationService', 'PricingService', 'UserService']
