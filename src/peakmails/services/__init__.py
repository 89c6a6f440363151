"""Services module for Peakmails Python SDK."""

from .categories import CategoriesService
from .contacts import ContactsService
from .scenarios import ScenariosService

__all__ = ["CategoriesService", "ContactsService", "ScenariosService"]
