from django.apps import AppConfig

from modules.products.repositories.memory_repository import ProductMemoryRepository


class ProductsConfig(AppConfig):
    name = "modules.products"
    label = "products"

    def ready(self) -> None:
        self.repository = ProductMemoryRepository()

    def reset_repository(self) -> ProductMemoryRepository:
        """Replace the store with an empty one (ids restart at 1)."""
        self.repository = ProductMemoryRepository()
        return self.repository
