"""Route dependencies built from settings; tests swap them via dependency_overrides."""
from catalog.core.config import settings
from catalog.services.images import ImagePathResolver, ImageStore
from catalog.services.items import ItemRepository


def get_item_repository() -> ItemRepository:
    return ItemRepository(settings.items_file)


def get_image_store() -> ImageStore:
    return ImageStore(settings.image_dir)


def get_image_resolver() -> ImagePathResolver:
    return ImagePathResolver(settings.image_dir)
