import logging
from dataclasses import dataclass
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile

from catalog.api.deps import get_image_store, get_item_repository
from catalog.core.errors import CatalogError, ValidationError
from catalog.schemas.items import AddItemOut, Item, ItemsOut
from catalog.services.images import ImageStore
from catalog.services.items import ItemRepository

router = APIRouter()
logger = logging.getLogger(__name__)


@dataclass
class AddItemRequest:
    name: str
    category: str
    image: bytes


def parse_add_item_request(name: str, category: str, image: bytes) -> AddItemRequest:
    if not name:
        raise ValidationError("name is required")
    if not category:
        raise ValidationError("category is required")
    if not image:
        raise ValidationError("image is required")
    return AddItemRequest(name=name, category=category, image=image)


def _http_error(exc: CatalogError) -> HTTPException:
    if exc.status_code >= 500:
        logger.error("Item storage failure: %s", exc)
    else:
        logger.warning("Item request rejected: %s", exc)
    return HTTPException(status_code=exc.status_code, detail=str(exc))


# The root path lists items too; /items is an alias.
@router.get("/", response_model=ItemsOut)
@router.get("/items", response_model=ItemsOut)
def get_items(repo: ItemRepository = Depends(get_item_repository)):
    try:
        items = repo.get_all()
    except CatalogError as exc:
        raise _http_error(exc) from exc
    return ItemsOut(items=items)


@router.post("/items", response_model=AddItemOut)
def add_item(
    name: str = Form(""),
    category: str = Form(""),
    image: Optional[UploadFile] = File(None),
    repo: ItemRepository = Depends(get_item_repository),
    store: ImageStore = Depends(get_image_store),
):
    try:
        data = image.file.read() if image is not None else b""
        req = parse_add_item_request(name, category, data)
        fname = store.store(req.image)
        item = Item(name=req.name, category=req.category, image=fname)
        message = f"item received: {item.name}"
        logger.info(message)
        repo.insert(item)
    except CatalogError as exc:
        raise _http_error(exc) from exc
    return AddItemOut(message=message)


@router.get("/items/{item_id}", response_model=Item)
def get_item(item_id: int, repo: ItemRepository = Depends(get_item_repository)):
    try:
        return repo.get_by_index(item_id)
    except CatalogError as exc:
        raise _http_error(exc) from exc
