import logging

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import FileResponse

from catalog.api.deps import get_image_resolver
from catalog.core.errors import CatalogError
from catalog.services.images import ImagePathResolver

router = APIRouter()
logger = logging.getLogger(__name__)

@router.get("/images/{filename}")
def get_image(filename: str, resolver: ImagePathResolver = Depends(get_image_resolver)):
    # Unknown images fall back to default.jpg; rejected paths are a 400.
    try:
        resolved = resolver.resolve(filename)
    except CatalogError as exc:
        logger.warning("Failed to build image path: %s", exc)
        raise HTTPException(status_code=exc.status_code, detail=str(exc)) from exc

    img_path = resolved.path
    if not resolved.found:
        logger.debug("Image not found: %s", img_path)
        img_path = resolver.default_path
        if not img_path.is_file():
            logger.error("Default image missing: %s", img_path)
            raise HTTPException(status_code=404, detail="image not found")

    logger.info("Returned image %s", img_path)
    return FileResponse(str(img_path), media_type="image/jpeg")
