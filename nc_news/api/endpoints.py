from fastapi import APIRouter

from nc_news.services.endpoints import load_endpoints

router = APIRouter(prefix="/api", tags=["meta"])


@router.get("", summary="Catalogue of available endpoints")
async def get_endpoints():
    return {"endpoints": load_endpoints()}
