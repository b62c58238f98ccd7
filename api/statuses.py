from fastapi import APIRouter, Depends

from api.deps import get_status_catalog
from services.status_catalog import StatusCatalog
from utils.case import dict_keys_to_camel

router = APIRouter(prefix="/api/statuses", tags=["statuses"])


@router.get("")
async def list_statuses(catalog: StatusCatalog = Depends(get_status_catalog)):
    return dict_keys_to_camel(catalog.as_list())
