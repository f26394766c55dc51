from fastapi import APIRouter, Depends
from api.deps import get_ward
from core.ward import Ward

router = APIRouter(prefix="/health", tags=["Health Check"])


@router.get("/check", summary="Health Check")
def healthcheck(ward: Ward = Depends(get_ward)):
    return {"status": "ok", "beds": ward.config.total_beds}
