import time
from pathlib import Path

from fastapi import APIRouter

from config import settings

router = APIRouter()

_start_time = time.time()


@router.get("/health")
async def health_check():
    return {
        "status": "ok",
        "uptime_seconds": round(time.time() - _start_time),
        "version": "0.1.0",
        "dataset": "remote" if settings.dataset_url else "local",
        "dataset_available": bool(settings.dataset_url) or Path(settings.data_path).is_file(),
    }
