from typing import Optional
from fastapi import APIRouter, Depends, Query, HTTPException
from app.api.deps import get_repository
from app.core.constants import HIKE_NOT_FOUND
from app.repositories.hikes import HikeRepository
from app.schemas.hike import HikeCreate, HikeRead, HikeStats, HikeUpdate, Result

router = APIRouter(prefix="/hikes", tags=["hikes"])


def _raise_for(result: Result):
    if result.success:
        return
    if result.error == HIKE_NOT_FOUND:
        raise HTTPException(status_code=404, detail=HIKE_NOT_FOUND)
    raise HTTPException(status_code=400, detail=result.error)


def _load_or_503(result):
    if not result.success:
        raise HTTPException(status_code=503, detail=result.error or "Failed to load hikes")
    return result


@router.post("/", response_model=HikeRead)
def create_hike(payload: HikeCreate, repo: HikeRepository = Depends(get_repository)):
    created = repo.create_hike(payload)
    _raise_for(created)

    # Read back so the response carries id + created_at as stored
    fetched = repo.get_hike_by_id(created.id)
    _raise_for(fetched)
    return fetched.hike


@router.get("/", response_model=list[HikeRead])
def list_hikes(
    q: Optional[str] = Query(None, description="Search name, location, difficulty, notes..."),
    repo: HikeRepository = Depends(get_repository),
):
    """
    List hikes, most recent hike date first.

    The list screen's search box calls:
      GET /hikes?q=ridge
    """
    result = repo.search_hikes(q) if q else repo.get_all_hikes()
    return _load_or_503(result).hikes


@router.get("/map", response_model=list[HikeRead])
def list_mapped_hikes(repo: HikeRepository = Depends(get_repository)):
    return _load_or_503(repo.get_mapped_hikes()).hikes


@router.get("/stats", response_model=HikeStats)
def get_hike_stats(repo: HikeRepository = Depends(get_repository)):
    return _load_or_503(repo.get_hike_stats()).stats


@router.get("/{hike_id}", response_model=HikeRead)
def get_hike(hike_id: int, repo: HikeRepository = Depends(get_repository)):
    result = repo.get_hike_by_id(hike_id)
    _raise_for(result)
    return result.hike


@router.put("/{hike_id}", response_model=HikeRead)
def update_hike(hike_id: int, payload: HikeUpdate, repo: HikeRepository = Depends(get_repository)):
    _raise_for(repo.update_hike(hike_id, payload))

    result = repo.get_hike_by_id(hike_id)
    _raise_for(result)
    return result.hike


@router.delete("/{hike_id}")
def delete_hike(hike_id: int, repo: HikeRepository = Depends(get_repository)):
    _raise_for(repo.delete_hike(hike_id))
    return {"success": True}


@router.delete("/")
def clear_hikes(repo: HikeRepository = Depends(get_repository)):
    result = repo.clear_all_hikes()
    if not result.success:
        raise HTTPException(status_code=503, detail=result.error)
    return {"success": True}
