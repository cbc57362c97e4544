"""API endpoints for the college catalog and the student's college list."""

from fastapi import APIRouter, Depends, HTTPException, Query

from college_planner.core.auth_middleware import AuthContext, require_auth
from college_planner.core.college_list import (
    CollegeNotFoundError,
    DuplicateCollegeError,
    add_college,
    get_catalog,
    get_college_list,
    remove_college,
)
from college_planner.core.config import get_settings
from college_planner.core.logging import get_logger
from college_planner.core.schemas_colleges import (
    College,
    CollegeListEntry,
    CollegeListEntryCreate,
    CollegeListResponse,
)

logger = get_logger(__name__)

router = APIRouter(tags=["colleges"])


@router.get("/colleges", response_model=list[College])
async def search_catalog(
    q: str | None = Query(None, description="Search name, city or state"),
    auth: AuthContext = Depends(require_auth),  # noqa: B008
) -> list[College]:
    """Search active catalog colleges."""
    try:
        return get_catalog(q, limit=get_settings().CATALOG_LIMIT)
    except Exception as e:
        logger.exception("Failed to search college catalog")
        raise HTTPException(status_code=500, detail="Failed to search colleges") from e


@router.get("/me/colleges", response_model=CollegeListResponse)
async def list_my_colleges(
    auth: AuthContext = Depends(require_auth),  # noqa: B008
) -> CollegeListResponse:
    """The student's college list grouped into Reach, Target and Safety."""
    try:
        return get_college_list(auth.email, catalog_limit=get_settings().CATALOG_LIMIT)
    except Exception as e:
        logger.exception(f"Failed to list colleges for user {auth.user_id}")
        raise HTTPException(status_code=500, detail="Failed to list colleges") from e


@router.post("/me/colleges", response_model=CollegeListEntry, status_code=201)
async def add_my_college(
    data: CollegeListEntryCreate,
    auth: AuthContext = Depends(require_auth),  # noqa: B008
) -> CollegeListEntry:
    """Add a college to the student's list."""
    try:
        return add_college(auth.email, data)
    except DuplicateCollegeError as e:
        raise HTTPException(status_code=409, detail=str(e)) from e
    except CollegeNotFoundError as e:
        raise HTTPException(status_code=404, detail="College not found") from e
    except Exception as e:
        logger.exception(f"Failed to add college {data.college_id}")
        raise HTTPException(status_code=500, detail="Failed to add college") from e


@router.delete("/me/colleges/{entry_id}", status_code=204)
async def remove_my_college(
    entry_id: str,
    auth: AuthContext = Depends(require_auth),  # noqa: B008
) -> None:
    """Remove a college from the student's list."""
    try:
        remove_college(auth.email, entry_id)
    except CollegeNotFoundError as e:
        raise HTTPException(status_code=404, detail="College list entry not found") from e
    except Exception as e:
        logger.exception(f"Failed to remove college list entry {entry_id}")
        raise HTTPException(status_code=500, detail="Failed to remove college") from e
