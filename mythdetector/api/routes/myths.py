"""
Myth library endpoints.
"""
from fastapi import APIRouter, Depends, Query

from mythdetector.knowledge import DEFAULT_CULTURE
from mythdetector.providers import ReferenceDirectoryClient
from ..dependencies import get_directory_client
from ..schemas import MythSearchResponse, ReferenceEntryResponse

router = APIRouter(prefix="/api/myths", tags=["Myth Library"])


@router.get("", response_model=MythSearchResponse)
async def search_myths(
    q: str = Query(default="", description="Comma separated names, e.g. 'zeus, odin'"),
    culture: str = Query(default=DEFAULT_CULTURE, description="Greek, Norse, Egyptian, Aztec or All"),
    directory: ReferenceDirectoryClient = Depends(get_directory_client),
) -> MythSearchResponse:
    """Search by names, or browse a culture when no names are given."""
    entries = await directory.search(q, culture)
    return MythSearchResponse(
        query=q,
        culture=culture,
        total=len(entries),
        myths=[ReferenceEntryResponse.from_entry(e) for e in entries],
    )


@router.get("/{name}", response_model=ReferenceEntryResponse)
async def get_myth(
    name: str,
    directory: ReferenceDirectoryClient = Depends(get_directory_client),
) -> ReferenceEntryResponse:
    entry = await directory.resolve(name)
    return ReferenceEntryResponse.from_entry(entry)
