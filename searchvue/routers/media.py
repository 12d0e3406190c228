from typing import Any, Dict

from fastapi import APIRouter, Depends, Path

from searchvue.services.media_service import SearchVueMediaService
from shared.wiring import get_media_service

router = APIRouter(
    prefix="/searchvue/v0",
    tags=["searchvue"],
    responses={
        422: {"description": "Request validation error (Pydantic)."},
    },
)


@router.get(
    "/media/{qid}",
    summary="Media for the search preview of an item",
    description=(
        "Searches the configured media repository for files depicting the item and returns "
        "the raw API payload together with a link to the same search on the repository.\n\n"
        "Returns an empty object when quick view media search is not configured."
    ),
    response_model=Dict[str, Dict[str, Any]],
    responses={
        200: {
            "description": "Media search result keyed by request name.",
            "content": {
                "application/json": {
                    "examples": {
                        "media": {
                            "summary": "Media found",
                            "value": {
                                "media": {
                                    "batchcomplete": "",
                                    "query": {
                                        "pages": {
                                            "12345": {
                                                "pageid": 12345,
                                                "ns": 6,
                                                "title": "File:Douglas adams portrait.jpg",
                                                "index": 1,
                                                "imageinfo": [
                                                    {
                                                        "thumburl": "https://upload.example/thumb/400px-Douglas_adams_portrait.jpg",
                                                        "thumbwidth": 400,
                                                        "thumbheight": 533,
                                                        "url": "https://upload.example/Douglas_adams_portrait.jpg",
                                                    }
                                                ],
                                            }
                                        }
                                    },
                                    "searchlink": "https://commons.example/w/index.php?search=haswbstatement%3AP180%3DQ42",
                                }
                            },
                        },
                        "disabled": {"summary": "Feature not configured", "value": {}},
                    }
                }
            },
        },
    },
)
async def get_media(
    qid: str = Path(..., description="Item identifier, e.g. `Q42`."),
    svc: SearchVueMediaService = Depends(get_media_service),
):
    """
    Media search for one item. Read-only; failures of the upstream transport are not caught here.
    """
    return await svc.get_media(qid)
