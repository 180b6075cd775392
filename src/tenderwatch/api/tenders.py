"""API routes for tender listings and details."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from tenderwatch.core.backends.base import BackendError
from tenderwatch.core.extract import InvalidTenderIdError
from tenderwatch.core.logging import get_logger
from tenderwatch.core.normalize.filters import InvalidFilterError
from tenderwatch.core.portals import EpmsPortal


logger = get_logger("api.tenders")

router = APIRouter(prefix="/api/tenders", tags=["tenders"])


def get_portal(request: Request) -> EpmsPortal:
    """Portal client shared by all requests of the app."""
    return request.app.state.portal


@router.get("")
async def list_tenders(
    page: str = Query(default="1"),
    keyword: str = Query(default=""),
    tender_no: str = Query(default=""),
    closing_date: str = Query(default=""),
    tender_type: str = Query(default=""),
    procurement_category: str = Query(default=""),
    tender_nature: str = Query(default=""),
    portal: EpmsPortal = Depends(get_portal),
):
    """List active tenders matching the filters, one portal page at a time."""
    try:
        result = await portal.list_tenders(
            page=page,
            keyword=keyword,
            tender_no=tender_no,
            closing_date=closing_date,
            tender_type=tender_type,
            procurement_category=procurement_category,
            tender_nature=tender_nature,
        )
    except InvalidFilterError as e:
        return JSONResponse(status_code=400, content={"error": str(e)})
    except BackendError as e:
        logger.error("Error fetching tenders: %s", e, extra={"url": e.url})
        return JSONResponse(status_code=500, content={"error": "Failed to fetch tenders"})
    
    return result.to_dict()


@router.get("/details/{tender_id}")
async def get_tender_details(
    tender_id: str,
    portal: EpmsPortal = Depends(get_portal),
):
    """Full record of one tender."""
    try:
        details = await portal.get_tender_details(tender_id)
    except InvalidTenderIdError:
        return JSONResponse(status_code=400, content={"error": "Invalid tender ID"})
    except BackendError as e:
        logger.error(
            "Error fetching tender details: %s",
            e,
            extra={"url": e.url, "tender_no": tender_id},
        )
        return JSONResponse(status_code=500, content={"error": "Failed to fetch tender details"})
    
    return details.to_dict()
