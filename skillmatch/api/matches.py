"""Candidate search and match-record endpoints."""
import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession
from skillmatch.api.deps import AuthUser, get_db, require_user
from skillmatch.schemas.match import CreateMatchRequest, MatchRecord, RejectMatchRequest
from skillmatch.services.match_service import MatchService
from skillmatch.services.match_record_service import MatchRecordService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["matches"])


# ========================
# Candidates (public)
# ========================

@router.get("/match")
async def get_candidates(
    user_id: Optional[str] = Query(None),
    session: AsyncSession = Depends(get_db),
):
    """Users who give skills that ``user_id`` wants, best overlap first."""
    candidates = await MatchService(session).find_candidates(user_id)
    return {"matches": candidates, "count": len(candidates)}


# ========================
# Match records
# ========================

@router.post("/matches")
async def create_match(
    req: CreateMatchRequest,
    user: AuthUser = Depends(require_user),
    session: AsyncSession = Depends(get_db),
):
    match = await MatchRecordService(session).create_match(req.user_a, req.user_b, req.matched_skills)
    return {"match": MatchRecord.model_validate(match)}


@router.get("/matches")
async def get_user_matches(
    user_id: Optional[str] = Query(None),
    user: AuthUser = Depends(require_user),
    session: AsyncSession = Depends(get_db),
):
    matches = await MatchRecordService(session).list_user_matches(user_id)
    return {"matches": [MatchRecord.model_validate(m) for m in matches]}


@router.patch("/matches/{match_id}/accept")
async def accept_match(
    match_id: str,
    user: AuthUser = Depends(require_user),
    session: AsyncSession = Depends(get_db),
):
    match = await MatchRecordService(session).accept_match(match_id)
    return {"match": MatchRecord.model_validate(match)}


@router.patch("/matches/{match_id}/reject")
async def reject_match(
    match_id: str,
    req: Optional[RejectMatchRequest] = None,
    user: AuthUser = Depends(require_user),
    session: AsyncSession = Depends(get_db),
):
    reason = req.reason if req else None
    match = await MatchRecordService(session).reject_match(match_id, reason)
    return {"match": MatchRecord.model_validate(match)}
