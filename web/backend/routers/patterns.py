#!/usr/bin/env python3
"""
Oil pattern endpoints - browse and add pattern reference data.
"""

from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..dependencies import get_db, get_current_user_id
from ..services.pattern_service import PatternService
from ..models.requests import PatternCreate
from ..models.responses import PatternsResponse, PatternResponse

router = APIRouter(prefix="/api/patterns", tags=["patterns"])


@router.get("", response_model=PatternsResponse)
def list_patterns(
    category: Optional[str] = Query(default=None, description="pba, wtba, kegel or custom"),
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """List oil patterns, optionally filtered by category."""
    patterns = PatternService(db).list_patterns(category)
    return PatternsResponse(success=True, count=len(patterns), patterns=patterns)


@router.get("/{pattern_id}", response_model=PatternResponse)
def get_pattern(
    pattern_id: str,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Get one oil pattern."""
    return PatternResponse(success=True, pattern=PatternService(db).get_pattern(pattern_id))


@router.post("", response_model=PatternResponse)
def create_pattern(
    request: PatternCreate,
    user_id: str = Depends(get_current_user_id),
    db: Session = Depends(get_db)
):
    """Create an oil pattern."""
    pattern = PatternService(db).create_pattern(user_id, request)
    return PatternResponse(success=True, pattern=pattern)
