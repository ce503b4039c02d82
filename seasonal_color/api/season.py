"""季型 API

提供：
1. 细分季型判定 - 用户画像 → 12 细分季型
2. 细分季型色板查询
3. 父季型下的细分季型列表
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from seasonal_color.models.schema import (
    ParentSeasonResponse,
    ResolveSeasonRequest,
    ResolveSeasonResponse,
    SeasonPaletteResponse,
)
from seasonal_color.service.palette.registry import get_palette_registry
from seasonal_color.service.season.resolver import determine_micro_season
from seasonal_color.service.season.taxonomy import MICRO_TO_PARENT, PARENT_SEASONS

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/season/resolve", response_model=ResolveSeasonResponse)
def resolve_season(req: ResolveSeasonRequest) -> ResolveSeasonResponse:
    """根据 {父季型, 深浅, 清浊, 冷暖} 判定细分季型"""
    micro_season = determine_micro_season(req.season, req.depth, req.clarity, req.undertone)
    logger.info("【season/resolve】%s → %s", req.season, micro_season)
    return ResolveSeasonResponse(micro_season=micro_season, season=req.season)


@router.get("/season/parent/{season}", response_model=ParentSeasonResponse)
def list_micro_seasons(season: str) -> ParentSeasonResponse:
    """父季型下的细分季型"""
    if season not in PARENT_SEASONS:
        raise HTTPException(status_code=404, detail=f"未知父季型: {season}")
    micro_seasons = get_palette_registry().get_micro_seasons_for_parent(season)
    return ParentSeasonResponse(season=season, micro_seasons=micro_seasons)


@router.get("/season/{micro_season}/palette", response_model=SeasonPaletteResponse)
def get_palette(micro_season: str) -> SeasonPaletteResponse:
    """细分季型的四个色组（含 Lab）"""
    palette = get_palette_registry().get_micro_season_palette(micro_season)
    if palette is None:
        raise HTTPException(status_code=404, detail=f"未知细分季型: {micro_season}")
    return SeasonPaletteResponse.from_palette(
        micro_season, MICRO_TO_PARENT[micro_season], palette
    )
