"""颜色分类 API

提供：
1. 服装颜色季型分类 - 单个 / 批量
2. 用户配色评分 - 基于用户画像的适配评级
"""

from __future__ import annotations

import logging

from fastapi import APIRouter

from seasonal_color.models.schema import (
    ClassificationResponse,
    ClassifyBatchRequest,
    ClassifyBatchResponse,
    ClassifyRequest,
    ColorScoreRequest,
    ColorScoreResponse,
)
from seasonal_color.service.classification.classifier import classify_garment
from seasonal_color.service.scoring.color_score import compute_color_score

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/color/classify", response_model=ClassificationResponse)
def classify(req: ClassifyRequest) -> ClassificationResponse:
    """
    服装颜色季型分类

    非法 HEX 不报错，返回 classification_status=unclassified
    """
    result = classify_garment(req.hex)
    logger.info(
        "【color/classify】%s → %s (%s/%s)",
        req.hex, result.classification_status, result.micro_season_tag, result.group_tag,
    )
    return ClassificationResponse.from_result(result)


@router.post("/color/classify/batch", response_model=ClassifyBatchResponse)
def classify_batch(req: ClassifyBatchRequest) -> ClassifyBatchResponse:
    """批量分类，结果顺序与请求一致"""
    logger.info("【color/classify/batch】%d 个颜色", len(req.hexes))
    results = [ClassificationResponse.from_result(classify_garment(h)) for h in req.hexes]
    return ClassifyBatchResponse(results=results)


@router.post("/color/score", response_model=ColorScoreResponse)
def score(req: ColorScoreRequest) -> ColorScoreResponse:
    """
    用户配色评分

    在用户父季型下的全部细分季型色板中比较，并按冷暖/清浊修正评级
    """
    result = compute_color_score(
        req.hex,
        req.season,
        depth=req.depth,
        clarity=req.clarity,
        micro_season=req.micro_season,
        undertone=req.undertone,
        near_face=req.near_face,
    )
    logger.info(
        "【color/score】%s season=%s → %s (ΔE=%s)",
        req.hex, req.season, result.rating,
        f"{result.delta_e:.2f}" if result.delta_e is not None else None,
    )
    return ColorScoreResponse.from_score(result)
