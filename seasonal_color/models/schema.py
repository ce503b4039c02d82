'''
Pydantic 数据模型定义
--------------------
功能：
1. 定义 API 请求和响应的数据结构
2. 提供枚举校验（季型、色组、深浅、清浊、冷暖）和 OpenAPI 文档
3. 将服务层的 dataclass 结果转换为响应模型
'''
from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, Field

from seasonal_color.service.classification.classifier import ClassificationResult
from seasonal_color.service.palette.registry import SeasonPalette
from seasonal_color.service.scoring.color_score import ColorScore
from seasonal_color.service.season.taxonomy import COLOR_GROUPS
from seasonal_color.utils.color_space import Lab

ParentSeason = Literal["spring", "summer", "autumn", "winter"]
MicroSeason = Literal[
    "light_spring", "warm_spring", "bright_spring",
    "soft_summer", "cool_summer", "light_summer",
    "deep_autumn", "soft_autumn", "warm_autumn",
    "bright_winter", "cool_winter", "deep_winter",
]
ColorGroup = Literal["neutrals", "accents", "brights", "softs"]
Depth = Literal["light", "medium", "deep"]
Clarity = Literal["muted", "medium", "clear", "vivid"]
Undertone = Literal["warm", "cool", "neutral"]
ClassificationStatus = Literal["great", "good", "ambiguous", "unclassified"]


# ==================== 通用 ====================

class LabModel(BaseModel):
    """CIE Lab 颜色"""
    L: float
    a: float
    b: float

    @classmethod
    def from_lab(cls, lab: Lab | None) -> LabModel | None:
        if lab is None:
            return None
        return cls(L=lab.L, a=lab.a, b=lab.b)


class NamedColorModel(BaseModel):
    """参考色名称 + HEX"""
    name: str
    hex: str


# ==================== 分类 ====================

class ClassifyRequest(BaseModel):
    """服装颜色分类请求"""
    hex: str = Field(..., description="服装主色 HEX，如 #1E3A8A", max_length=16)


class ClassifyBatchRequest(BaseModel):
    """批量分类请求"""
    hexes: list[Annotated[str, Field(max_length=16)]] = Field(
        ..., min_length=1, max_length=100, description="HEX 列表，单项长度限制同单个分类请求"
    )


class ClassificationResponse(BaseModel):
    """服装颜色分类结果"""
    dominant_hex: str
    lab: LabModel | None = None
    classification_status: ClassificationStatus
    micro_season_tag: MicroSeason | None = None
    season_tag: ParentSeason | None = None
    group_tag: ColorGroup | None = None
    nearest_palette_color: NamedColorModel | None = None
    min_delta_e: float | None = None
    secondary_micro_season_tag: MicroSeason | None = None
    secondary_season_tag: ParentSeason | None = None
    secondary_group_tag: ColorGroup | None = None
    secondary_delta_e: float | None = None

    @classmethod
    def from_result(cls, result: ClassificationResult) -> ClassificationResponse:
        nearest = result.nearest_palette_color
        return cls(
            dominant_hex=result.dominant_hex,
            lab=LabModel.from_lab(result.lab),
            classification_status=result.classification_status,
            micro_season_tag=result.micro_season_tag,
            season_tag=result.season_tag,
            group_tag=result.group_tag,
            nearest_palette_color=(
                NamedColorModel(name=nearest.name, hex=nearest.hex) if nearest else None
            ),
            min_delta_e=result.min_delta_e,
            secondary_micro_season_tag=result.secondary_micro_season_tag,
            secondary_season_tag=result.secondary_season_tag,
            secondary_group_tag=result.secondary_group_tag,
            secondary_delta_e=result.secondary_delta_e,
        )


class ClassifyBatchResponse(BaseModel):
    """批量分类结果（顺序与请求一致）"""
    results: list[ClassificationResponse]


# ==================== 用户配色评分 ====================

class ColorScoreRequest(BaseModel):
    """用户配色评分请求"""
    hex: str = Field(..., description="服装颜色 HEX", max_length=16)
    season: ParentSeason = Field(..., description="用户父季型")
    depth: Depth | None = Field(None, description="用户深浅")
    clarity: Clarity | None = Field(None, description="用户清浊")
    undertone: Undertone | None = Field(None, description="用户冷暖，缺省按父季型推导")
    micro_season: MicroSeason | None = Field(None, description="用户细分季型，缺省自动判定")
    near_face: bool = Field(True, description="是否靠近脸部穿着（上衣、围巾等）")


class ExplanationBulletModel(BaseModel):
    """说明要点，is_micronote 为 true 时以小字显示"""
    text: str
    is_micronote: bool = False


class GarmentAttributesModel(BaseModel):
    undertone: str
    depth: str
    clarity: str
    chroma: float
    hue_angle: float


class CompatibilityModel(BaseModel):
    undertone_score: float
    clarity_score: float
    depth_score: float
    total_score: float
    reasons: list[str]


class ColorScoreResponse(BaseModel):
    """用户配色评分结果"""
    rating: Literal["great", "good", "ok", "risky", "insufficient_data"]
    summary: str
    bullets: list[ExplanationBulletModel] = Field(default_factory=list)
    base_rating: str | None = None
    delta_e: float | None = None
    micro_season: str | None = None
    best_micro_season: str | None = None
    closest_color: NamedColorModel | None = None
    closest_group: str | None = None
    delta_e_by_micro_season: dict[str, float] = Field(default_factory=dict)
    garment_attributes: GarmentAttributesModel | None = None
    compatibility: CompatibilityModel | None = None
    chroma_level: str | None = None
    caps_applied: list[str] = Field(default_factory=list)

    @classmethod
    def from_score(cls, score: ColorScore) -> ColorScoreResponse:
        attrs = score.garment_attributes
        compat = score.compatibility
        closest = score.closest_color
        return cls(
            rating=score.rating,
            summary=score.summary,
            bullets=[
                ExplanationBulletModel(text=b.text, is_micronote=b.is_micronote)
                for b in score.bullets
            ],
            base_rating=score.base_rating,
            delta_e=score.delta_e,
            micro_season=score.micro_season,
            best_micro_season=score.best_micro_season,
            closest_color=NamedColorModel(name=closest.name, hex=closest.hex) if closest else None,
            closest_group=score.closest_group,
            delta_e_by_micro_season=score.delta_e_by_micro_season,
            garment_attributes=(
                GarmentAttributesModel(
                    undertone=attrs.undertone,
                    depth=attrs.depth,
                    clarity=attrs.clarity,
                    chroma=attrs.chroma,
                    hue_angle=attrs.hue_angle,
                )
                if attrs else None
            ),
            compatibility=(
                CompatibilityModel(
                    undertone_score=compat.undertone_score,
                    clarity_score=compat.clarity_score,
                    depth_score=compat.depth_score,
                    total_score=compat.score,
                    reasons=compat.reasons,
                )
                if compat else None
            ),
            chroma_level=score.chroma_level,
            caps_applied=score.caps_applied,
        )


# ==================== 季型 ====================

class ResolveSeasonRequest(BaseModel):
    """细分季型判定请求"""
    season: ParentSeason = Field(..., description="父季型")
    depth: Depth | None = Field(None, description="深浅")
    clarity: Clarity | None = Field(None, description="清浊，vivid 视为 clear")
    undertone: Undertone | None = Field(None, description="冷暖")


class ResolveSeasonResponse(BaseModel):
    micro_season: MicroSeason
    season: ParentSeason


class PaletteColorModel(BaseModel):
    name: str
    hex: str
    lab: LabModel


class SeasonPaletteResponse(BaseModel):
    """细分季型色板"""
    micro_season: MicroSeason
    season: ParentSeason
    neutrals: list[PaletteColorModel]
    accents: list[PaletteColorModel]
    brights: list[PaletteColorModel]
    softs: list[PaletteColorModel]

    @classmethod
    def from_palette(
        cls, micro_season: str, season: str, palette: SeasonPalette
    ) -> SeasonPaletteResponse:
        groups = {
            group: [
                PaletteColorModel(name=c.name, hex=c.hex, lab=LabModel.from_lab(c.lab))
                for c in palette.group(group)
            ]
            for group in COLOR_GROUPS
        }
        return cls(micro_season=micro_season, season=season, **groups)


class ParentSeasonResponse(BaseModel):
    season: ParentSeason
    micro_seasons: list[MicroSeason]
