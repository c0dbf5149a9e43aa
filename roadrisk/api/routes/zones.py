"""
Zone classification routes.
"""
import logging
from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException

from roadrisk.core.errors import ConfigurationError, DataError, RoadRiskError
from roadrisk.core.types import (
    ClassifyRequest,
    ClassifyResponse,
    RiskLevel,
    RiskLevelInfo,
    ZoneDefinition,
)
from roadrisk.services.analytics.summary import build_dashboard_summary
from roadrisk.services.report.generator import ReportGenerator
from roadrisk.services.risk.colors import get_risk_color
from roadrisk.services.risk.engine import ZoneRiskEngine
from roadrisk.services.risk.recommendations import (
    action_plan_for,
    description_for,
    recommendations_for,
)

logger = logging.getLogger(__name__)
router = APIRouter()


@lru_cache(maxsize=1)
def get_engine() -> ZoneRiskEngine:
    """Engine over the configured zone catalog, built once."""
    return ZoneRiskEngine()


def _error(status_code: int, error: RoadRiskError) -> HTTPException:
    return HTTPException(
        status_code=status_code,
        detail={"error": error.message, "code": error.code},
    )


def _engine() -> ZoneRiskEngine:
    try:
        return get_engine()
    except ConfigurationError as e:
        logger.error(f"Zone catalog unavailable: {e.message}")
        raise _error(500, e)


@router.get("/zones/catalog", response_model=list[ZoneDefinition])
async def zone_catalog(engine: ZoneRiskEngine = Depends(_engine)):
    """List the configured zones in catalog order."""
    return list(engine.catalog)


@router.get("/risk-levels", response_model=list[RiskLevelInfo])
async def risk_levels():
    """Display metadata for every risk tier, most severe first."""
    levels = sorted(RiskLevel, key=lambda level: level.rank, reverse=True)
    return [
        RiskLevelInfo(
            level=level,
            rank=level.rank,
            color=get_risk_color(level),
            description=description_for(level),
            priority=action_plan_for(level).priority,
            timeframe=action_plan_for(level).timeframe,
            recommendations=recommendations_for(level),
        )
        for level in levels
    ]


@router.post("/zones/classify", response_model=ClassifyResponse)
def classify_zones(
    request: ClassifyRequest,
    engine: ZoneRiskEngine = Depends(_engine),
):
    """
    Classify zones from a batch of incidents.

    Uses the zones in the request when given, otherwise the configured
    catalog.
    """
    try:
        if request.zones is not None:
            engine = ZoneRiskEngine(
                request.zones,
                distance=engine.membership.distance,
                radius_km=engine.membership.radius_km,
                scorer=engine.scorer,
                classifier=engine.classifier,
                use_spatial_index=engine.use_spatial_index,
            )
        zones = engine.classify(request.incidents)
    except (ConfigurationError, DataError) as e:
        logger.warning(f"Classification rejected: {e.message}")
        raise _error(422, e)

    summary = build_dashboard_summary(request.incidents, zones)
    report = None
    if request.include_report:
        report = ReportGenerator().generate_markdown_report(zones, summary)

    return ClassifyResponse(zones=zones, summary=summary, report=report)
