"""
Report Generator - Formats classified zones into Markdown reports.
"""
from collections.abc import Sequence
from datetime import UTC, datetime

from roadrisk.core.types import DashboardSummary, RiskLevel, ZoneResult
from roadrisk.services.risk.recommendations import action_plan_for, description_for

_ICONS = {
    RiskLevel.RED: "🔴",
    RiskLevel.ORANGE: "🟠",
    RiskLevel.YELLOW: "🟡",
    RiskLevel.GREEN: "🟢",
}


class ReportGenerator:
    """Generates formatted reports from zone classification results."""

    def generate_markdown_report(
        self,
        zones: Sequence[ZoneResult],
        summary: DashboardSummary | None = None,
        generated_at: datetime | None = None,
    ) -> str:
        """
        Generate a full Markdown report.

        Args:
            zones: Classified zones, any order
            summary: Optional aggregate figures for the overview section
            generated_at: Timestamp

        Returns:
            Markdown string
        """
        timestamp = (generated_at or datetime.now(UTC)).strftime("%Y-%m-%d %H:%M")

        sections = []

        # 1. Header
        sections.append("# Road Safety Zone Report")
        sections.append(f"**Date:** {timestamp}")
        sections.append(f"**Zones:** {len(zones)}")
        sections.append("---")

        # 2. Overview
        if summary is not None:
            sections.append("## Overview")
            sections.append(f"- **Total Accidents:** {summary.total_accidents}")
            sections.append(f"- **Total Casualties:** {summary.total_casualties}")
            sections.append(f"- **Critical Incidents:** {summary.high_severity_accidents}")
            sections.append(f"- **Unique Locations:** {summary.unique_locations}")
            for level, count in summary.zones_by_level.items():
                sections.append(f"- **{level.value.title()} Zones:** {count}")
            sections.append("")

        # 3. Zones, most severe tier first (stable within a tier)
        sections.append("## Zone Classification")

        ordered = sorted(zones, key=lambda z: z.risk_level.rank, reverse=True)

        if not ordered:
            sections.append("*No zones configured.*")

        for zone in ordered:
            level = zone.risk_level
            plan = action_plan_for(level)

            sections.append(f"### {_ICONS[level]} {zone.name} ({level.value.upper()} ZONE)")
            sections.append(description_for(level))
            sections.append("")
            sections.append(f"- **Accidents:** {zone.accident_count}")
            sections.append(f"- **Risk Score:** {zone.risk_score}")
            sections.append(f"- **Population:** {zone.population / 1000:.1f}K")
            sections.append(f"- **Location:** {zone.latitude:.4f}, {zone.longitude:.4f}")
            sections.append(f"- **Priority:** {plan.priority} ({plan.timeframe})")
            sections.append("")
            sections.append("**Safety Recommendations:**")
            for recommendation in zone.recommendations:
                sections.append(f"- {recommendation}")
            sections.append("")

        return "\n".join(sections)
