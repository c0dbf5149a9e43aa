"""
Zone Classifier - Assigns a risk tier from accident count and risk score.

Tiers, checked from most to least severe (first match wins):
- red: accident_count >= 20 or risk_score >= 80
- orange: accident_count >= 10 or risk_score >= 50
- yellow: accident_count >= 3 or risk_score >= 20
- green: everything else
"""
from roadrisk.core.types import RiskLevel


class ZoneClassifier:
    """Classifies zones into risk tiers."""

    # (level, min accident count, min risk score)
    RULES: tuple[tuple[RiskLevel, int, int], ...] = (
        (RiskLevel.RED, 20, 80),
        (RiskLevel.ORANGE, 10, 50),
        (RiskLevel.YELLOW, 3, 20),
    )
    FALLBACK = RiskLevel.GREEN

    def classify(self, accident_count: int, risk_score: int) -> RiskLevel:
        """
        Classify a zone into a risk tier.

        Args:
            accident_count: Incidents attributed to the zone
            risk_score: Population-normalised risk score

        Returns:
            RiskLevel for the zone
        """
        for level, min_count, min_score in self.RULES:
            if accident_count >= min_count or risk_score >= min_score:
                return level
        return self.FALLBACK
