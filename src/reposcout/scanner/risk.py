"""Risk classifier — maps a numeric risk score to a verdict."""

from __future__ import annotations

from reposcout.scanner.models import RiskAssessment, RiskTier

HIGH_RISK_THRESHOLD = 70
MODERATE_RISK_THRESHOLD = 40

_HIGH = RiskAssessment(
    label="HIGH RISK",
    tier=RiskTier.CRITICAL,
    verdict_title="Proceed with Extreme Caution",
    verdict_body=(
        "This repository has significant security or privacy concerns. "
        "Consider alternatives or thorough code review."
    ),
)

_MODERATE = RiskAssessment(
    label="MODERATE",
    tier=RiskTier.WARNING,
    verdict_title="Review Before Installing",
    verdict_body=(
        "Some concerns identified. Review the findings and assess if they "
        "impact your use case."
    ),
)

_LOW = RiskAssessment(
    label="LOW RISK",
    tier=RiskTier.SAFE,
    verdict_title="Relatively Safe to Use",
    verdict_body="No major issues detected. Standard precautions still recommended.",
)


def classify(score: int) -> RiskAssessment:
    """Return the risk assessment for ``score``.

    70 and above is high risk, 40 to 69 moderate, anything lower low risk.
    """
    if score >= HIGH_RISK_THRESHOLD:
        return _HIGH
    if score >= MODERATE_RISK_THRESHOLD:
        return _MODERATE
    return _LOW
