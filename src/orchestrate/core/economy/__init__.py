"""Economy functionality: production sums and the validity/viability verdicts."""

from orchestrate.core.economy.operations import (
    Deficit,
    desired_actions,
    desired_mask,
    impossible_deficits,
    is_valid,
    is_viable,
    max_production,
    negative_resources,
    production_ceiling,
    production_vector,
    resource_production,
    score_positive,
    target_actions,
)

__all__ = [
    "Deficit",
    "resource_production",
    "production_vector",
    "is_valid",
    "negative_resources",
    "is_viable",
    "impossible_deficits",
    "target_actions",
    "production_ceiling",
    "desired_actions",
    "desired_mask",
    "max_production",
    "score_positive",
]
