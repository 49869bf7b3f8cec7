"""
Pipeline module for the combined guide and profile flow.
"""

from brand_guide.pipeline.orchestrator import (
    STRATEGY_CHOICES,
    BrandGuidePipeline,
    generate_brand_report,
)

__all__ = [
    "BrandGuidePipeline",
    "STRATEGY_CHOICES",
    "generate_brand_report",
]
