"""
Brand Guide Pipeline.

Extracts structured brand intelligence from a business homepage with Claude,
then turns it into a Markdown brand guide and a flat brand profile.
"""

__version__ = "1.0.0"
__author__ = "Brand Guide Pipeline Team"

# Lazy imports to avoid circular dependencies
def get_pipeline():
    """Get the BrandGuidePipeline class (lazy import)."""
    from brand_guide.pipeline.orchestrator import BrandGuidePipeline
    return BrandGuidePipeline

__all__ = ["get_pipeline", "__version__"]
