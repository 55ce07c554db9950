"""
External API clients used around the generator.
"""

from .firecrawl import AcquisitionError, ScrapeResult, scrape_site

__all__ = ["AcquisitionError", "ScrapeResult", "scrape_site"]
