"""Surface opportunities (jobs, internships, hackathons, ...) from an inbox."""

from opportunity_scanner.classify import classify, classify_batch, classify_message

__version__ = "0.1.0"

__all__ = ["classify", "classify_batch", "classify_message"]
