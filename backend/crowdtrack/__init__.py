"""crowdtrack: analytics event tagging for the crowdfunding client."""

__version__ = "0.1.0"
