"""Single source of truth for the serp-cli version string."""

__version__: str = "1.2.0"
