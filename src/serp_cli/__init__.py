"""serp-cli — command-line client for the SERP facial-recognition platform.

Built on the SERP REST API with a strict layered architecture.
"""

from serp_cli.version import __version__

__all__: list[str] = ["__version__"]
