"""
Grant Catalog - Japanese-localized grant opportunity listing.

Architecture:
- core/: Stable foundation (models, clock, ja-JP formatting)
- catalog: Authored grant table and deadline-window evaluation
- browser: Headless browser session bracketing a run
- report: Text and JSON rendering of evaluated grants
- config/: YAML-driven runtime settings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
