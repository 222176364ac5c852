"""WistiaDL - Extract, browse and export downloadable assets of Wistia videos."""

__version__ = "1.0.0"
__author__ = "Sawyer"
__email__ = "sawyer@example.com"

from pathlib import Path

# Package directories
PACKAGE_ROOT = Path(__file__).parent

__all__ = [
    "__version__",
    "__author__",
    "__email__",
    "PACKAGE_ROOT",
]
