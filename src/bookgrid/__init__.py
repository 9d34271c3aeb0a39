"""Top-level package for bookgrid.

Provides subpackages:
- bookgrid.layout – text to page-grid layout engine
- bookgrid.common – shared heuristics and thresholds
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        for line in pyproject.read_text().splitlines():
            if line.strip().startswith("version"):
                # Parse: version = "0.1.0"
                return line.split("=")[1].strip().strip('"').strip("'")

    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("bookgrid")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()

from .layout import (  # noqa: E402
    LayoutConfig,
    LayoutResult,
    InvalidInputError,
    build_layout,
    layout_book,
)

__all__: list[str] = [
    "__version__",
    "LayoutConfig",
    "LayoutResult",
    "InvalidInputError",
    "build_layout",
    "layout_book",
]
