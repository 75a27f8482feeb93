"""Top-level package for the grid toolkit.

Provides subpackages:
- grid_toolkit.core – item/layout models, geometry values, interchange
- grid_toolkit.engine – collision, compaction, displacement, render mapping
- grid_toolkit.simulation – pointer-to-layout drag and resize ticks
- grid_toolkit.interaction – session state machine, dispatcher, grid instances
- grid_toolkit.qt – PySide6 signal and timer adapters
- grid_toolkit.debug – layout snapshots and occupancy diagnostics
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    # In dev mode, read directly from pyproject.toml
    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"

    if pyproject.exists():
        try:
            content = pyproject.read_text()
            for line in content.splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.3.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    # Fallback to importlib.metadata for installed package
    from importlib.metadata import PackageNotFoundError, version as pkg_version
    try:
        return pkg_version("grid-toolkit")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
