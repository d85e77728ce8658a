"""Top-level package for the post card fitting engine.

Provides subpackages:
- postfit.textfit – font-size decay, truncation and fit status
- postfit.color – WCAG contrast math
- postfit.design – five-item design checklist
- postfit.positioning – anchors, grid snap and placement parameters
- postfit.gestures – drag/resize sessions and the Qt pointer bridge
- postfit.storage – editor-state persistence port
"""

from importlib.metadata import PackageNotFoundError, version as _pkg_version

try:
    __version__ = _pkg_version("postfit")
except PackageNotFoundError:
    # Running from a source checkout without an install
    __version__ = "0.0.0"

__all__: list[str] = ["__version__"]
