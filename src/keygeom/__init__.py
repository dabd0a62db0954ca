"""keygeom - Geometry and symbol model for on-screen keyboards.

keygeom describes the shapes, positions and rotations of virtual keyboard keys,
and the group/level matrix of keysyms a key produces. Rendering and input
dispatch layers consume these values; keygeom itself draws nothing.

Example:
    $ keygeom show layout-shapes.json

This prints the outlines and keysym matrices stored in an interchange document.
"""

__version__ = "0.1.0"
__author__ = "keygeom contributors"

__all__ = ["__author__", "__version__"]
