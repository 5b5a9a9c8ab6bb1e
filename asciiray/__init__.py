"""ASCII-art ray tracing of spheres, planes and triangles, with vector and matrix tools."""

__version__ = "0.1.0"