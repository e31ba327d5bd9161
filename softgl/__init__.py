"""Building blocks for a software rasterizer: math, buffers, geometry, images, GLSL text and shading."""

__version__ = "0.1.0"