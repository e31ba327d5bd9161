[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "softgl"
version = "0.1.0"
description = "Building blocks for a software rasterizer: math helpers, pixel buffers, geometry culling, image I/O, GLSL source preparation and CPU shading functions"
requires-python = ">=3.10"
dependencies = [
    "numpy",
    "pillow",
]
keywords = ["rendering", "rasterizer", "pbr", "fxaa", "frustum", "glsl", "graphics", "morton"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["softgl"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
