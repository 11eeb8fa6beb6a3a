[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "graphemu"
version = "0.1.0"
description = "An interactive Cartesian graph window: click to plot points on a ruled grid."
requires-python = ">=3.10"
keywords = ["graph", "plot", "cartesian", "grid", "pygame", "visualization"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Intended Audience :: Education",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Visualization",
]
dependencies = [
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
graphemu = "graphemu.state:main"

[tool.hatch.build.targets.wheel]
packages = ["graphemu"]

[tool.pytest.ini_options]
addopts = "-ra"
