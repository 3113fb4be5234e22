[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kglab"
version = "0.1.0"
description = "A small interactive 3D viewer with an orbiting camera that draws quadratic Bezier curves"
requires-python = ">=3.10"
dependencies = [
    "pyglet",
]
keywords = ["opengl", "camera", "bezier", "computer-graphics", "pyglet"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: X11 Applications",
    "Environment :: Win32 (MS Windows)",
    "Environment :: MacOS X",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
    "Topic :: Education",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
kglab = "kglab.app:main"

[tool.hatch.build.targets.wheel]
packages = ["kglab"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
