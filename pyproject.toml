[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hazel"
version = "0.1.0"
description = "A small layered game engine: events, layers, an orthographic camera and an OpenGL renderer"
requires-python = ">=3.10"
keywords = ["game engine", "opengl", "renderer", "layers", "events", "camera"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Multimedia :: Graphics :: 3D Rendering",
]
dependencies = [
    "numpy",
    "pyglet",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
hazel-sandbox = "hazel.sandbox:main"

[tool.hatch.build.targets.wheel]
packages = ["hazel"]

[tool.pytest.ini_options]
addopts = "-ra"
