[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "crabtool"
version = "0.1.0"
description = "Image browsing building blocks: image directory filtering, thumbnails, zoom state and rectangle selection"
requires-python = ">=3.10"
dependencies = [
    "pillow",
]
keywords = ["image", "viewer", "thumbnails", "annotation", "selection", "zoom"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Viewers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
crabtool = "crabtool.app:main"

[tool.hatch.build.targets.wheel]
packages = ["crabtool"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
