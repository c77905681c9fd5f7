[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "coordpicker"
version = "0.1.5"
description = "A tool for determining screen coordinates for 2D application development"
requires-python = ">=3.10"
dependencies = []
keywords = ["coordinates", "canvas", "grid", "markers", "2d", "layout", "tkinter"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: X11 Applications",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
coordpicker = "coordpicker.gui:main"

[tool.hatch.build.targets.wheel]
packages = ["coordpicker"]

[tool.pytest.ini_options]
addopts = "-ra"
