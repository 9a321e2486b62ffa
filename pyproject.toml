[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "widgetdemos"
version = "0.1.0"
description = "Small component-style UI demos that render to HTML strings: nested lists, pub/sub, to-do lists, timers, stores, routes and pagination"
requires-python = ">=3.10"
dependencies = []
keywords = ["components", "ui", "demo", "todomvc", "pubsub", "routing", "pagination", "html"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: User Interfaces",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["widgetdemos"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
