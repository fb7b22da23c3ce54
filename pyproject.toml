[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "patternkit"
version = "0.1.0"
description = "Small, runnable examples of classic creational and structural design patterns"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "design-patterns",
    "abstract-factory",
    "builder",
    "factory-method",
    "prototype",
    "singleton",
    "adapter",
    "bridge",
    "education",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
patternkit-abstract-factory = "patternkit.abstract_factory:main"
patternkit-builder = "patternkit.builder:main"
patternkit-factory-method = "patternkit.factory_method:main"
patternkit-prototype = "patternkit.prototype:main"
patternkit-singleton = "patternkit.singleton:main"
patternkit-adapter = "patternkit.adapter:main"
patternkit-bridge = "patternkit.bridge:main"

[tool.hatch.build.targets.wheel]
packages = ["patternkit"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
