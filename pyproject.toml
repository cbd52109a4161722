[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spotexchange"
version = "0.1.0"
description = "Spot market catalogue and order domain for a small exchange, with request interceptors and in-memory repositories."
requires-python = ">=3.10"
dependencies = []
keywords = ["exchange", "spot", "markets", "orders", "trading", "interceptors"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Financial and Insurance Industry",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Investment",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["spotexchange"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
