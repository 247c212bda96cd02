[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "boutique"
version = "0.1.0"
description = "Small shop model: products, orders, suppliers and staff, with an interactive console session"
requires-python = ">=3.10"
dependencies = []
keywords = ["shop", "orders", "products", "suppliers", "console"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: French",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
boutique = "boutique.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["boutique"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
