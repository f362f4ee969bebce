[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "treequeries"
version = "0.1.0"
description = "Queries on trees: ancestors, lowest common ancestors, distances, diameters, path counts and subtree statistics."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "tree",
    "graph",
    "lowest common ancestor",
    "binary lifting",
    "diameter",
    "algorithms",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
treequeries = "treequeries.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["treequeries"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
