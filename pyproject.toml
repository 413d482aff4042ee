[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "xmltagtree"
version = "0.1.0"
description = "Check XML tag nesting and build, edit and write small XML trees"
requires-python = ">=3.10"
dependencies = []
keywords = ["xml", "validation", "tree", "tags", "well-formed"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Text Processing :: Markup :: XML",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
xmltagtree = "xmltagtree.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["xmltagtree"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
