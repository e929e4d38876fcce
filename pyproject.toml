[build-system]
requires = ["setuptools>=64"]
build-backend = "setuptools.build_meta"

[project]
name = "ecsengine"
version = "0.1.0"
description = "A small entity-component-system engine core with 3D maths and GJK collision detection"
requires-python = ">=3.10"
dependencies = []
keywords = ["ecs", "entity-component-system", "game-engine", "gjk", "collision", "linear-algebra"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Games/Entertainment :: Simulation",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ecsengine = "ecsengine.game:main"

[tool.setuptools.packages.find]
include = ["ecsengine*"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
