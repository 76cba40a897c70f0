[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kenjikit"
version = "0.1.0"
description = "Ballot counting tools and a small 2D toolkit: vectors, colours, shapes, events, transitions, sprites and maze data"
requires-python = ">=3.10"
dependencies = []
keywords = ["vote", "election", "seats", "graphics", "transitions", "sprite", "maze"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
kenjikit-majority = "kenjikit.majority:main"
kenjikit-mixed = "kenjikit.mixed:main"
kenjikit-proportional = "kenjikit.proportional:main"

[tool.hatch.build.targets.wheel]
packages = ["kenjikit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
