[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "weldshop"
version = "0.1.0"
description = "Minimum-cost welding of rectangular plates, with a threaded order-processing simulation"
requires-python = ">=3.10"
dependencies = []
keywords = ["dynamic programming", "welding", "producer-consumer", "threads", "optimization"]
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
weldshop-solve = "weldshop.solver:main"
weldshop-simulate = "weldshop.tester:main"

[tool.hatch.build.targets.wheel]
packages = ["weldshop"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
