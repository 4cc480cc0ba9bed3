[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "spamnet"
version = "0.1.0"
description = "A small pure-Python neural network toolkit with a bag-of-words text loader for spam classification"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "neural-network",
    "tensor",
    "backpropagation",
    "spam",
    "bag-of-words",
    "text-classification",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Education",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
spamnet = "spamnet.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["spamnet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
