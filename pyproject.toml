[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "simplednn"
version = "0.1.8"
description = "Small modular neural networks built from stackable layers, with weight saving and loading."
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "neural network",
    "deep learning",
    "machine learning",
    "convolution",
    "backpropagation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
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
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
simplednn-demo = "simplednn.demo:main"

[tool.hatch.build.targets.wheel]
packages = ["simplednn"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
