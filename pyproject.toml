[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "polygen"
version = "0.1.0"
description = "Polynomial algebra over several fields at once, with exact Gauss-Jordan reduction of coefficient matrices"
requires-python = ">=3.10"
keywords = [
    "polynomial",
    "monomial order",
    "prime field",
    "rational",
    "symbolic",
    "gauss-jordan",
    "elimination template",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["polygen"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
