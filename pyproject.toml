[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "cairozero"
version = "0.1.0"
description = "Stark field-element helpers, Cairo-style Keccak hashing and Cairo Zero program loading"
requires-python = ">=3.10"
dependencies = [
    "pycryptodome",
]
keywords = ["cairo", "starknet", "felt", "keccak", "bytecode"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Interpreters",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["cairozero"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
