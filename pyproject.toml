[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dilithium_verify"
version = "0.1.0"
description = "Pure-Python verification of CRYSTALS-Dilithium signatures"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "dilithium",
    "post-quantum",
    "signature",
    "verification",
    "lattice",
    "shake",
    "keccak",
    "base64",
]
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
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = [
    "pytest",
    "hypothesis",
]

[project.scripts]
dilithium-verify-hello = "dilithium_verify.console:main"

[tool.hatch.build.targets.wheel]
packages = ["dilithium_verify"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
