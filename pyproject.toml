[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "owbcrypt"
version = "1.0.0"
description = "Pure-Python bcrypt password hashing compatible with the $2a$, $2b$, $2x$ and $2y$ hash formats"
requires-python = ">=3.10"
dependencies = []
keywords = ["bcrypt", "blowfish", "password", "hashing", "crypt", "salt"]
classifiers = [
    "Development Status :: 4 - Beta",
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
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["owbcrypt"]

[tool.pytest.ini_options]
addopts = "-ra"
