[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "bytecrypt"
version = "0.1.0"
description = "Byte-shift encryption and decryption of files in place, one file or a whole directory tree at a time"
requires-python = ">=3.10"
dependencies = []
keywords = ["encryption", "decryption", "cipher", "files", "directory", "batch"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
bytecrypt = "bytecrypt.cli:main"
bytecrypt-cryption = "bytecrypt.cryption:main"

[tool.hatch.build.targets.wheel]
packages = ["bytecrypt"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
