[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "shadigest"
version = "1.0.0"
description = "SHA-256 digests of bytes, binary streams and files, with a command-line file hasher"
requires-python = ">=3.10"
dependencies = []
keywords = ["sha256", "sha-256", "hash", "digest", "checksum"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: Developers",
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
test = ["pytest", "hypothesis"]

[project.scripts]
shadigest = "shadigest.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["shadigest"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
