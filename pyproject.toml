[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lowbytes"
version = "0.1.0"
description = "Fixed-width integer byte helpers, binary file loading and TLS certificate extraction"
requires-python = ">=3.10"
keywords = ["binary", "endianness", "tls", "x509", "certificates", "der"]
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
    "Topic :: Software Development :: Libraries",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
lowbytes-extract = "lowbytes.extract:main"

[tool.hatch.build.targets.wheel]
packages = ["lowbytes"]

[tool.pytest.ini_options]
addopts = "-ra"
