[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "quasar-api"
version = "0.1.0"
description = "SAR image metadata, CRC-16 checksums and power-switch messages for the QuaSAR processing stack"
requires-python = ">=3.10"
dependencies = []
keywords = ["sar", "radar", "exif", "metadata", "crc16", "checksum"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Image Processing",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["quasar_api"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
