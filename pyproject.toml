[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "embedkit"
version = "0.1.0"
description = "Small embedded-systems helpers: number tricks, CRC-16, NMEA parsing, buffers, containers and a Unix-socket summing service"
requires-python = ">=3.10"
dependencies = []
keywords = ["embedded", "crc16", "modbus", "nmea", "gps", "ring-buffer", "linked-list", "unix-socket"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries :: Python Modules",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
embedkit-sum = "embedkit.sumserver:main"

[tool.hatch.build.targets.wheel]
packages = ["embedkit"]

[tool.pytest.ini_options]
addopts = "-ra"
