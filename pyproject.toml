[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ut325f"
version = "0.9.0"
description = "Read temperatures from the Uni-T UT325F four-channel thermocouple meter over a serial port"
requires-python = ">=3.10"
dependencies = [
    "pyserial",
]
keywords = ["usb", "serial", "thermocouple", "thermometer", "measurement", "ut325f"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Instrument Drivers",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
ut325f = "ut325f.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["ut325f"]

[tool.pytest.ini_options]
addopts = "-ra"
