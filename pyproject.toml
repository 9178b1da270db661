[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "lanepid"
version = "0.1.0"
description = "PID lateral controller that steers a vehicle along a lane or parking path"
requires-python = ">=3.10"
dependencies = []
keywords = ["pid", "controller", "steering", "lane following", "autonomous vehicle"]
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
    "Topic :: Scientific/Engineering",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["lanepid"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
