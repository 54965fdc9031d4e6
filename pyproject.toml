[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sapcore"
version = "0.1.0"
description = "Core components of an emulated SAP-1 style 8-bit breadboard computer"
requires-python = ">=3.10"
dependencies = []
keywords = ["emulator", "8-bit", "sap-1", "assembler", "disassembler", "cpu", "education"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Emulators",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["sapcore"]

[tool.pytest.ini_options]
addopts = "-ra"
