[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "nestoolkit"
version = "0.1.0"
description = "NES helpers: 6502 opcode tables, the NTSC palette, nametable and pattern-table rendering, and a nametable viewer."
requires-python = ">=3.10"
dependencies = []
keywords = ["nes", "6502", "ppu", "nametable", "opcodes", "palette"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Environment :: Console",
    "Topic :: System :: Emulators",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
nes-nametable = "nestoolkit.nametable_viewer:main"

[tool.hatch.build.targets.wheel]
packages = ["nestoolkit"]

[tool.pytest.ini_options]
addopts = "-ra"
