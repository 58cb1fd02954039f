[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "openmenu"
version = "0.1.0"
description = "Game list, metadata and DAT container tools for a disc-image game menu"
requires-python = ">=3.10"
dependencies = []
keywords = ["dreamcast", "gdemu", "menu", "dat", "ini", "artwork", "metadata"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
openmenu-datread = "openmenu.datfile:main"
openmenu-datpack = "openmenu.packer:main"
openmenu-metapack = "openmenu.metapacker:main"
openmenu-menufaker = "openmenu.menufaker:main"
openmenu-datstrip = "openmenu.stripper:main"
openmenu-renamecsv = "openmenu.renamecsv:main"
openmenu-tsv2ini = "openmenu.tsv2ini:main"

[tool.hatch.build.targets.wheel]
packages = ["openmenu"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
