[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "subway-kiosk"
version = "0.1.0"
description = "A terminal subway ticket vending kiosk with fare quotes and coin payment with change."
requires-python = ">=3.10"
dependencies = []
keywords = ["subway", "metro", "ticket", "kiosk", "fare", "vending"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Chinese (Simplified)",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Office/Business :: Financial :: Point-Of-Sale",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
subway-kiosk = "subway_kiosk.kiosk:main"

[tool.hatch.build.targets.wheel]
packages = ["subway_kiosk"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
