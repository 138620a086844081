[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "padcalc"
version = "0.1.0"
description = "A keypad-driven arithmetic calculator with a simulated 16x2 character display, plus small bit-manipulation helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["calculator", "infix", "postfix", "keypad", "lcd", "bits"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
padcalc = "padcalc.session:main"
padcalc-bits = "padcalc.bits:main"

[tool.hatch.build.targets.wheel]
packages = ["padcalc"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
