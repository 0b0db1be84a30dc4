[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "warungkasir"
version = "0.1.0"
description = "Interactive terminal cashier for a small food stall: browse the menu, fill a cart and check out"
requires-python = ">=3.10"
dependencies = []
keywords = ["cashier", "point-of-sale", "terminal", "cart", "menu"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Natural Language :: Indonesian",
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
warungkasir = "warungkasir.menu:main"

[tool.hatch.build.targets.wheel]
packages = ["warungkasir"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
