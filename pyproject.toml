[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "ohmimetro"
version = "0.1.0"
description = "Voltage-divider ohmmeter logic with E24 matching, resistor colour bands and an SSD1306 framebuffer"
requires-python = ">=3.10"
dependencies = []
keywords = ["ohmmeter", "resistor", "e24", "ssd1306", "oled", "color code"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Electronic Design Automation (EDA)",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
ohmimetro = "ohmimetro.ohmmeter:main"

[tool.hatch.build.targets.wheel]
packages = ["ohmimetro"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
