[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "circuitos"
version = "0.1.0"
description = "Byte buffers, fonts, LED matrix drawing and I2C drivers for the AW9523 expander and IS31FL3731 matrix controller"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "embedded",
    "led-matrix",
    "i2c",
    "ring-buffer",
    "aw9523",
    "is31fl3731",
    "font",
    "bitmap",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Software Development :: Embedded Systems",
    "Typing :: Typed",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["circuitos"]

[tool.pytest.ini_options]
addopts = "-ra"
