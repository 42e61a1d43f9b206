[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "oledgfx"
version = "1.0.0"
description = "Framebuffer graphics, GFX-font text and command sequences for SSD1306 monochrome OLED displays"
requires-python = ">=3.10"
dependencies = []
keywords = ["ssd1306", "oled", "i2c", "framebuffer", "graphics", "display", "gfx-font"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Hardware :: Hardware Drivers",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["oledgfx"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"
