[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "circletasks"
version = "0.1.0"
description = "Reference renderer for transparent circle scenes, with PPM output, cell noise, prefix-scan helpers and threading demonstrations"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "renderer",
    "circles",
    "ppm",
    "cell noise",
    "prefix scan",
    "threading",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
    "Topic :: Multimedia :: Graphics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
circletasks-tutorial = "circletasks.tutorial:main"

[tool.hatch.build.targets.wheel]
packages = ["circletasks"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
