[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gopl"
version = "0.1.0"
description = "Small teaching programs: text tools, number formatting, image generation, value display, deep equality and bzip2 compression"
requires-python = ">=3.10"
keywords = ["education", "examples", "lissajous", "mandelbrot", "palindrome", "bzip2", "deep-equality"]
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
    "Topic :: Education",
]
dependencies = [
    "pillow",
    "jinja2",
    "markupsafe",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gopl-dup1 = "gopl.dup:dup1"
gopl-dup2 = "gopl.dup:dup2"
gopl-dup3 = "gopl.dup:dup3"
gopl-echo = "gopl.echo:main"
gopl-hello = "gopl.hello:main"
gopl-popcount = "gopl.popcount:main"
gopl-basename = "gopl.basename:main"
gopl-comma = "gopl.numfmt:main"
gopl-netflag = "gopl.netflag:main"
gopl-slices = "gopl.slices:main"
gopl-charcount = "gopl.charcount:main"
gopl-dedup = "gopl.dedup:main"
gopl-graph = "gopl.graph:main"
gopl-embed = "gopl.embed:main"
gopl-movie = "gopl.movie:main"
gopl-sha256 = "gopl.digest:main"
gopl-autoescape = "gopl.autoescape:main"
gopl-lissajous = "gopl.lissajous:main"
gopl-mandelbrot = "gopl.mandelbrot:main"
gopl-jpeg = "gopl.jpeg:main"
gopl-server = "gopl.servers:main"
gopl-bzipper = "gopl.bzip:main"

[tool.hatch.build.targets.wheel]
packages = ["gopl"]

[tool.hatch.build.targets.sdist]
include = ["gopl", "tests", "README.md", "pyproject.toml"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
