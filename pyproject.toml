[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "richtextbuf"
version = "0.1.0"
description = "Rich text buffers: attribute spans, paragraph splitting, cursors, metrics and subpixel cache keys"
requires-python = ">=3.10"
keywords = ["text", "rich text", "attributes", "cursor", "buffer", "bidi", "paragraphs"]
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
    "Topic :: Text Processing :: General",
    "Typing :: Typed",
]
dependencies = []

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["richtextbuf"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
strict = true
