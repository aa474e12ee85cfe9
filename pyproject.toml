[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gittogether"
version = "0.1.0"
description = "Render per-period GitHub contributor statistics as an SVG card"
requires-python = ">=3.10"
keywords = ["github", "contributors", "svg", "statistics", "graphql"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control :: Git",
]
dependencies = [
    "httpx",
    "pillow",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
    "respx",
]

[project.scripts]
gittogether = "gittogether.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gittogether"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
