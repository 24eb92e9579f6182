[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "scaffoldkit"
version = "0.1.0"
description = "Starter building blocks for services: MongoDB filter builders, an HTTP client, an Ollama client, console logging, a Flask app skeleton, SQL helpers and a workspace scaffolding command."
requires-python = ">=3.10"
keywords = [
    "scaffolding",
    "templates",
    "workspace",
    "query-builder",
    "mongodb",
    "http-client",
    "ollama",
    "logging",
    "flask",
    "cors",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Code Generators",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "requests>=2.28",
    "flask>=2.3",
]

[project.optional-dependencies]
test = [
    "pytest>=7.4",
    "responses>=0.23",
]

[project.scripts]
scaffoldkit-hello = "scaffoldkit.hello:main"
scaffoldkit-workspace = "scaffoldkit.workspace:main"
scaffoldkit-func = "scaffoldkit.function:main"

[tool.hatch.build.targets.wheel]
packages = ["scaffoldkit"]

[tool.hatch.build.targets.sdist]
include = ["scaffoldkit", "tests"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP", "SIM"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
