[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gitradar"
version = "0.1.2"
description = "A compact git status summary for shell and tmux prompts"
requires-python = ">=3.11"
keywords = ["git", "prompt", "shell", "tmux", "status"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Version Control :: Git",
    "Topic :: System :: Shells",
]
dependencies = [
    "tomli-w",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
gitradar = "gitradar.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["gitradar"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
