[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sonyhpclient"
version = "1.3.13"
description = "Protocol building blocks for Sony Bluetooth headphones: message framing, command payloads, device state holders and TOML settings."
requires-python = ">=3.11"
keywords = ["sony", "headphones", "bluetooth", "rfcomm", "noise-cancelling", "equalizer", "protocol"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "tomli-w",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["sonyhpclient"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
