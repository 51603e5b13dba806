[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dvmark"
version = "2.4.2a0"
description = "Voice-bank mark handling for DeepVocal: dictionary checking, project files and voice.dvcfg editing"
requires-python = ">=3.10"
dependencies = []
keywords = ["deepvocal", "voicebank", "singing synthesis", "cvvc", "dvcfg"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Sound/Audio :: Speech",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dvmark"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
