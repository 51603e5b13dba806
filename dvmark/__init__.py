"""Dictionary checking, project files and voice.dvcfg mark handling for DeepVocal voice banks."""

__version__ = "2.4.2a0"