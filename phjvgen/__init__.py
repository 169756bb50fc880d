"""phjvgen -- scaffolding generator for layered multi-module Java projects."""

__version__ = "1.0.0"
