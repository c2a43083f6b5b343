from governor.version import __version__  # noqa: F401
