"""printf-style formatting of %c %s %p %d %i %u %x %X %% with flags, width and precision."""

__version__ = "0.1.0"
__all__ = ["__version__"]