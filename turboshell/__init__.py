"""TurboShell (tsh): a minimal interactive command interpreter."""

__version__ = "1.0.0"
