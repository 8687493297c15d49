"""Student records kept in a plain text file, with a console menu."""

__version__ = "0.1.0"