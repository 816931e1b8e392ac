"""mysh: a small interactive command shell with numbered history."""

__version__ = "0.1.0"
