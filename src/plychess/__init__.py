"""Board state, move application and legal-move generation for a minimal chess program."""

__version__ = "0.1.0"
