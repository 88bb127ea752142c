"""LingoPop backend: idiomatic expressions, pragmatic variants and tutoring on top of Gemini."""

__version__ = "1.0.0"
