"""testing-with-fakes: swapping a slow collaborator for a hand-written fake."""

__version__ = "0.1.0"
