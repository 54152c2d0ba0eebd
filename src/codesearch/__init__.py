"""codesearch - structural symbol reference search for TypeScript."""

__version__ = "0.1.0"
