"""Temp Folder Remover - periodically empties a configured temporary folder."""

__version__ = "0.1.0"
