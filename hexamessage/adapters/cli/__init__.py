"""Adaptateur CLI - re-exporte les commandes publiques."""

from hexamessage.adapters.cli.commands import create, get, hello

__all__ = [
    "create",
    "get",
    "hello",
]
