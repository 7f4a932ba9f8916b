"""Batch translation of Docusaurus Markdown docs into Chinese via chat-completion APIs."""

__version__ = "0.1.0"
