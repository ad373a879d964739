"""
NoteKeep Backend - Multi-user Note Keeping Service

A small backend where users register, log in with signed tokens and keep
a shared pool of text notes with search and pagination.

Version: 1.0.0
"""

__version__ = "1.0.0"
