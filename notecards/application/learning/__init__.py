"""
Learning bounded context - Application layer.

Contains use cases for flashcards:
- Generate: notes -> provider -> normalized drafts
- Save, List, Delete saved flashcards
"""
