"""
Domain layer.

Core flashcard rules with no dependencies on web frameworks, databases
or AI provider SDKs.
"""
