"""
Application layer.

Use cases and the ports (protocols) they depend on. Concrete adapters live
in the infrastructure layer.
"""
