"""Ports used by learning use cases."""
