"""Core functionality for container-operator."""
