"""Command line interface for container-operator."""
