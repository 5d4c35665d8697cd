"""CLI commands for container-operator."""
