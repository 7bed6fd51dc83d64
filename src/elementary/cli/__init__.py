from elementary.cli.main import cli

__all__ = ["cli"]
