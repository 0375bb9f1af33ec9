"""opsml_cli

Command-line client for an opsml model registry server.
Run as module: python -m opsml_cli
"""

__version__ = "0.1.0"
