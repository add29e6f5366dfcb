"""Entry point for the Sample Decoder CLI.

This module exposes a Typer-powered command-line interface that opens an
audio file, decodes every sample into a typed frame-by-channel array and
reports the layout it found.
"""

from sample_decoder.cli.app import app


if __name__ == "__main__":
    app()
