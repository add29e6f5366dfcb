"""CLI application definition for Sample Decoder."""

import typer

from sample_decoder.cli.commands import read, init_profile, validate_profile

app = typer.Typer(
    add_completion=False,
    help="Audio sample decoder - turn WAV, AU and raw payloads into typed arrays.",
    no_args_is_help=True,
)

# Register commands
app.command(name="read", help="Decode an audio file")(read)
app.command(name="init-profile", help="Generate an example stream profile")(init_profile)
app.command(name="validate-profile", help="Validate a stream profile")(validate_profile)
