import click

# Import individual commands from modules
from hourglasspass.cli.password import (
    decode,
    encode,
    format_password,
    correct,
    normalize,
    randomize,
    verify,
)
from hourglasspass.lib.logging_utils import set_level


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging.")
def cli(debug):
    """A CLI tool for decoding and building Hourglass of Summer passwords."""
    if debug:
        set_level("DEBUG")


cli.add_command(decode)
cli.add_command(encode)
cli.add_command(format_password)
cli.add_command(correct)
cli.add_command(normalize)
cli.add_command(randomize)
cli.add_command(verify)


if __name__ == "__main__":
    cli()
