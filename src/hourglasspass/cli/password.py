import click
import random
import sys

from rich.console import Console
from rich.table import Table

from hourglasspass.errors import CorrectionError, HourglassPassError
from hourglasspass.formatting import PasswordStyles
from hourglasspass.models import PasswordBreakdown
from hourglasspass.password import Password
from hourglasspass.segments import PasswordFlagData, PasswordSceneId
from hourglasspass.lib.logging_utils import get_logger, log

logger = get_logger("cli")

STYLE_CHOICES = {
    "password": PasswordStyles.PASSWORD,
    "value": PasswordStyles.VALUE,
    "hex": PasswordStyles.HEX_VALUE,
    "password-or-value": PasswordStyles.PASSWORD_OR_VALUE,
    "any": PasswordStyles.ANY,
}

style_option = click.option(
    "--style",
    type=click.Choice(list(STYLE_CHOICES)),
    default="password-or-value",
    show_default=True,
    help="How TEXT may be interpreted.",
)


def _parse(text, style="password-or-value"):
    try:
        return Password.parse(text, STYLE_CHOICES[style])
    except HourglassPassError as e:
        raise click.ClickException(str(e))


def _render_breakdown(breakdown: PasswordBreakdown) -> Table:
    table = Table(title=f"Password {breakdown.password}")
    table.add_column("#", justify="right")
    table.add_column("Letter")
    table.add_column("Value", justify="right")
    table.add_column("Segment")
    table.add_column("Garbage")

    for info in breakdown.letters:
        if not info.allows_garbage:
            garbage = "-"
        else:
            garbage = "yes" if info.is_garbage else "no"
        table.add_row(
            str(info.index), info.char, str(info.value), info.segment, garbage
        )
    return table


@click.command("decode")
@click.argument("text")
@style_option
@click.option("--json", "as_json", is_flag=True, help="Print the breakdown as JSON.")
def decode(text, style, as_json):
    """Decodes a password or value into its fields."""
    password = _parse(text, style)
    breakdown = PasswordBreakdown.from_password(password)

    if as_json:
        click.echo(breakdown.model_dump_json(indent=2))
        return

    console = Console()
    console.print(_render_breakdown(breakdown))
    console.print(f"Value:     {breakdown.value} (0x{breakdown.value:08X})")
    console.print(f"Scene ID:  {breakdown.scene_id} (0x{breakdown.scene_id:03X})")
    console.print(f"Flags:     0x{breakdown.flags:04X}")
    status = "[green]valid[/green]" if breakdown.checksum_valid else "[red]invalid[/red]"
    console.print(
        f"Checksum:  {breakdown.checksum} (expected {breakdown.expected_checksum}) {status}"
    )


def _respell_first_garbage(password):
    """Write the first garbage letter canonically, clearing checksum bit 0."""
    for i, letter in enumerate(password):
        if letter.is_garbage:
            password[i] = letter.normalized()
            return


@click.command("encode")
@click.option(
    "--scene",
    type=click.IntRange(0, PasswordSceneId.MAX_VALUE),
    required=True,
    help="Scene ID to encode.",
)
@click.option(
    "--flags",
    type=click.IntRange(0, PasswordFlagData.MAX_VALUE),
    default=0,
    show_default=True,
    help="Flag bits to encode.",
)
@click.option("--random", "randomize", is_flag=True, help="Randomize letter spellings.")
@click.option("--seed", type=int, default=None, help="Seed for --random.")
def encode(scene, flags, randomize, seed):
    """Builds a corrected password for a scene and flags."""
    password = Password()
    password.scene.value = scene
    password.flags.value = flags
    if randomize:
        password.randomize(random.Random(seed))
    try:
        password.correct()
    except CorrectionError:
        # Only random spellings get here: all four checksum bits are garbage
        _respell_first_garbage(password)
        password.correct()
    log(logger, "debug", "Encoded password", scene=scene, flags=flags)
    click.echo(password.string)


@click.command("format")
@click.argument("text")
@click.argument("fmt")
@style_option
def format_password(text, fmt, style):
    """Renders a password with a format string (PS, PC, PN, PR, PB, PD, PX, VB, V...)."""
    password = _parse(text, style)
    try:
        click.echo(password.to_string(fmt))
    except HourglassPassError as e:
        raise click.ClickException(str(e))


@click.command("correct")
@click.argument("text")
@style_option
def correct(text, style):
    """Fixes the checksum of a password so the game accepts it."""
    password = _parse(text, style)
    try:
        changed = password.correct()
    except HourglassPassError as e:
        raise click.ClickException(str(e))
    if changed:
        click.echo("Respelled a letter to avoid the terminal checksum.", err=True)
    click.echo(password.string)


@click.command("normalize")
@click.argument("text")
@click.option(
    "--garbage-char",
    default="Z",
    show_default=True,
    help="Letter written for blank letters.",
)
def normalize(text, garbage_char):
    """Rewrites a password in canonical spellings."""
    password = _parse(text)
    try:
        password.normalize(garbage_char)
    except HourglassPassError as e:
        raise click.ClickException(str(e))
    click.echo(password.string)


@click.command("randomize")
@click.argument("text")
@click.option("--seed", type=int, default=None, help="Seed for reproducible output.")
def randomize(text, seed):
    """Rewrites a password in random accepted spellings."""
    password = _parse(text)
    password.randomize(random.Random(seed))
    click.echo(password.string)


@click.command("verify")
@click.argument("text")
def verify(text):
    """Checks a password's checksum. Exits with status 1 when it is wrong."""
    password = _parse(text, "password")
    if password.checksum_valid:
        click.echo(f"✓ {password.string} is valid")
        return
    click.echo(
        f"✗ {password.string} has checksum {password.checksum.value}, "
        f"expected {password.expected_checksum}",
        err=True,
    )
    sys.exit(1)
