"""
Command-line interface for the Schnorr proof of knowledge.

Walks through one proof session and prints the public values only.
"""

import logging
import sys

import click

from schnorr_pok import __version__
from schnorr_pok.challenge import FiatShamirChallenge
from schnorr_pok.config import DEFAULT_GROUP
from schnorr_pok.exceptions import SchnorrError
from schnorr_pok.feature_flags import get_challenge_mode, get_hash_function
from schnorr_pok.group import NAMED_GROUPS, get_group
from schnorr_pok.keys import KeyPairGenerator
from schnorr_pok.logger import configure_logging
from schnorr_pok.protocol import prove, run_interactive
from schnorr_pok.security import RandomnessSource
from schnorr_pok.verifier import Verifier


@click.group()
@click.version_option(version=__version__)
def main():
    """
    Schnorr zero-knowledge proof of knowledge of a discrete logarithm.

    ⚠️  PROTOTYPE - NOT PRODUCTION READY
    """
    pass


@main.command()
@click.option(
    '--mode',
    type=click.Choice(['interactive', 'fiat-shamir']),
    default=None,
    help='Challenge mode (default: SCHNORR_POK_CHALLENGE_MODE or fiat-shamir)'
)
@click.option(
    '--group',
    'group_name',
    type=click.Choice(sorted(NAMED_GROUPS)),
    default=DEFAULT_GROUP,
    show_default=True,
    help='Named group parameters'
)
@click.option(
    '--hash',
    'hash_name',
    type=str,
    default=None,
    help='Fiat-Shamir hash function, fiat-shamir mode only (default: SCHNORR_POK_HASH or SHA3-256)'
)
@click.option(
    '--challenge-bits',
    type=int,
    default=None,
    help='Challenge bit width (default: reduce modulo q)'
)
@click.option(
    '--verbose',
    is_flag=True,
    help='Enable debug logging'
)
def demo(mode, group_name, hash_name, challenge_bits, verbose):
    """
    Run one proof session and print the transcript.

    Examples:

        # Non-interactive proof over the 2048-bit RFC 3526 group
        schnorr-pok demo

        # Interactive proof over the toy group p=23, q=11, g=4
        schnorr-pok demo --mode interactive --group toy
    """
    if verbose:
        configure_logging(logging.DEBUG)

    try:
        resolved_mode = get_challenge_mode(prefer=mode)
        if resolved_mode == "interactive" and hash_name is not None:
            raise click.UsageError("--hash applies to fiat-shamir mode only")
        params = get_group(group_name)
        rng = RandomnessSource()
        key_pair = KeyPairGenerator(rng).generate(params)

        if resolved_mode == "interactive":
            transcript, accepted = run_interactive(
                params, key_pair, randomness_source=rng, challenge_bits=challenge_bits
            )
        else:
            challenger = FiatShamirChallenge(
                hash_name=get_hash_function(prefer=hash_name),
                challenge_bits=challenge_bits,
            )
            transcript = prove(params, key_pair, challenger, randomness_source=rng)
            accepted = Verifier(challenger).verify_transcript(transcript)
    except (SchnorrError, ValueError) as e:
        click.echo(click.style(f"✗ Error: {e}", fg="red"), err=True)
        sys.exit(2)

    click.echo(click.style(f"Schnorr proof ({resolved_mode})", fg="cyan", bold=True))
    for name, value in transcript.to_dict().items():
        if value is not None:
            click.echo(f"{name}: {value}")

    if accepted:
        click.echo(click.style("ok: true", fg="green"))
    else:
        click.echo(click.style("ok: false", fg="red"))
        sys.exit(1)


@main.command()
def version():
    """Show version information."""
    click.echo(f"schnorr-pok v{__version__}")
    click.echo("Prototype - Not Production Ready")


if __name__ == "__main__":
    main()
