"""
Command-line interface for jwtlic.
"""

from __future__ import annotations

import json
import logging
import os
from datetime import datetime

import click

from jwtlic.client.token_verifier import TokenVerifier
from jwtlic.common import setup_logger
from jwtlic.common.config import Config
from jwtlic.common.exceptions import LicenseTokenError
from jwtlic.common.logging_utils import logging_observer
from jwtlic.common.models import Algorithm
from jwtlic.server.keygen import KeyGenerator
from jwtlic.server.token_signer import TokenSigner

ALGORITHMS = [alg.value for alg in Algorithm]

logger = logging.getLogger("jwtlic")


def _load_key(
    config: Config, algorithm: str, secret: str | None, *, private: bool
) -> str:
    if algorithm == Algorithm.HS256.value:
        if not secret:
            msg = "HS256 needs a shared secret (--secret or JWTLIC_SECRET)"
            raise click.ClickException(msg)
        return secret
    try:
        return config.get_private_key() if private else config.get_public_key()
    except ValueError as err:
        raise click.ClickException(str(err)) from err


def _default_algorithm() -> str:
    return Config().DEFAULT_ALGORITHM


def _isoformat(moment: datetime | None) -> str | None:
    return moment.isoformat() if moment is not None else None


@click.group()
@click.option(
    "--keys-dir",
    default=None,
    help="Directory holding license keys (default: from JWTLIC_KEYS_DIR env or ./jwtlic/keys)",
)
def cli(keys_dir: str | None) -> None:
    """jwtlic signed license tokens CLI"""
    if keys_dir:
        os.environ["JWTLIC_KEYS_DIR"] = keys_dir
    setup_logger(logger, Config().LOG_LEVEL)


@cli.command()
def keygen() -> None:
    """Generate RSA license signing keys"""
    keygen = KeyGenerator()
    keygen.generate_keys()
    click.echo("Keys generated and saved")


@cli.command()
@click.option("--payload", default="{}", help="Claims as a JSON object")
@click.option("--expires-in", default=None, help="Relative expiry, e.g. '1 month'")
@click.option(
    "--expires-at",
    default=None,
    type=click.DateTime(),
    help="Absolute expiry (local time)",
)
@click.option(
    "--algorithm", type=click.Choice(ALGORITHMS), default=_default_algorithm
)
@click.option("--secret", envvar="JWTLIC_SECRET", default=None, help="HS256 secret")
def sign(
    payload: str,
    expires_in: str | None,
    expires_at: datetime | None,
    algorithm: str,
    secret: str | None,
) -> None:
    """Sign a license token"""
    if expires_in and expires_at:
        msg = "Use either --expires-in or --expires-at, not both"
        raise click.ClickException(msg)
    try:
        claims = json.loads(payload)
    except json.JSONDecodeError as err:
        msg = f"Invalid --payload JSON: {err}"
        raise click.ClickException(msg) from err

    config = Config()
    key = _load_key(config, algorithm, secret, private=True)
    try:
        token = TokenSigner().sign(
            claims, key, expires_at or expires_in, algorithm
        )
    except LicenseTokenError as err:
        raise click.ClickException(str(err)) from err
    click.echo(token)


@cli.command("inspect")
@click.argument("token")
@click.option(
    "--algorithm", type=click.Choice(ALGORITHMS), default=_default_algorithm
)
@click.option("--secret", envvar="JWTLIC_SECRET", default=None, help="HS256 secret")
def inspect_token(token: str, algorithm: str, secret: str | None) -> None:
    """Verify a token signature and print its claims"""
    config = Config()
    key = _load_key(config, algorithm, secret, private=False)
    try:
        parsed = TokenVerifier(default_algorithm=algorithm).parse(token, key)
    except LicenseTokenError as err:
        raise click.ClickException(str(err)) from err

    report = {
        "claims": parsed.claims,
        "issued_at": _isoformat(parsed.issued_at),
        "expires_at": _isoformat(parsed.expires_at),
        "is_valid": parsed.is_valid,
    }
    click.echo(json.dumps(report, indent=2, default=str))


@cli.command()
@click.argument("token")
@click.option(
    "--algorithm", type=click.Choice(ALGORITHMS), default=_default_algorithm
)
@click.option("--secret", envvar="JWTLIC_SECRET", default=None, help="HS256 secret")
def verify(token: str, algorithm: str, secret: str | None) -> None:
    """Exit non-zero unless the token is correctly signed and unexpired"""
    config = Config()
    key = _load_key(config, algorithm, secret, private=False)
    verifier = TokenVerifier(
        on_error=logging_observer(logger), default_algorithm=algorithm
    )
    if not verifier.is_valid(token, key):
        msg = "Token is not valid"
        raise click.ClickException(msg)
    click.echo("Token is valid")


if __name__ == "__main__":
    cli()
