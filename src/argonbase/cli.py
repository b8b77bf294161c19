from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer

from .alphabets import PRESETS, preset
from .config import EncoderConfig, HashParams
from .encoder import Encoder
from .errors import EncodeError
from .fileio import read_file, write_file
from .hashing import HashRequest, hash_digest

app = typer.Typer(help="Hash files with Argon2id and write the tag in an alphabet of your choice.")

EXIT_CODES = {"parse": 3, "allocate": 4, "hash": 5, "io": 6}

DEFAULT_SECRET_FILE = Path("secret.txt")
DEFAULT_DATA_FILE = Path("data.txt")

log = logging.getLogger("argonbase")


def _fail(err: EncodeError) -> typer.Exit:
    typer.echo(f"Error ({err.stage}): {err.message}", err=True)
    return typer.Exit(code=EXIT_CODES.get(err.stage, 1))


def _alphabet_source(alphabet: Path, preset_name: Optional[str]) -> bytes:
    if preset_name:
        try:
            return preset(preset_name)
        except ValueError as e:
            raise typer.BadParameter(str(e), param_hint="--preset") from e
    return read_file(alphabet)


def _optional_input(path: Optional[Path], default: Path) -> bytes:
    """Read an explicitly given file, else the default file if it exists, else b""."""
    if path is not None:
        return read_file(path)
    if default.is_file():
        return read_file(default)
    log.debug("%s not found, using an empty value", default)
    return b""


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log progress to stderr"),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command("hash")
def hash_files(
    message: Path = typer.Option(Path("message.txt"), help="Message file"),
    nonce: Path = typer.Option(Path("nonce.txt"), help="Nonce (salt) file, at least 8 bytes"),
    secret: Optional[Path] = typer.Option(None, help="Secret value file (default: secret.txt if present)"),
    data: Optional[Path] = typer.Option(None, help="Associated data file (default: data.txt if present)"),
    alphabet: Path = typer.Option(Path("base94.txt"), help="Encoding character set file, one symbol per line"),
    preset_name: Optional[str] = typer.Option(None, "--preset", help="Use a built-in alphabet instead of a file"),
    output: Path = typer.Option(Path("output.txt"), help="Output file"),
    tag_length: Optional[int] = typer.Option(None, help="Tag length in bytes (default 32)"),
    iterations: Optional[int] = typer.Option(None, help="Number of iterations (default 3)"),
    parallelism: Optional[int] = typer.Option(None, help="Degree of parallelism (default 1)"),
    memory: Optional[int] = typer.Option(None, help="Memory size in KiB (default 4096 per lane)"),
    header: bool = typer.Option(False, "--header/--no-header", envvar="ARGONBASE_HEADER", help="Prefix output with the symbol count"),
    empty_on_zero: bool = typer.Option(
        False,
        "--empty-on-zero/--zero-digit",
        envvar="ARGONBASE_EMPTY_ON_ZERO",
        help="Render an all-zero tag as empty output instead of one zero symbol",
    ),
) -> None:
    try:
        env_params = HashParams.from_env()
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e
    params = env_params.with_overrides(
        tag_length=tag_length,
        iterations=iterations,
        parallelism=parallelism,
        memory_kib=memory,
    )
    try:
        # parse the alphabet before reading secrets or hashing
        config = EncoderConfig(header=header, empty_on_zero=empty_on_zero)
        encoder = Encoder.from_source(_alphabet_source(alphabet, preset_name), config)
        typer.echo(f"Found {encoder.base} characters")
        request = HashRequest(
            message=read_file(message),
            nonce=read_file(nonce),
            secret=_optional_input(secret, DEFAULT_SECRET_FILE),
            associated_data=_optional_input(data, DEFAULT_DATA_FILE),
            params=params,
        )
        log.info(
            "message=%d bytes nonce=%d bytes secret=%d bytes associated_data=%d bytes",
            len(request.message),
            len(request.nonce),
            len(request.secret),
            len(request.associated_data),
        )
        typer.echo(f"Secret key length read as {len(request.secret)} bytes")
        typer.echo(f"Associated data length read as {len(request.associated_data)} bytes")
        typer.echo("Hashing...")
        tag = hash_digest(request)
        write_file(output, encoder.encode(tag))
    except EncodeError as e:
        raise _fail(e) from e
    typer.echo(f"Wrote {output}")


@app.command()
def encode(
    digest_hex: Optional[str] = typer.Argument(None, help="Digest as hex"),
    digest_file: Optional[Path] = typer.Option(None, "--digest-file", help="Read the raw digest bytes from a file"),
    alphabet: Path = typer.Option(Path("base94.txt"), help="Encoding character set file, one symbol per line"),
    preset_name: Optional[str] = typer.Option(None, "--preset", help="Use a built-in alphabet instead of a file"),
    output: Optional[Path] = typer.Option(None, help="Output file (default: stdout)"),
    header: bool = typer.Option(False, "--header/--no-header", envvar="ARGONBASE_HEADER", help="Prefix output with the symbol count"),
    empty_on_zero: bool = typer.Option(
        False,
        "--empty-on-zero/--zero-digit",
        envvar="ARGONBASE_EMPTY_ON_ZERO",
        help="Render an all-zero digest as empty output instead of one zero symbol",
    ),
) -> None:
    """Encode an existing digest without hashing."""
    if (digest_hex is None) == (digest_file is None):
        raise typer.BadParameter("give exactly one of DIGEST_HEX or --digest-file")
    try:
        if digest_hex is not None:
            try:
                digest = bytes.fromhex(digest_hex)
            except ValueError as e:
                raise typer.BadParameter(f"not a hex string: {digest_hex!r}", param_hint="DIGEST_HEX") from e
        else:
            digest = read_file(digest_file)
        if not digest:
            raise typer.BadParameter("digest must not be empty")
        config = EncoderConfig(header=header, empty_on_zero=empty_on_zero)
        encoder = Encoder.from_source(_alphabet_source(alphabet, preset_name), config)
        out = encoder.encode(digest)
        if output is None:
            typer.echo(out)
        else:
            write_file(output, out)
    except EncodeError as e:
        raise _fail(e) from e


@app.command("alphabets")
def list_alphabets() -> None:
    """List the built-in alphabet presets."""
    for name in sorted(PRESETS):
        enc = Encoder.from_source(PRESETS[name])
        typer.echo(f"{name}\t{enc.base}")
