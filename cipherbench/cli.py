"""
CipherBench CLI
================

Click-based command-line interface for the CipherBench toolkit.  Provides
subcommands for encryption, decryption, the three-cipher performance
comparison, a single-cipher round-trip test, random test data and
substitution alphabet inspection.

Usage::

    python -m cipherbench encrypt "HELLO WORLD" --key KEY --cipher vigenere
    python -m cipherbench decrypt "RIJVS GSPVH" --key KEY
    python -m cipherbench compare "ATTACK AT DAWN" --key LEMON -n 5000
    python -m cipherbench compare --random
    python -m cipherbench individual --file message.txt --key SECRET -C caesar
    python -m cipherbench random --seed 42
    python -m cipherbench alphabet KEYWORD

References:
    - Click Documentation. https://click.palletsprojects.com/
"""

from __future__ import annotations

import asyncio
import json
import random
from pathlib import Path
from typing import Optional

import click

from shared.config import BenchConfig
from shared.console import BenchConsole
from shared.models import RunResult

from cipherbench import __version__
from cipherbench.algorithms.alphabet import is_valid_caesar_key
from cipherbench.core.engine import CipherBenchEngine
from cipherbench.core.models import CipherId, ComparisonResult, IndividualTestResult
from cipherbench.output.console import BenchConsoleOutput
from cipherbench.output.report import BenchReportGenerator

_CIPHER_CHOICE = click.Choice([c.value for c in CipherId])


# ===================================================================== #
#  Helpers
# ===================================================================== #

def _run_engine(coro) -> RunResult:
    """Run an engine coroutine, turning input errors into usage errors."""
    try:
        return asyncio.run(coro)
    except ValueError as exc:
        raise click.UsageError(str(exc)) from exc


def _resolve_cipher(ctx: click.Context, cipher: Optional[str]) -> CipherId:
    """Return *cipher*, or the configured ``default_cipher`` when omitted."""
    if cipher is not None:
        return CipherId(cipher)
    configured = ctx.obj["config"].benchmark.default_cipher
    try:
        return CipherId(configured)
    except ValueError as exc:
        raise click.BadParameter(
            f"default_cipher {configured!r} in the configuration is not one of "
            f"{', '.join(c.value for c in CipherId)}.",
            param_hint="'--cipher' / '-C'",
        ) from exc


def _read_text(text: Optional[str], file: Optional[str]) -> str:
    if text is not None and file is not None:
        raise click.UsageError("Pass either TEXT or --file, not both.")
    if file is not None:
        return Path(file).read_text(encoding="utf-8").strip()
    if text is None:
        raise click.UsageError("Missing TEXT argument (or --file PATH).")
    return text.strip()


_file_option = click.option(
    "--file", "file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Read the message from a UTF-8 text file instead of TEXT.",
)

_key_option = click.option(
    "--key", "-k",
    required=True,
    help="Cipher key (letters only). Caesar uses its first letter: A=1 ... Z=26.",
)


# ===================================================================== #
#  CLI Group
# ===================================================================== #

@click.group()
@click.option(
    "--config", "-c",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to a CipherBench configuration file (TOML).",
)
@click.option(
    "--output", "-o",
    type=click.Choice(["console", "json", "html"]),
    default="console",
    help="Output format.",
)
@click.option(
    "--output-file", "-f",
    type=click.Path(dir_okay=False),
    default=None,
    help="Output file path (for JSON/HTML output).",
)
@click.option(
    "--quiet", "-q",
    is_flag=True,
    default=False,
    help="Suppress banner and informational output.",
)
@click.version_option(__version__, prog_name="cipherbench")
@click.pass_context
def cli(
    ctx: click.Context,
    config: Optional[str],
    output: str,
    output_file: Optional[str],
    quiet: bool,
) -> None:
    """CipherBench -- Classical Cipher Comparison Toolkit.

    Encrypt and decrypt with the Vigenère, Caesar and keyword substitution
    ciphers, and compare how fast each one runs.
    """
    ctx.ensure_object(dict)

    bench_config = BenchConfig.load(config)
    ctx.obj["config"] = bench_config
    ctx.obj["output_format"] = output
    ctx.obj["output_file"] = output_file
    ctx.obj["quiet"] = quiet

    console = BenchConsole(quiet=quiet)
    ctx.obj["console"] = console
    engine = CipherBenchEngine(bench_config)
    ctx.obj["engine"] = engine
    ctx.call_on_close(engine.logger.close)
    ctx.obj["display"] = BenchConsoleOutput(console)
    ctx.obj["reporter"] = BenchReportGenerator()

    if not quiet and output == "console":
        console.banner(version=__version__)


def _handle_output(ctx: click.Context, result: RunResult) -> None:
    """Write *result* as JSON or HTML according to the global options."""
    output_format = ctx.obj["output_format"]
    output_file = ctx.obj["output_file"]
    reporter: BenchReportGenerator = ctx.obj["reporter"]
    console: BenchConsole = ctx.obj["console"]

    if output_format == "json":
        if output_file:
            path = reporter.generate_json(result, Path(output_file))
            console.success(f"JSON report saved to: {path}")
        else:
            click.echo(json.dumps(
                reporter.build_json(result),
                indent=2,
                ensure_ascii=False,
                default=str,
            ))
    elif output_format == "html":
        if output_file:
            path = Path(output_file)
        else:
            out_dir = Path(ctx.obj["config"].global_settings.output_dir)
            path = out_dir / f"cipherbench_{result.tool_name}.html"
        path = reporter.generate_html(result, path)
        console.success(f"HTML report saved to: {path}")


# ===================================================================== #
#  Subcommands
# ===================================================================== #

def _transform_command(
    ctx: click.Context,
    text: Optional[str],
    file: Optional[str],
    key: str,
    cipher: Optional[str],
    *,
    encrypting: bool,
) -> None:
    engine: CipherBenchEngine = ctx.obj["engine"]
    display: BenchConsoleOutput = ctx.obj["display"]
    cipher_id = _resolve_cipher(ctx, cipher)
    message = _read_text(text, file)
    key = key.strip()

    if encrypting:
        result = _run_engine(engine.encrypt(message, key, cipher_id))
    else:
        result = _run_engine(engine.decrypt(message, key, cipher_id))

    if ctx.obj["output_format"] == "console":
        if cipher_id is CipherId.CAESAR and not is_valid_caesar_key(key):
            display.display_key_help(cipher_id)
        display.display_transform(result.metadata)
        ctx.obj["console"].findings_table(result.findings)
    else:
        _handle_output(ctx, result)


@cli.command()
@click.argument("text", required=False)
@_file_option
@_key_option
@click.option(
    "--cipher", "-C",
    type=_CIPHER_CHOICE,
    default=None,
    help="Cipher to use (default from configuration: vigenere).",
)
@click.pass_context
def encrypt(
    ctx: click.Context,
    text: Optional[str],
    file: Optional[str],
    key: str,
    cipher: Optional[str],
) -> None:
    """Encrypt TEXT with the selected cipher.

    Text is uppercased first; anything outside A-Z passes through.
    """
    _transform_command(ctx, text, file, key, cipher, encrypting=True)


@cli.command()
@click.argument("text", required=False)
@_file_option
@_key_option
@click.option(
    "--cipher", "-C",
    type=_CIPHER_CHOICE,
    default=None,
    help="Cipher to use (default from configuration: vigenere).",
)
@click.pass_context
def decrypt(
    ctx: click.Context,
    text: Optional[str],
    file: Optional[str],
    key: str,
    cipher: Optional[str],
) -> None:
    """Decrypt TEXT with the selected cipher."""
    _transform_command(ctx, text, file, key, cipher, encrypting=False)


@cli.command()
@click.argument("text", required=False)
@_file_option
@click.option(
    "--key", "-k",
    default=None,
    help="Key shared by all three ciphers (letters only).",
)
@click.option(
    "--iterations", "-n",
    type=int,
    default=None,
    help="Timing loop repetitions per operation (default 1000).",
)
@click.option(
    "--random", "use_random",
    is_flag=True,
    default=False,
    help="Benchmark with a randomly generated message and key.",
)
@click.pass_context
def compare(
    ctx: click.Context,
    text: Optional[str],
    file: Optional[str],
    key: Optional[str],
    iterations: Optional[int],
    use_random: bool,
) -> None:
    """Compare encryption/decryption speed of all three ciphers.

    Each cipher is timed over the same input, one after another, in the
    order Vigenère, Caesar, Substitution.
    """
    engine: CipherBenchEngine = ctx.obj["engine"]
    display: BenchConsoleOutput = ctx.obj["display"]
    console: BenchConsole = ctx.obj["console"]

    if use_random:
        if text is not None or file is not None:
            raise click.UsageError("--random cannot be combined with TEXT or --file.")
        message, random_key = engine.random_test()
        key = key or random_key
        console.info(f"Random message: {message}")
        console.info(f"Random key: {key}")
    else:
        message = _read_text(text, file)
        if key is None:
            raise click.UsageError("Missing option '--key' / '-k'.")

    with console.status("Running performance test..."):
        result = _run_engine(engine.compare(message, key.strip(), iterations))

    if ctx.obj["output_format"] == "console":
        display.display_comparison(ComparisonResult.model_validate(result.metadata))
        console.findings_table(result.findings)
        console.success(result.summary)
    else:
        _handle_output(ctx, result)


@cli.command()
@click.argument("text", required=False)
@_file_option
@_key_option
@click.option(
    "--cipher", "-C",
    type=_CIPHER_CHOICE,
    default=None,
    help="Cipher to test (default from configuration: vigenere).",
)
@click.pass_context
def individual(
    ctx: click.Context,
    text: Optional[str],
    file: Optional[str],
    key: str,
    cipher: Optional[str],
) -> None:
    """Encrypt then decrypt TEXT once with a single cipher and time it."""
    engine: CipherBenchEngine = ctx.obj["engine"]
    display: BenchConsoleOutput = ctx.obj["display"]
    cipher_id = _resolve_cipher(ctx, cipher)
    message = _read_text(text, file)

    result = _run_engine(engine.individual_test(message, key.strip(), cipher_id))

    if ctx.obj["output_format"] == "console":
        display.display_individual(IndividualTestResult.model_validate(result.metadata))
        ctx.obj["console"].findings_table(result.findings)
    else:
        _handle_output(ctx, result)


@cli.command("random")
@click.option(
    "--length", "-l",
    type=click.IntRange(min=0),
    default=None,
    help="Only print random test data of this length.",
)
@click.option(
    "--seed",
    type=int,
    default=None,
    help="Seed for reproducible output.",
)
@click.pass_context
def random_data(
    ctx: click.Context,
    length: Optional[int],
    seed: Optional[int],
) -> None:
    """Generate random test input (A-Z and spaces)."""
    engine: CipherBenchEngine = ctx.obj["engine"]
    rng = random.Random(seed) if seed is not None else None

    if length is not None:
        click.echo(engine.sample_data(length, rng))
        return

    message, key = engine.random_test(rng)
    if ctx.obj["output_format"] == "json":
        click.echo(json.dumps({"message": message, "key": key}))
    else:
        click.echo(f"message: {message}")
        click.echo(f"key: {key}")


@cli.command()
@click.argument("keyword")
@click.pass_context
def alphabet(ctx: click.Context, keyword: str) -> None:
    """Show the substitution alphabet derived from KEYWORD."""
    engine: CipherBenchEngine = ctx.obj["engine"]
    permutation = engine.substitution_alphabet(keyword)

    if ctx.obj["output_format"] == "console":
        ctx.obj["display"].display_alphabet(keyword, permutation)
    else:
        click.echo(permutation)


# ===================================================================== #
#  Entry Point
# ===================================================================== #

def main() -> None:
    """Main entry point for the CipherBench CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
