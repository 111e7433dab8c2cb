"""Command-line entry point for PrimePass."""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional
from pydantic import ValidationError
from shared.config.config import config
from shared.domain.consts import HashAlgorithm
from shared.domain.errors import PrimePassError, ConfigurationError
from shared.domain.models import GenerationConfig, HashRequest
from engine.services.password_generator import generate_from_config
from engine.services.strength_analyzer import analyze_strength
from engine.services.hash_engine import hash_password_async, is_insecure

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s - %(message)s"
)
logger = logging.getLogger(__name__)


def load_passwords_from_file(filename: str) -> List[str]:
    """
    Load passwords from a file, one per line.

    Trailing newlines are stripped; other whitespace is part of the password.
    Empty lines are skipped.
    """
    passwords = []
    with open(filename, "r", encoding="utf-8") as f:
        for line in f:
            password = line.rstrip("\r\n")
            if password:
                passwords.append(password)
    return passwords


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="primepass", description="Generate, analyze and hash passwords.")
    sub = parser.add_subparsers(dest="command", required=True)

    gen = sub.add_parser("generate", help="Generate random passwords")
    gen.add_argument("-l", "--length", type=int, default=config.DEFAULT_PASSWORD_LENGTH)
    gen.add_argument("-n", "--count", type=int, default=1)
    gen.add_argument("--no-uppercase", dest="include_uppercase", action="store_false")
    gen.add_argument("--no-lowercase", dest="include_lowercase", action="store_false")
    gen.add_argument("--no-digits", dest="include_digits", action="store_false")
    gen.add_argument("--no-symbols", dest="include_symbols", action="store_false")
    gen.add_argument("--exclude-similar", action="store_true")
    gen.add_argument("--exclude-ambiguous", action="store_true")

    analyze = sub.add_parser("analyze", help="Score password strength")
    analyze.add_argument("password", nargs="?")
    analyze.add_argument("-f", "--file", help="Read passwords from file, one per line")

    hashp = sub.add_parser("hash", help="Hash passwords")
    hashp.add_argument("password", nargs="?")
    hashp.add_argument("-f", "--file", help="Read passwords from file, one per line")
    hashp.add_argument(
        "-a", "--algorithm",
        choices=[a.value for a in HashAlgorithm],
        default=config.DEFAULT_HASH_ALGORITHM,
    )
    hashp.add_argument("-c", "--cost", type=int, default=config.DEFAULT_BCRYPT_COST)

    return parser


def _collect_passwords(args: argparse.Namespace) -> List[str]:
    if args.file:
        return load_passwords_from_file(args.file)
    if args.password is not None:
        return [args.password]
    raise PrimePassError("Provide a password or --file")


def run_generate(args: argparse.Namespace) -> None:
    if args.count < 1:
        raise ConfigurationError(f"--count must be at least 1, got {args.count}")
    options = GenerationConfig(
        length=args.length,
        include_uppercase=args.include_uppercase,
        include_lowercase=args.include_lowercase,
        include_digits=args.include_digits,
        include_symbols=args.include_symbols,
        exclude_similar=args.exclude_similar,
        exclude_ambiguous=args.exclude_ambiguous,
    )
    for _ in range(args.count):
        password, _pool = generate_from_config(options)
        print(password)


def run_analyze(args: argparse.Namespace) -> None:
    for password in _collect_passwords(args):
        report = analyze_strength(password)
        print(f"{report.score:3d} {report.label.value}")
        for message in report.feedback:
            print(f"    - {message}")


async def run_hash(args: argparse.Namespace) -> None:
    """Hash every password concurrently, printing digests in input order."""
    passwords = _collect_passwords(args)
    algorithm = HashAlgorithm(args.algorithm)
    sem = asyncio.Semaphore(config.MAX_CONCURRENT_HASHES)

    if is_insecure(algorithm):
        print(f"warning: {algorithm.value} is insecure and offered for legacy comparison only", file=sys.stderr)

    async def hash_one(password: str) -> str:
        async with sem:
            result = await hash_password_async(
                HashRequest(password=password, algorithm=algorithm, cost=args.cost)
            )
            return result.digest

    logger.info(f"Hashing {len(passwords)} password(s) with {algorithm.value}")
    digests = await asyncio.gather(*(hash_one(p) for p in passwords))
    for digest in digests:
        print(digest)


async def main(argv: Optional[List[str]] = None) -> int:
    """Main execution function. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        if args.command == "generate":
            run_generate(args)
        elif args.command == "analyze":
            run_analyze(args)
        elif args.command == "hash":
            await run_hash(args)
    except (PrimePassError, ValidationError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    except FileNotFoundError:
        print(f"error: input file not found: {args.file}", file=sys.stderr)
        return 1

    return 0


def cli() -> None:
    """Console script entry point."""
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
