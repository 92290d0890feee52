import argparse
import asyncio
import sys
from pathlib import Path

from notary.config.settings import Settings
from notary.errors import NotaryError, describe_error
from notary.fingerprint.engine import fingerprint_file
from notary.logging.logger import Log
from notary.services import NotaryServices, build_services
from notary.snapshot.listing import list_records


def shorten_address(address: str) -> str:
    if not address:
        return ""
    return f"{address[:6]}...{address[-4:]}"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="notary", description="Anchor and verify file fingerprints on a ledger."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    fp = commands.add_parser("fingerprint", help="print the digest of a file")
    fp.add_argument("file", type=Path)

    submit = commands.add_parser("submit", help="record a file for an item id")
    submit.add_argument("item_id")
    submit.add_argument("file", type=Path)

    verify = commands.add_parser("verify", help="check a file or digest against the ledger")
    verify.add_argument("submitter")
    verify.add_argument("item_id")
    source = verify.add_mutually_exclusive_group(required=True)
    source.add_argument("file", type=Path, nargs="?")
    source.add_argument("--hash", dest="digest", help="check a digest instead of a file")

    records = commands.add_parser("records", help="list recent submissions")
    records.add_argument("--item", help="only item ids containing this text")
    return parser


async def _run(args: argparse.Namespace, services: NotaryServices) -> int:
    settings = services.settings
    if args.command == "fingerprint":
        print(await fingerprint_file(args.file, settings.fingerprint_chunk_size_bytes))
        return 0

    if args.command == "submit":
        await services.session.restore()
        await services.session.connect()
        receipt = await services.coordinator.submit_file(args.item_id, args.file)
        print(f"Submitted {receipt.item_id} as {receipt.digest}")
        print(f"Transaction: {receipt.write_ref}")
        return 0

    if args.command == "verify":
        verifier = services.verifier
        if args.digest is not None:
            verdict = await verifier.verify(args.submitter, args.item_id, args.digest)
        else:
            verdict = await verifier.verify_file(args.submitter, args.item_id, args.file)
        if verdict.matched and verdict.record is not None:
            print(
                f"VERIFIED: {args.item_id} by {shorten_address(verdict.record.submitter)} "
                f"at {verdict.record.recorded_at.isoformat()}"
            )
            return 0
        print(f"NOT VERIFIED: {args.item_id} by {shorten_address(args.submitter)}")
        return 2

    listing = await list_records(
        services.cache, settings.demo_fallback_enabled, item_filter=args.item
    )
    print(f"Source: {listing.source.value} ({len(listing.records)} records)")
    for record in listing.records:
        print(
            f"{record.recorded_at.isoformat()}  {shorten_address(record.submitter)}  "
            f"{record.item_id}  {record.digest}"
        )
    return 0


async def _main(args: argparse.Namespace, settings: Settings) -> int:
    services = build_services(settings)
    try:
        return await _run(args, services)
    finally:
        await services.aclose()


def main(argv: list[str] | None = None) -> int:
    """Entry point: load settings -> configure logging -> run one command."""
    args = _build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level, settings.app_env)
    try:
        return asyncio.run(_main(args, settings))
    except NotaryError as exc:
        Log.error(f"{type(exc).__name__}: {exc}")
        print(describe_error(exc), file=sys.stderr)
        return 1
    except FileNotFoundError as exc:
        print(str(exc), file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
