"""Operator entry point for out-of-band file administration.

Prints the signed delete URL for a stored file, or removes the file directly.
"""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass

from filedrop.config import ConfigError, load_config
from filedrop.media.file_links import build_delete_url
from filedrop.media.file_storage import FileStorage
from filedrop.media.media_errors import InvalidFilenameError, StoredFileNotFoundError
from filedrop.security.capability import DeleteTokenSigner


@dataclass(slots=True)
class DeleteLinkSummary:
    filename: str
    delete_url: str
    removed: bool
    dry_run: bool


def perform(filename: str, *, remove: bool, dry_run: bool) -> DeleteLinkSummary:
    """Resolve ``filename`` and either sign its delete URL or remove it."""
    config = load_config()
    storage = FileStorage(config.upload_dir)
    signer = DeleteTokenSigner(config.upload_password)

    stored = storage.stat(filename)
    delete_url = build_delete_url(config.public_url, signer.sign(stored.name), stored.name)

    if remove and not dry_run:
        storage.remove(stored.name)
        return DeleteLinkSummary(stored.name, delete_url, removed=True, dry_run=False)
    return DeleteLinkSummary(stored.name, delete_url, removed=False, dry_run=dry_run)


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print or act on a stored file's delete link.")
    parser.add_argument("filename", help="Stored filename, e.g. AbC123xy.png")
    parser.add_argument("--remove", action="store_true", help="Delete the file instead of printing its link.")
    parser.add_argument("--dry-run", action="store_true", help="With --remove, only report what would be deleted.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    try:
        summary = perform(args.filename, remove=args.remove, dry_run=args.dry_run)
    except ConfigError as exc:
        print(f"configuration error: {exc}", file=sys.stderr)
        return 2
    except (StoredFileNotFoundError, InvalidFilenameError):
        print(f"file not found: {args.filename}", file=sys.stderr)
        return 1

    if summary.removed:
        print(f"removed {summary.filename}", file=sys.stdout)
    elif args.remove and summary.dry_run:
        print(f"dry-run, would remove {summary.filename}", file=sys.stdout)
    else:
        print(summary.delete_url, file=sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())
