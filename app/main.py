import argparse
import json
import sys
from collections.abc import Sequence
from pathlib import Path

from app.config.settings import Settings
from app.logging.logger import Log
from app.verification.exceptions import UploadRejectedError
from app.verification.models import VerificationStatus
from app.verification.registry import MockAadhaarRegistry
from app.verification.upload_stager import UploadStager
from app.verification.verifier import build_verifier


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="aadhaar-verify",
        description="Check that an Aadhaar number appears in an identity-document PDF.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    document = commands.add_parser("verify-document", help="match a number against a PDF")
    document.add_argument("pdf", type=Path)
    document.add_argument("aadhaar_number")

    number = commands.add_parser("verify-number", help="look a number up in the demo registry")
    number.add_argument("aadhaar_number")
    return parser


def _verify_document(settings: Settings, pdf: Path, aadhaar_number: str) -> int:
    stager = UploadStager(Path(settings.uploads_dir), settings.max_upload_bytes)
    try:
        staged = stager.stage(pdf)
    except (FileNotFoundError, UploadRejectedError) as exc:
        Log.error(f"Upload rejected: {exc}")
        print(json.dumps({"error": str(exc)}))
        return 1

    outcome = build_verifier(settings).verify(staged, aadhaar_number)
    print(json.dumps(outcome.to_dict(), ensure_ascii=False))
    return 0 if outcome.status in (VerificationStatus.VALID, VerificationStatus.MISMATCH) else 1


def _verify_number(aadhaar_number: str) -> int:
    lookup = MockAadhaarRegistry().lookup(aadhaar_number)
    print(json.dumps({"success": lookup.success, "message": lookup.message}))
    return 0 if lookup.success else 1


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: load settings -> configure logging -> run the chosen command."""
    args = _build_parser().parse_args(argv)
    settings = Settings()
    # stdout carries the JSON result
    Log.configure(settings.log_level, stream=sys.stderr)

    if args.command == "verify-document":
        return _verify_document(settings, args.pdf, args.aadhaar_number)
    return _verify_number(args.aadhaar_number)


if __name__ == "__main__":
    sys.exit(main())
