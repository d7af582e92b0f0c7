"""Validate and send one standalone credit from a JSON intent.

With --dry-run nothing is sent; the canonical request body is printed.
"""

import argparse
import json
import sys
from pathlib import Path

from debitflow.common.api_client import ApiClient
from debitflow.common.config import settings
from debitflow.common.errors import DirectDebitError
from debitflow.common.logging import configure_logging
from debitflow.common.tracing import setup_tracing
from debitflow.services.standalone_credits.service import DirectDebitService


class DryRunClient:
    """Stands in for the API client and returns the body it would have sent."""

    def __init__(self, account: str) -> None:
        self.account = account

    def get_account(self) -> str:
        return self.account

    def process_request(self, request):
        print(f"{request.method} {request.path}", file=sys.stderr)
        return json.loads(request.body.to_json())

    def close(self) -> None:
        pass


def main() -> None:
    """Parse CLI args and submit one intent."""

    parser = argparse.ArgumentParser(description="Send a Direct Debit standalone credit.")
    parser.add_argument("--json", dest="json_inline", default=None, help="Inline JSON intent")
    parser.add_argument("--file", dest="json_file", default=None, help="Path to JSON intent file")
    parser.add_argument("--account", default=settings.account_number)
    parser.add_argument("--dry-run", action="store_true")
    parser.add_argument("--trace", action="store_true", help="Export spans to the OTLP endpoint")
    args = parser.parse_args()

    if bool(args.json_inline) == bool(args.json_file):
        raise SystemExit("Provide exactly one of --json or --file")

    if args.json_inline:
        intent = json.loads(args.json_inline)
    else:
        intent = json.loads(Path(args.json_file).read_text())

    configure_logging()
    if args.trace:
        setup_tracing(settings.service_name)
    client = DryRunClient(args.account) if args.dry_run else ApiClient(account_number=args.account)
    try:
        result = DirectDebitService(client).standalone_credits(intent)
    except DirectDebitError as exc:
        print(json.dumps(exc.to_dict()), file=sys.stderr)
        raise SystemExit(1)
    finally:
        client.close()
    print(json.dumps(result))


if __name__ == "__main__":
    main()
