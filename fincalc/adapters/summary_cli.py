"""CLI adapter printing a client or household summary as JSON.

With one client id the summary of that client is printed; with two ids the
combined household summary is printed instead.
"""

import argparse
import json
from collections.abc import Sequence

from fincalc.application.use_cases.report_payload import build_report_payload
from fincalc.domain.errors import MissingClientError
from fincalc.infrastructure.container import (
    build_client_summary_use_case,
    build_household_summary_use_case,
)
from fincalc.infrastructure.logging.logger import get_app_logger


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fincalc-summary",
        description="Print the financial summary of stored clients.",
    )
    parser.add_argument(
        "client_ids",
        nargs="+",
        metavar="CLIENT_ID",
        help="One client id, or two ids for a combined household.",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Compute and print the requested summary.

    Args:
        argv: Command-line arguments, defaults to ``sys.argv``.

    Returns:
        int: Process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)
    if len(args.client_ids) > 2:
        parser.error("at most two client ids can be combined")

    logger = get_app_logger()
    try:
        if len(args.client_ids) == 2:
            summary = build_household_summary_use_case().execute(
                *args.client_ids
            )
        else:
            summary = build_client_summary_use_case().execute(
                args.client_ids[0]
            )
    except MissingClientError as exc:
        logger.error(str(exc))
        print(f"No client selected: {exc.client_id} was not found.")
        return 1

    payload = build_report_payload(summary)
    print(json.dumps(payload.summary, indent=2))
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
