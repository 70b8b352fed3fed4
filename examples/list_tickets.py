"""
Print the newest tickets of a UserVoice subdomain as its first owner.

Requires a trusted API client:

    export USERVOICE_SUBDOMAIN=mysite
    export USERVOICE_API_KEY=...
    export USERVOICE_API_SECRET=...
    python examples/list_tickets.py --limit 20
"""

from __future__ import annotations

import argparse
import logging

from uservoice import APIError, UserVoiceClient


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
    parser.add_argument("--limit", type=int, default=20, help="Maximum number of tickets to print")
    parser.add_argument("--verbose", action="store_true", help="Log requests and page fetches")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    with UserVoiceClient.from_settings() as client:
        try:
            owner = client.login_as_owner()
            tickets = owner.get_collection("/api/v1/tickets?sort=newest", limit=args.limit)
            print(f"{len(tickets)} of {tickets.total_records} tickets")
            for ticket in tickets:
                print(f"  #{ticket['ticket_number']}: {ticket['subject']}")
        except APIError as e:
            raise SystemExit(f"UserVoice API error: {e}")


if __name__ == "__main__":
    main()
