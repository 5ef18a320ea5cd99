#!/usr/bin/env python3
"""Quick live check of the Gmail list + fetch + classify flow.

Run:
  GMAIL_ACCESS_TOKEN=... poetry run python scripts/scan_gmail_live.py      # 5 messages
  GMAIL_ACCESS_TOKEN=... poetry run python scripts/scan_gmail_live.py 20   # 20 messages
"""

import os
import sys

from opportunity_scanner.classify import classify_batch
from opportunity_scanner.connectors.gmail import GmailConnector


def main() -> None:
    limit = int(sys.argv[1]) if len(sys.argv) > 1 else 5
    token = os.environ.get("GMAIL_ACCESS_TOKEN")
    if not token:
        raise SystemExit("Set GMAIL_ACCESS_TOKEN first.")

    connector = GmailConnector(access_token=token)
    print(f"Fetching up to {limit} recent messages...")
    messages = connector.fetch_recent(max_results=limit, fetch_limit=limit)
    print(f"Got {len(messages)} raw messages")

    batch = classify_batch(messages)
    for i, r in enumerate(batch.records, 1):
        print(f"  {i}. [{r.category}/{r.priority}] {r.subject} ({r.company})")
    if batch.skipped:
        print(f"\n⚠️ Skipped {batch.failure_count} messages. Check logs.")
    elif batch.records:
        print("\n✅ List + fetch + classify flow succeeded.")
    else:
        print("\n⚠️ No messages returned.")


if __name__ == "__main__":
    main()
