"""Main CLI entry point."""

import argparse
import json
import logging
import sys
from datetime import date
from pathlib import Path
from typing import Any, Optional

from opportunity_scanner.models.opportunity import CATEGORIES, PRIORITIES


def main(argv: Optional[list[str]] = None) -> None:
    """Parse args and dispatch to subcommands."""
    parser = argparse.ArgumentParser(
        prog="opportunity-scanner",
        description="Find internships, jobs, hackathons and more in your inbox",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # scan
    scan_parser = subparsers.add_parser("scan", help="Fetch recent messages and classify them")
    scan_parser.add_argument(
        "--source",
        default="gmail",
        choices=["gmail", "file"],
        help="Where to read messages from",
    )
    scan_parser.add_argument(
        "--input",
        type=Path,
        default=None,
        help="JSON file of Gmail message payloads (for --source file)",
    )
    scan_parser.add_argument(
        "--token",
        type=str,
        default=None,
        help="Gmail OAuth access token (default: config file or $GMAIL_ACCESS_TOKEN)",
    )
    scan_parser.add_argument("--max-results", type=int, default=None, help="Message IDs to list")
    scan_parser.add_argument("--fetch-limit", type=int, default=None, help="Messages to fetch and classify")
    scan_parser.add_argument("--workers", type=int, default=None, help="Classification threads")
    scan_parser.add_argument(
        "--stats",
        action="store_true",
        help="Print per-category totals to stderr",
    )
    _add_config_args(scan_parser)
    _add_filter_args(scan_parser)
    _add_output_arg(scan_parser)

    # classify
    classify_parser = subparsers.add_parser("classify", help="Classify raw message records from JSON")
    classify_parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="JSON array of RawMessage records (id, sender, subjectLine, ...)",
    )
    classify_parser.add_argument("--workers", type=int, default=1, help="Classification threads")
    _add_output_arg(classify_parser)

    # filter
    filter_parser = subparsers.add_parser("filter", help="Filter classified opportunity records")
    filter_parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="JSON array of opportunity records",
    )
    filter_parser.add_argument(
        "--show-explanations",
        action="store_true",
        help="Include filter explanations in output",
    )
    _add_config_args(filter_parser)
    _add_filter_args(filter_parser)
    _add_output_arg(filter_parser)

    # stats
    stats_parser = subparsers.add_parser("stats", help="Per-category totals for opportunity records")
    stats_parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="JSON array of opportunity records",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "scan":
        _run_scan(args)
    elif args.command == "classify":
        _run_classify(args)
    elif args.command == "filter":
        _run_filter(args)
    elif args.command == "stats":
        _run_stats(args)
    else:
        parser.print_help()


def _add_config_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to settings YAML",
    )


def _add_filter_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--category", choices=["all", *CATEGORIES], default=None)
    parser.add_argument("--priority", choices=["all", *PRIORITIES], default=None)
    parser.add_argument("--date-range", choices=["all", "today", "week", "month"], default=None)
    parser.add_argument("--company", type=str, default=None, help="Company name contains")
    parser.add_argument("--query", type=str, default=None, help="Search subject/company/description/tags")


def _add_output_arg(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write JSON to file (default: stdout)",
    )


def _load_settings(args: argparse.Namespace):
    """Settings from --config (or defaults), with CLI flags taking precedence."""
    from opportunity_scanner.config import ScannerSettings

    settings = ScannerSettings.from_yaml(args.config) if args.config else ScannerSettings().with_env()

    updates: dict[str, Any] = {}
    for arg_name, field in (
        ("token", "access_token"),
        ("max_results", "max_results"),
        ("fetch_limit", "fetch_limit"),
        ("workers", "workers"),
    ):
        value = getattr(args, arg_name, None)
        if value is not None:
            updates[field] = value

    filter_updates = {
        field: getattr(args, field)
        for field in ("category", "priority", "date_range", "company", "query")
        if getattr(args, field, None) is not None
    }
    if filter_updates:
        updates["filters"] = settings.filters.model_copy(update=filter_updates)

    return settings.model_validate({**settings.model_dump(), **updates}) if updates else settings


def _dump_records(records: list) -> str:
    return json.dumps(
        [r.model_dump(mode="json", by_alias=True) for r in records],
        indent=2,
        ensure_ascii=False,
    )


def _write(output: str, path: Optional[Path], summary: str) -> None:
    if path:
        path.write_text(output, encoding="utf-8")
        print(summary.format(path=path))
    else:
        print(output)


def _read_json_array(path: Path) -> list:
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise SystemExit(f"Could not read {path}: {e}")
    if not isinstance(data, list):
        raise SystemExit(f"Expected a JSON array in {path}")
    return data


def _read_records(path: Path) -> list:
    from pydantic import ValidationError

    from opportunity_scanner.models.opportunity import OpportunityRecord

    try:
        return [OpportunityRecord.model_validate(o) for o in _read_json_array(path)]
    except ValidationError as e:
        raise SystemExit(f"Invalid opportunity record in {path}: {e}")


def _run_scan(args: argparse.Namespace) -> None:
    """Run scan command."""
    from opportunity_scanner.connectors import ConnectorRegistry, TransportError
    from opportunity_scanner.filtering import compute_stats
    from opportunity_scanner.pipeline import run_pipeline

    settings = _load_settings(args)
    if args.source == "file":
        if not args.input:
            raise SystemExit("scan --source file requires --input")
        connector = ConnectorRegistry.get("file", path=args.input)
    else:
        if not settings.access_token:
            raise SystemExit(
                "No Gmail access token. Pass --token, set access_token in --config, "
                "or export GMAIL_ACCESS_TOKEN."
            )
        connector = ConnectorRegistry.get(
            "gmail",
            access_token=settings.access_token,
            timeout=settings.timeout,
        )

    try:
        result = run_pipeline(connector, settings=settings)
    except TransportError as e:
        raise SystemExit(str(e))

    if args.stats:
        _print_stats(compute_stats(result.records, date.today()))
    if result.skipped:
        print(f"Skipped {len(result.skipped)} of {result.fetched} messages", file=sys.stderr)

    passed = result.passed
    _write(
        _dump_records(passed),
        args.output,
        f"Found {len(passed)} opportunities in {result.fetched} messages (wrote to {{path}})",
    )


def _run_classify(args: argparse.Namespace) -> None:
    """Run classify command."""
    from opportunity_scanner.classify import classify_batch

    messages = _read_json_array(args.input)
    batch = classify_batch(messages, max_workers=args.workers)
    if batch.skipped:
        print(f"Skipped {batch.failure_count} of {len(messages)} messages", file=sys.stderr)
    _write(
        _dump_records(batch.records),
        args.output,
        f"Classified {len(batch.records)} of {len(messages)} messages (wrote to {{path}})",
    )


def _run_filter(args: argparse.Namespace) -> None:
    """Run filter command."""
    from opportunity_scanner.filtering import FilterEngine

    settings = _load_settings(args)
    records = _read_records(args.input)
    engine = FilterEngine(settings.filters)
    results = engine.filter_many(records)
    passed = [r for r in results if r.passed]

    if args.show_explanations:
        output = json.dumps(
            [
                {
                    "opportunity": r.record.model_dump(mode="json", by_alias=True),
                    "passed": r.passed,
                    "excludedByRule": r.excluded_by_rule,
                    "explanations": r.explanations,
                }
                for r in results
            ],
            indent=2,
            ensure_ascii=False,
        )
    else:
        output = _dump_records([r.record for r in passed])

    _write(output, args.output, f"Filtered: {len(passed)} passed of {len(records)} (wrote to {{path}})")


def _run_stats(args: argparse.Namespace) -> None:
    """Run stats command."""
    from opportunity_scanner.filtering import compute_stats

    _print_stats(compute_stats(_read_records(args.input), date.today()), file=sys.stdout)


def _print_stats(stats: dict, file=None) -> None:
    """Print total/new/urgent per category (stderr by default)."""
    file = file or sys.stderr
    print(f"{'category':<12} {'total':>5} {'new':>5} {'urgent':>6}", file=file)
    for key, s in stats.items():
        print(f"{key:<12} {s.total:>5} {s.new:>5} {s.urgent:>6}", file=file)


if __name__ == "__main__":
    main()
