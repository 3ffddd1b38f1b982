"""Command-line interface for the SEO signal extractor."""

import argparse
import asyncio
import json
import sys
from typing import List, Optional

from seo_signals.analyzer import PageAnalyzer
from seo_signals.config import AnalysisThresholds, Config
from seo_signals.constants import MISSING_ALT_ATTRIBUTE
from seo_signals.crawler import PageFetcher
from seo_signals.exceptions import SignalExtractionError
from seo_signals.logging_config import setup_logging
from seo_signals.models import PageReport
from seo_signals.monitor import PageMonitor


def _build_config(args) -> Config:
    config = Config.from_env()
    if getattr(args, "max_concurrent", None) is not None:
        config.max_concurrent_probes = args.max_concurrent
    if getattr(args, "probe_timeout", None) is not None:
        config.probe_timeout = args.probe_timeout
    if getattr(args, "strict_schema", False):
        config.strict_structured_data = True
    return config


def _build_thresholds(args) -> AnalysisThresholds:
    if getattr(args, "thresholds_file", None):
        return AnalysisThresholds.from_file(args.thresholds_file)
    return AnalysisThresholds.from_env()


async def _analyze_urls(urls: List[str], config: Config, thresholds: AnalysisThresholds) -> List[PageReport]:
    fetcher = PageFetcher(user_agent=config.user_agent)
    analyzer = PageAnalyzer(config=config, thresholds=thresholds)
    reports = []
    for url in urls:
        document = await asyncio.to_thread(
            fetcher.fetch_document, url, timeout=config.timeout, max_retries=config.max_retries
        )
        reports.append(await analyzer.analyze(document, url))
    return reports


def print_report(report: PageReport) -> None:
    """Print a page report in a readable form.

    Args:
        report: PageReport to print
    """
    print(f"\n{'=' * 60}")
    print(f"SEO Signals for: {report.url}")
    print(f"{'=' * 60}")
    print(f"\nTitle: {report.title.content or '(missing)'} ({report.title.length} chars)")
    print(f"Meta description: {report.meta_description.content} ({report.meta_description.length} chars)")
    print(f"Language: {report.language_tag.content}")
    print(f"Canonical: {report.canonical_tags.content}")
    print(f"Robots: {report.robots_meta_tag.content}")
    print(f"Favicon: {report.favicon.content}")

    print("\nHeadings:")
    for level, texts in report.headings.levels:
        print(f"  • {level}: {len(texts)}")

    print(f"\nContent: {report.content_length.length} words "
          f"({'ok' if report.content_length.recommended else 'thin'})")
    print(f"Readability: {report.readability.score:.2f} words/sentence "
          f"({'ok' if report.readability.recommended else 'hard to read'})")
    print(f"Mobile: viewport={report.mobile_friendliness.has_viewport}, "
          f"responsive={report.mobile_friendliness.is_responsive}")
    print(f"URL: readable={report.url_structure.is_readable}, "
          f"keywords={report.url_structure.has_keywords}")

    if report.keyword_density.entries:
        print("\nTop keywords:")
        for entry in report.keyword_density.entries:
            print(f"  • {entry.word}: {entry.density:.2f}%")

    missing_alt = sum(1 for image in report.images.images if image.alt == MISSING_ALT_ATTRIBUTE)
    print(f"\nImages: {len(report.images.images)} ({missing_alt} missing alt)")
    print(f"Links: {len(report.internal_links.links)} internal, "
          f"{len(report.external_links.links)} external")
    print(f"Schema markup blocks: {len(report.schema_markup.schemas)}")
    print(f"Open Graph tags: {len(report.social_tags.open_graph)}, "
          f"Twitter tags: {len(report.social_tags.twitter_card)}")

    if report.broken_links.links:
        print("\n⚠️  Broken links:")
        for href in report.broken_links.links:
            print(f"  • {href}")

    print(f"\n{'=' * 60}\n")


def analyze_command(args) -> int:
    """Analyze one or more URLs."""
    config = _build_config(args)
    thresholds = _build_thresholds(args)

    try:
        reports = asyncio.run(_analyze_urls(args.urls, config, thresholds))
    except SignalExtractionError as e:
        print(f"Error: {e.message}", file=sys.stderr)
        return 1

    if args.output == "text":
        for report in reports:
            print_report(report)
        return 0

    payload = [
        report.to_envelope() if args.envelope else report.to_dict()
        for report in reports
    ]
    output = json.dumps(payload[0] if len(payload) == 1 else payload, indent=2, default=str)
    if args.output_file:
        with open(args.output_file, "w") as f:
            f.write(output)
        print(f"Results written to {args.output_file}")
    else:
        print(output)
    return 0


def monitor_command(args) -> int:
    """Re-analyze a URL on an interval until interrupted."""
    config = _build_config(args)
    analyzer = PageAnalyzer(config=config, thresholds=_build_thresholds(args))

    def emit(report: PageReport) -> None:
        print(json.dumps(report.to_envelope(), default=str), flush=True)

    monitor = PageMonitor(analyzer=analyzer, on_report=emit)
    try:
        asyncio.run(monitor.run(args.url, args.interval, iterations=args.iterations))
    except KeyboardInterrupt:
        pass
    return 0 if monitor.failures < monitor.runs else 1


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    env_config = Config.from_env()
    parser = argparse.ArgumentParser(
        description="SEO Signals - extract on-page SEO signals from a single URL"
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=env_config.log_level,
        help="Set logging verbosity (default: $LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--log-file",
        default=env_config.log_file,
        help="Write logs to file in addition to console",
    )
    parser.add_argument(
        "--thresholds-file",
        help="JSON file with analysis thresholds",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    probe_options = argparse.ArgumentParser(add_help=False)
    probe_options.add_argument(
        "--max-concurrent",
        type=_positive_int,
        help="Maximum concurrent broken-link probes (1 probes sequentially)",
    )
    probe_options.add_argument(
        "--probe-timeout",
        type=float,
        help="Timeout in seconds for each broken-link probe",
    )
    probe_options.add_argument(
        "--strict-schema",
        action="store_true",
        help="Fail the whole analysis on malformed JSON-LD",
    )

    analyze_parser = subparsers.add_parser(
        "analyze", parents=[probe_options], help="Analyze one or more URLs."
    )
    analyze_parser.add_argument(
        "urls", nargs="+", help="URLs to analyze (one or more)"
    )
    analyze_parser.add_argument(
        "--output",
        "-o",
        choices=["text", "json"],
        default="json",
        help="Output format (default: json)",
    )
    analyze_parser.add_argument(
        "--output-file",
        "-f",
        help="Write output to file (only for json format)",
    )
    analyze_parser.add_argument(
        "--envelope",
        action="store_true",
        help="Wrap each report as {success, data, timestamp}",
    )
    analyze_parser.set_defaults(func=analyze_command)

    monitor_parser = subparsers.add_parser(
        "monitor", parents=[probe_options], help="Re-analyze a URL on an interval."
    )
    monitor_parser.add_argument("url", help="URL to monitor")
    monitor_parser.add_argument(
        "--interval",
        type=float,
        required=True,
        help="Seconds between analyses",
    )
    monitor_parser.add_argument(
        "--iterations",
        type=int,
        help="Stop after this many analyses (default: run until interrupted)",
    )
    monitor_parser.set_defaults(func=monitor_command)

    args = parser.parse_args(argv)

    setup_logging(
        level=args.log_level,
        log_file=getattr(args, 'log_file', None),
    )

    if hasattr(args, "func"):
        return args.func(args)
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
