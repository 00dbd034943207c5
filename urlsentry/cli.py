import argparse
import json
import random
import time
from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from urlsentry.analyzers.pipeline import analyze_url
from urlsentry.analyzers.url_analyzer import classify
from urlsentry.config import CACHE_DIR, HISTORY_CAPACITY, LOG_LEVEL
from urlsentry.errors import MalformedURLError
from urlsentry.history.storage import DiskCacheStorage
from urlsentry.history.store import HistoryStore, entry_from_assessment
from urlsentry.log import setup_logging
from urlsentry.models import HistoryEntry, UnifiedAssessment
from urlsentry.rules.types import ThreatLabel

console = Console()


LABEL_STYLES = {
    ThreatLabel.SUPER_SAFE: "bold magenta",
    ThreatLabel.SAFE_BLUE: "bold blue",
    ThreatLabel.MODERATELY_SAFE: "bold green",
    ThreatLabel.SUSPICIOUS_YELLOW: "bold yellow",
    ThreatLabel.UNSAFE_ORANGE: "bold dark_orange",
    ThreatLabel.HIGH_RISK: "bold red",
}


def format_range(score_min: int, score_max: int) -> str:
    if score_min == score_max:
        return str(score_min)
    return f"{score_min}-{score_max}"


def time_ago(timestamp: int, now: Optional[float] = None) -> str:
    """Rough "5 minutes ago" rendering of an epoch-millisecond timestamp."""
    now = time.time() if now is None else now
    seconds = max(0, int(now - timestamp / 1000))
    for unit, size in (("day", 86400), ("hour", 3600), ("minute", 60)):
        if seconds >= size:
            count = seconds // size
            return f"{count} {unit}{'s' if count > 1 else ''} ago"
    return "just now"


def summarize(text: str, width: int = 60) -> str:
    if not text:
        return "N/A"
    return text if len(text) <= width else text[:width] + "..."


# ----------------------------------------------------
# Display Functions
# ----------------------------------------------------

def display_result(result: UnifiedAssessment) -> None:
    style = LABEL_STYLES.get(result.label, "bold")
    console.print(Panel(f"[bold yellow]URL:[/bold yellow] {escape(result.url)}", expand=False))
    console.print(f"[{style}]{escape(result.category)}[/{style}] ({result.label.value})")
    console.print(f"[bold green]Reputation score:[/bold green] {format_range(result.score_min, result.score_max)}")
    console.print(f"[dim]Source: {result.source.value}, root domain: {result.root_domain}[/dim]\n")

    table = Table(show_header=False, show_lines=True)
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Detail", style="magenta")
    table.add_row("Threats", escape(result.threat_description or "N/A"))
    table.add_row("Reputation", escape(result.reputation_description or "N/A"))
    table.add_row(
        "Heuristic",
        f"{result.reputation.category.value} ({result.reputation.score})",
    )
    console.print(table)


def display_history(entries: Sequence[HistoryEntry], capacity: int) -> None:
    if not entries:
        console.print("[dim]No analyses performed yet.[/dim]")
        return

    table = Table(title=f"Analysis History (last {capacity} unique URLs)", show_lines=True)
    table.add_column("URL", style="cyan")
    table.add_column("Status")
    table.add_column("Reputation", justify="right", style="green")
    table.add_column("Analyzed", style="dim")
    table.add_column("Summary", style="magenta")

    for entry in entries:
        style = LABEL_STYLES.get(entry.label, "")
        table.add_row(
            escape(entry.url),
            f"[{style}]{escape(entry.category)}[/{style}]" if style else escape(entry.category),
            format_range(entry.score_range.min, entry.score_range.max),
            time_ago(entry.timestamp),
            escape(summarize(entry.threat_description)),
        )
    console.print(table)


# ----------------------------------------------------
# CLI Command Logic
# ----------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="urlsentry",
        description="URL reputation and threat classification",
    )
    parser.add_argument("url", nargs="?", help="URL to classify (http:// or https://)")

    group = parser.add_argument_group("content analysis result")
    group.add_argument("--score-min", type=float, help="Lower bound of the reported score")
    group.add_argument("--score-max", type=float, help="Upper bound of the reported score")
    group.add_argument("--label", help="Reported threat label (re-derived from the range)")
    group.add_argument("--threat-description", default="", help="Reported threat summary")
    group.add_argument("--reputation-description", default="", help="Reported reputation summary")

    parser.add_argument("--json", action="store_true", help="Output raw JSON instead of pretty tables")
    parser.add_argument("--save", action="store_true", help="Record the result in the history")
    parser.add_argument("--history", action="store_true", help="Show the analysis history")
    parser.add_argument("--clear-history", action="store_true", help="Delete the analysis history")
    parser.add_argument("--seed", type=int, help="Seed the heuristic score draws")
    parser.add_argument("--cache-dir", default=CACHE_DIR, help="Where the history is persisted")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level or LOG_LEVEL)

    if not (args.url or args.history or args.clear_history):
        parser.error("a URL, --history or --clear-history is required")
    if (args.score_min is None) != (args.score_max is None):
        parser.error("--score-min and --score-max go together")

    needs_store = args.save or args.history or args.clear_history
    store = HistoryStore(DiskCacheStorage(args.cache_dir), HISTORY_CAPACITY) if needs_store else None

    if args.clear_history:
        store.clear()
        console.print("[green]History cleared.[/green]")

    if args.url:
        rng = random.Random(args.seed) if args.seed is not None else None
        try:
            if args.score_min is None:
                result = analyze_url(args.url, store=store if args.save else None, rng=rng)
            else:
                external = {
                    "scoreMin": args.score_min,
                    "scoreMax": args.score_max,
                    "label": args.label,
                    "threatDescription": args.threat_description,
                    "reputationDescription": args.reputation_description,
                }
                result = classify(args.url, external, rng)
                if args.save:
                    store.insert(entry_from_assessment(result))
        except MalformedURLError as e:
            console.print(f"[bold red]Rejected:[/bold red] {escape(str(e))}")
            return 2

        if args.json:
            print(json.dumps(result.to_dict(), indent=2))
        else:
            display_result(result)

    if args.history:
        if args.json:
            print(json.dumps([entry.to_dict() for entry in store.list()], indent=2))
        else:
            display_history(store.list(), store.capacity)

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
