#!/usr/bin/env python3
"""
LoadWise CLI.

Training load and injury risk analysis from run history.

Usage:
    loadwise assess runs.json --experience Intermediate --age-group 40-49
    loadwise assess runs.csv --json
    loadwise demo --days 42 --seed 7
    loadwise threshold --experience Expert --age-group 60+
    loadwise quick --hr 150 --pace 8:30 --distance 5
"""

import argparse
import logging
import sys
from typing import List, Optional

from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.text import Text
from rich import box
from rich.markup import escape

from .analysis.thresholds import resolve_overtraining_threshold
from .config import get_settings
from .exceptions import LoadWiseError
from .loaders import dump_assessment, load_history
from .metrics.load import (
    calculate_session_load_score,
    parse_pace,
    recommend_for_load_score,
)
from .models.assessment import LoadAssessment, RiskLevel
from .models.records import AGE_GROUPS, AthleteProfile, ExperienceTier
from .services.engine import AnalyticsEngine
from .synthetic import generate_synthetic_history

logger = logging.getLogger(__name__)

console = Console()


def get_risk_color(risk_level: RiskLevel) -> str:
    """Get rich color for an injury risk level."""
    colors = {
        RiskLevel.LOW: "green",
        RiskLevel.MODERATE: "yellow",
        RiskLevel.HIGH: "red",
        RiskLevel.CRITICAL: "bold red",
    }
    return colors.get(risk_level, "white")


def _fmt(value: Optional[float], spec: str = ".1f") -> str:
    return format(value, spec) if value is not None else "n/a"


def render_assessment(assessment: LoadAssessment, profile: AthleteProfile) -> None:
    """Print an assessment as a table plus an alerts panel."""
    console.print()
    console.print(Panel("[bold]LoadWise - Load & Risk Assessment[/bold]"))
    console.print()

    if not assessment.has_sufficient_data:
        console.print("[yellow]Not enough data: the history contains no runs.[/yellow]")
        console.print()
        return

    table = Table(title=f"{assessment.session_count} sessions", box=box.ROUNDED)
    table.add_column("Metric", style="cyan")
    table.add_column("Value", justify="right")

    ratio_style = "red" if assessment.ratio_exceeds_threshold else "green"
    risk_color = get_risk_color(assessment.risk_level)

    table.add_row("Acute load (7 sessions)", _fmt(assessment.acute_load))
    table.add_row("Chronic load (42 sessions)", _fmt(assessment.chronic_load))
    table.add_row(
        "Acute:chronic ratio",
        Text(_fmt(assessment.acute_chronic_ratio, ".2f"), style=ratio_style),
    )
    table.add_row(
        f"Threshold ({profile.experience_tier}, {profile.age_group})",
        _fmt(assessment.overtraining_threshold, ".2f"),
    )
    table.add_row("Overtraining warning index", _fmt(assessment.overtraining_warning_index, ".2f"))
    table.add_row("Monotony", _fmt(assessment.monotony, ".2f"))
    table.add_row(
        "Injury risk",
        Text(f"{assessment.injury_risk_score}/100 ({assessment.risk_level.value.upper()})", style=risk_color),
    )

    snapshot = assessment.recovery_snapshot
    if snapshot:
        table.add_row("Resting HR (avg)", f"{snapshot.mean_resting_hr:.1f} bpm")
        table.add_row("HRV (avg)", f"{snapshot.mean_hrv_ms:.1f} ms")
        table.add_row("HR recovery (avg)", f"{snapshot.mean_hrr_bpm:.1f} bpm")
        table.add_row("VO2 max (avg)", f"{snapshot.mean_vo2_max:.1f}")

    console.print(table)
    console.print()

    if assessment.alerts:
        body = "\n".join(f"- {alert}" for alert in assessment.alerts)
        console.print(Panel(body, title="Alerts", border_style="red"))
    else:
        console.print("[green]No alerts.[/green]")
    console.print()


def _profile_from_args(args) -> AthleteProfile:
    return AthleteProfile(experience_tier=args.experience, age_group=args.age_group)


def _emit(assessment: LoadAssessment, profile: AthleteProfile, as_json: bool) -> None:
    if as_json:
        print(dump_assessment(assessment))
    else:
        render_assessment(assessment, profile)


def cmd_assess(args) -> int:
    """Assess a run history file."""
    settings = get_settings()
    try:
        history = load_history(args.path, lactate_threshold_hr=settings.lactate_threshold_hr)
    except LoadWiseError as e:
        console.print(f"[red]Error: {escape(e.message)}[/red]")
        logger.debug(f"Failed to load history: {e.to_dict()}")
        return 1

    profile = _profile_from_args(args)
    assessment = AnalyticsEngine(settings).assess(history, profile)
    _emit(assessment, profile, args.json)
    return 0


def cmd_demo(args) -> int:
    """Assess a synthetic run history."""
    settings = get_settings()
    history = generate_synthetic_history(
        days=args.days,
        seed=args.seed,
        lactate_threshold_hr=settings.lactate_threshold_hr,
    )
    profile = _profile_from_args(args)
    assessment = AnalyticsEngine(settings).assess(history, profile)
    _emit(assessment, profile, args.json)
    return 0


def cmd_threshold(args) -> int:
    """Show the personal overtraining threshold."""
    threshold = resolve_overtraining_threshold(args.experience, args.age_group)
    console.print(
        f"Overtraining threshold for {args.experience}, {args.age_group}: "
        f"[bold]{threshold:.2f}[/bold]"
    )
    return 0


def cmd_quick(args) -> int:
    """Score a single run from heart rate, pace and distance."""
    try:
        pace = parse_pace(args.pace)
        score = calculate_session_load_score(args.hr, pace, args.distance)
    except ValueError:
        console.print("[red]Invalid input[/red]")
        return 1

    console.print(f"Load Score: [green]{score:.2f}[/green]")
    console.print(f"Recommendation: [bold]{recommend_for_load_score(score)}[/bold]")
    return 0


def _add_profile_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--experience", "-e",
        default=ExperienceTier.BEGINNER.value,
        help="Experience tier (Beginner, Intermediate, Expert)",
    )
    parser.add_argument(
        "--age-group", "-a",
        default=AGE_GROUPS[0],
        help=f"Age group ({', '.join(AGE_GROUPS)})",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="loadwise",
        description="LoadWise - training load and injury risk analytics",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  loadwise assess runs.json --experience Intermediate --age-group 40-49
  loadwise demo --days 42 --seed 7
  loadwise threshold --experience Expert --age-group 60+
  loadwise quick --hr 150 --pace 8:30 --distance 5
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Assess command
    assess_p = subparsers.add_parser("assess", help="Assess a run history file")
    assess_p.add_argument("path", help="History file (.json or .csv)")
    _add_profile_args(assess_p)
    assess_p.add_argument("--json", action="store_true", help="Print JSON instead of a table")

    # Demo command
    demo_p = subparsers.add_parser("demo", help="Assess a synthetic run history")
    demo_p.add_argument("--days", "-d", type=int, default=42, help="Days of history")
    demo_p.add_argument("--seed", "-s", type=int, default=None, help="Random seed")
    _add_profile_args(demo_p)
    demo_p.add_argument("--json", action="store_true", help="Print JSON instead of a table")

    # Threshold command
    threshold_p = subparsers.add_parser("threshold", help="Show personal overtraining threshold")
    _add_profile_args(threshold_p)

    # Quick command
    quick_p = subparsers.add_parser("quick", help="Score a single run")
    quick_p.add_argument("--hr", type=float, required=True, help="Average heart rate (bpm)")
    quick_p.add_argument("--pace", required=True, help="Pace (mm:ss per mile)")
    quick_p.add_argument("--distance", type=float, required=True, help="Distance (miles)")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=get_settings().log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command == "assess":
        return cmd_assess(args)
    elif args.command == "demo":
        return cmd_demo(args)
    elif args.command == "threshold":
        return cmd_threshold(args)
    elif args.command == "quick":
        return cmd_quick(args)
    else:
        parser.print_help()
        return 0


if __name__ == "__main__":
    sys.exit(main())
