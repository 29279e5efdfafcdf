"""CLI interface using Typer."""

from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path
from typing import NoReturn, Optional

import typer
import yaml
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from tdeetrack.config import Settings, get_settings, reload_settings
from tdeetrack.tracking.dates import days_between, parse_date_key, resolve_today
from tdeetrack.tracking.loaders import load_entries, load_goal_settings
from tdeetrack.tracking.models import DailyLogEntry, GoalSettings, PeriodAverage
from tdeetrack.tracking.units import Unit

app = typer.Typer(
    help="Adaptive TDEE estimation from daily weight and calorie logs",
    no_args_is_help=True,
)
console = Console()
err_console = Console(stderr=True)

# Subcommand groups
tdee_app = typer.Typer(help="TDEE estimation (adaptive and formula)")
weight_app = typer.Typer(help="Weight trend analysis")
entries_app = typer.Typer(help="Inspect entry files")
config_app = typer.Typer(help="Show or create configuration")

app.add_typer(tdee_app, name="tdee")
app.add_typer(weight_app, name="weight")
app.add_typer(entries_app, name="entries")
app.add_typer(config_app, name="config")

GOAL_SUGGESTION = (
    "Create a goal file with starting_weight, goal_weight and weekly_rate_goal "
    "and pass it with --goal"
)


# ============================================================================
# Helpers
# ============================================================================


def output_json(response: dict, file=None) -> None:
    """Output JSON response to stdout or file."""
    json_str = json.dumps(response, indent=2)
    if file:
        file.write(json_str)
    else:
        print(json_str)


def configure_logging(verbose: bool) -> None:
    """Route library logging through Rich on stderr."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=verbose)],
        force=True,
    )


def fail(
    command: str,
    message: str,
    json_output: bool,
    suggestions: Optional[list[str]] = None,
) -> NoReturn:
    """Report an error in the requested format and exit with status 1."""
    if json_output:
        output_json({
            "success": False,
            "command": command,
            "errors": [message],
            "suggestions": suggestions or [],
        })
    else:
        console.print(f"[red]{message}[/red]")
        for suggestion in suggestions or []:
            console.print(f"[dim]{suggestion}[/dim]")
    raise typer.Exit(1)


def wants_json(flag: bool) -> bool:
    return flag or get_settings().defaults.output_format == "json"


def period_dict(period: PeriodAverage) -> dict:
    return {
        "weight": round(period.weight, 2),
        "calories": round(period.calories, 1),
        "entry_count": period.entry_count,
    }


def resolve_reference_date(today_str: Optional[str], command: str, json_output: bool) -> date:
    if today_str is None:
        return resolve_today()
    try:
        return parse_date_key(today_str)
    except ValueError:
        fail(command, f"Invalid --today date '{today_str}' (expected YYYY-MM-DD)", json_output)


def load_goal(goal_path: Optional[Path], command: str, json_output: bool) -> Optional[GoalSettings]:
    """Load goal settings from an explicit path or the configured default.

    An explicit path that does not exist is an error; a missing default file
    just means no goal has been set.
    """
    if goal_path is not None and not goal_path.exists():
        fail(command, f"Goal file not found: {goal_path}", json_output)

    path = goal_path or get_settings().data.goal_path
    try:
        return load_goal_settings(path)
    except (ValueError, yaml.YAMLError) as e:
        fail(command, f"Invalid goal settings in {path}: {e}", json_output)


def load_inputs(
    entries_path: Optional[Path],
    goal_path: Optional[Path],
    today: date,
    command: str,
    json_output: bool,
) -> tuple[list[DailyLogEntry], Optional[GoalSettings], dict[str, int]]:
    """Load entries and goal settings for a command, exiting on errors."""
    goal = load_goal(goal_path, command, json_output)
    unit = goal.unit if goal else Unit.POUND

    path = entries_path or get_settings().data.entries_path
    try:
        log, counts = load_entries(path, unit=unit, today=today)
    except FileNotFoundError as e:
        fail(command, str(e), json_output, ["Pass an entries file with --entries"])
    except (ValueError, yaml.YAMLError) as e:
        fail(command, f"Could not load entries from {path}: {e}", json_output)

    return log.entries(), goal, counts


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
    config_path: Optional[Path] = typer.Option(
        None, "--config", help="Path to config.yaml (default: ~/.tdeetrack/config.yaml)"
    ),
) -> None:
    """Estimate TDEE from weight and calorie logs and project time to goal."""
    configure_logging(verbose)
    if config_path is not None:
        reload_settings(config_path)


# ============================================================================
# Summary Commands
# ============================================================================


@app.command("stats")
def stats(
    entries_path: Optional[Path] = typer.Option(None, "--entries", "-e", help="Entries file (CSV or YAML)"),
    goal_path: Optional[Path] = typer.Option(None, "--goal", "-g", help="Goal settings YAML"),
    today_str: Optional[str] = typer.Option(None, "--today", help="Reference date (YYYY-MM-DD)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show TDEE, calorie target and goal projection."""
    from tdeetrack.tracking.diagnostics import calculate_stats, format_stats_report

    json_output = wants_json(json_output)
    today = resolve_reference_date(today_str, "stats", json_output)
    entries, goal, _ = load_inputs(entries_path, goal_path, today, "stats", json_output)

    if goal is None:
        fail("stats", "No goal settings found", json_output, [GOAL_SUGGESTION])

    result = calculate_stats(entries, goal, today=today, analysis=get_settings().analysis)

    if json_output:
        output_json({
            "success": True,
            "command": "stats",
            "data": {
                "unit": goal.unit.value,
                "current_weight": result.current_weight,
                "total_change_so_far": result.total_change_so_far,
                "tdee": result.tdee,
                "tdee_source": result.tdee_source.value,
                "target_daily_calorie_delta": result.target_daily_calorie_delta,
                "target_calories": result.target_calories,
                "weeks_to_goal": result.weeks_to_goal,
                "goal_date": result.goal_date,
                "entry_count": len(entries),
            },
            "errors": [],
            "suggestions": [],
            "human_summary": (
                f"TDEE {result.tdee} kcal/day ({result.tdee_source.value}), "
                f"target {result.target_calories} kcal/day"
            ),
        })
    else:
        console.print(format_stats_report(result, goal))


@app.command("progress")
def progress(
    entries_path: Optional[Path] = typer.Option(None, "--entries", "-e", help="Entries file (CSV or YAML)"),
    goal_path: Optional[Path] = typer.Option(None, "--goal", "-g", help="Goal settings YAML"),
    today_str: Optional[str] = typer.Option(None, "--today", help="Reference date (YYYY-MM-DD)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Compare the observed weekly rate with the goal rate."""
    from tdeetrack.tracking.goals import compute_weekly_rate_from_history, is_on_track

    json_output = wants_json(json_output)
    today = resolve_reference_date(today_str, "progress", json_output)
    entries, goal, _ = load_inputs(entries_path, goal_path, today, "progress", json_output)

    if goal is None:
        fail("progress", "No goal settings found", json_output, [GOAL_SUGGESTION])

    analysis = get_settings().analysis
    rate = compute_weekly_rate_from_history(entries, min_entries=analysis.min_entries)
    if rate is None:
        fail(
            "progress",
            f"Not enough data for a weekly rate (need at least {analysis.min_entries} entries)",
            json_output,
        )

    on_track = is_on_track(rate.actual_rate, goal.weekly_rate_goal, analysis.on_track_tolerance)
    u = goal.unit.short

    if json_output:
        output_json({
            "success": True,
            "command": "progress",
            "data": {
                "unit": goal.unit.value,
                "actual_rate": rate.actual_rate,
                "target_rate": goal.weekly_rate_goal,
                "days_tracked": rate.days_tracked,
                "strategy": goal.strategy.value if goal.strategy else None,
                "is_on_track": on_track,
            },
            "errors": [],
            "suggestions": [],
            "human_summary": (
                f"{rate.actual_rate:+.2f} {u}/week vs goal {goal.weekly_rate_goal:+.2f} "
                f"({'on track' if on_track else 'off track'})"
            ),
        })
    else:
        verdict = "[green]On track[/green]" if on_track else "[yellow]Off track[/yellow]"
        console.print(f"[bold]Progress[/bold] over {rate.days_tracked} days")
        console.print(f"  Actual rate: {rate.actual_rate:+.2f} {u}/week")
        console.print(f"  Goal rate:   {goal.weekly_rate_goal:+.2f} {u}/week")
        console.print(f"  {verdict}")


@app.command("averages")
def averages(
    entries_path: Optional[Path] = typer.Option(None, "--entries", "-e", help="Entries file (CSV or YAML)"),
    goal_path: Optional[Path] = typer.Option(None, "--goal", "-g", help="Goal settings YAML"),
    today_str: Optional[str] = typer.Option(None, "--today", help="Reference date (YYYY-MM-DD)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show this/last week and month averages."""
    from tdeetrack.tracking.aggregation import percent_change, period_averages
    from tdeetrack.tracking.diagnostics import format_averages_report

    json_output = wants_json(json_output)
    today = resolve_reference_date(today_str, "averages", json_output)
    entries, _, _ = load_inputs(entries_path, goal_path, today, "averages", json_output)

    snapshot = period_averages(entries, now=today)

    if json_output:
        week_change = percent_change(snapshot.this_week.calories, snapshot.last_week.calories)
        month_change = percent_change(snapshot.this_month.calories, snapshot.last_month.calories)
        output_json({
            "success": True,
            "command": "averages",
            "data": {
                "this_week": period_dict(snapshot.this_week),
                "last_week": period_dict(snapshot.last_week),
                "this_month": period_dict(snapshot.this_month),
                "last_month": period_dict(snapshot.last_month),
                "week_calorie_change_pct": round(week_change, 1) if week_change is not None else None,
                "month_calorie_change_pct": round(month_change, 1) if month_change is not None else None,
            },
            "errors": [],
            "suggestions": [],
            "human_summary": (
                f"This week: {snapshot.this_week.calories:.0f} kcal/day "
                f"over {snapshot.this_week.entry_count} entries"
            ),
        })
    else:
        console.print(format_averages_report(snapshot))


@app.command("streak")
def streak(
    entries_path: Optional[Path] = typer.Option(None, "--entries", "-e", help="Entries file (CSV or YAML)"),
    goal_path: Optional[Path] = typer.Option(None, "--goal", "-g", help="Goal settings YAML"),
    today_str: Optional[str] = typer.Option(None, "--today", help="Reference date (YYYY-MM-DD)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show the current logging streak."""
    from tdeetrack.tracking.aggregation import logging_streak

    json_output = wants_json(json_output)
    today = resolve_reference_date(today_str, "streak", json_output)
    entries, _, _ = load_inputs(entries_path, goal_path, today, "streak", json_output)

    days = logging_streak(entries, today=today)

    if json_output:
        output_json({
            "success": True,
            "command": "streak",
            "data": {"streak_days": days},
            "errors": [],
            "suggestions": [],
            "human_summary": f"{days}-day logging streak",
        })
    elif days:
        console.print(f"[green]{days}-day logging streak[/green]")
    else:
        console.print("[yellow]No active streak. Log today to start one.[/yellow]")


# ============================================================================
# TDEE Commands
# ============================================================================


@tdee_app.command("estimate")
def tdee_estimate(
    entries_path: Optional[Path] = typer.Option(None, "--entries", "-e", help="Entries file (CSV or YAML)"),
    goal_path: Optional[Path] = typer.Option(None, "--goal", "-g", help="Goal settings YAML"),
    today_str: Optional[str] = typer.Option(None, "--today", help="Reference date (YYYY-MM-DD)"),
    window: Optional[int] = typer.Option(None, "--window", "-w", help="Analysis window in days"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Estimate TDEE from intake and weight drift over the recent window."""
    from tdeetrack.tracking.adaptive import adaptive_tdee, trailing_window

    json_output = wants_json(json_output)
    today = resolve_reference_date(today_str, "tdee estimate", json_output)
    entries, goal, _ = load_inputs(entries_path, goal_path, today, "tdee estimate", json_output)

    analysis = get_settings().analysis
    window_days = window or analysis.adaptive_window_days
    unit = goal.unit if goal else Unit.POUND

    result = adaptive_tdee(
        entries,
        window_days=window_days,
        unit=unit,
        min_entries=analysis.min_entries,
        tdee_bounds=analysis.tdee_bounds,
    )
    if result is None:
        fail(
            "tdee estimate",
            f"Not enough data (need at least {analysis.min_entries} entries "
            f"in the last {window_days} days)",
            json_output,
            ["Log weight and calories daily, then try again"],
        )

    in_window = len(trailing_window(entries, window_days))

    if json_output:
        output_json({
            "success": True,
            "command": "tdee estimate",
            "data": {
                "tdee": result.tdee,
                "weight_trend_per_week": result.weight_trend_per_week,
                "unit": unit.value,
                "window_days": window_days,
                "entries_in_window": in_window,
            },
            "errors": [],
            "suggestions": [],
            "human_summary": (
                f"TDEE: {result.tdee} kcal/day, trend {result.weight_trend_per_week:+.2f} "
                f"{unit.short}/week"
            ),
        })
    else:
        console.print(
            f"[green]Adaptive TDEE estimate[/green] ({in_window} entries, {window_days}-day window)"
        )
        console.print(f"  [bold]Your TDEE: {result.tdee} kcal/day[/bold]")
        console.print(f"  Weight trend: {result.weight_trend_per_week:+.2f} {unit.short}/week")


@tdee_app.command("formula")
def tdee_formula(
    entries_path: Optional[Path] = typer.Option(None, "--entries", "-e", help="Entries file (CSV or YAML)"),
    goal_path: Optional[Path] = typer.Option(None, "--goal", "-g", help="Goal settings YAML"),
    today_str: Optional[str] = typer.Option(None, "--today", help="Reference date (YYYY-MM-DD)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Estimate TDEE from body stats (Mifflin-St Jeor).

    Uses the latest logged weight when an entries file is available,
    otherwise the starting weight.
    """
    from tdeetrack.profiles.body_calc import Sex, calculate_bmr, formula_tdee
    from tdeetrack.tracking.models import sort_entries
    from tdeetrack.tracking.units import to_kg

    json_output = wants_json(json_output)
    today = resolve_reference_date(today_str, "tdee formula", json_output)
    goal = load_goal(goal_path, "tdee formula", json_output)
    if goal is None:
        fail("tdee formula", "No goal settings found", json_output, [GOAL_SUGGESTION])

    weight = goal.starting_weight
    path = entries_path or get_settings().data.entries_path
    if path.exists():
        entries, _, _ = load_inputs(path, goal_path, today, "tdee formula", json_output)
        if entries:
            weight = sort_entries(entries)[-1].weight

    tdee = formula_tdee(goal, weight)
    if tdee is None:
        fail(
            "tdee formula",
            "Goal settings are missing body stats",
            json_output,
            ["Add sex, age, height_cm and activity_level to the goal file"],
        )

    bmr = calculate_bmr(goal.age, Sex(goal.sex), goal.height_cm, to_kg(weight, goal.unit))  # type: ignore[arg-type]

    if json_output:
        output_json({
            "success": True,
            "command": "tdee formula",
            "data": {
                "bmr": round(bmr),
                "tdee": tdee,
                "weight": weight,
                "unit": goal.unit.value,
                "activity_multiplier": goal.activity_multiplier,
            },
            "errors": [],
            "suggestions": [],
            "human_summary": f"Formula TDEE: {tdee} kcal/day (BMR {bmr:.0f})",
        })
    else:
        console.print(f"[bold]Mifflin-St Jeor estimate[/bold] at {weight:.1f} {goal.unit.short}")
        console.print(f"  BMR:  {bmr:.0f} kcal/day")
        console.print(f"  TDEE: {tdee} kcal/day (x{goal.activity_multiplier})")


@tdee_app.command("history")
def tdee_history(
    entries_path: Optional[Path] = typer.Option(None, "--entries", "-e", help="Entries file (CSV or YAML)"),
    goal_path: Optional[Path] = typer.Option(None, "--goal", "-g", help="Goal settings YAML"),
    today_str: Optional[str] = typer.Option(None, "--today", help="Reference date (YYYY-MM-DD)"),
    last: int = typer.Option(30, "--last", "-n", help="Number of most recent days to show"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show the rolling TDEE estimate for each logged day."""
    from tdeetrack.tracking.adaptive import rolling_tdee_series
    from tdeetrack.tracking.models import sort_entries

    json_output = wants_json(json_output)
    today = resolve_reference_date(today_str, "tdee history", json_output)
    entries, goal, _ = load_inputs(entries_path, goal_path, today, "tdee history", json_output)

    analysis = get_settings().analysis
    ordered = sort_entries(entries)
    series = rolling_tdee_series(
        ordered,
        goal,
        window_days=analysis.rolling_window_days,
        setup_days=analysis.setup_phase_days,
        min_entries=analysis.min_entries,
        tdee_bounds=analysis.tdee_bounds,
        fallback_multiplier=analysis.fallback_multiplier,
    )
    rows = list(zip(ordered, series))[-last:] if last > 0 else []

    if json_output:
        output_json({
            "success": True,
            "command": "tdee history",
            "data": {
                "points": [
                    {"date": e.date, "weight": e.weight, "calories": e.calories, "rolling_tdee": t}
                    for e, t in rows
                ],
            },
            "errors": [],
            "suggestions": [],
            "human_summary": f"{len(rows)} days of rolling TDEE",
        })
        return

    if not rows:
        console.print("No entries found")
        return

    table = Table(title=f"Rolling TDEE ({analysis.rolling_window_days}-day window)")
    table.add_column("Date", style="cyan")
    table.add_column("Weight", justify="right")
    table.add_column("Calories", justify="right")
    table.add_column("TDEE", justify="right", style="green")

    for entry, tdee in rows:
        table.add_row(
            entry.date,
            f"{entry.weight:.1f}",
            str(entry.calories),
            str(tdee) if tdee is not None else "-",
        )

    console.print(table)


# ============================================================================
# Weight Commands
# ============================================================================


@weight_app.command("trend")
def weight_trend(
    entries_path: Optional[Path] = typer.Option(None, "--entries", "-e", help="Entries file (CSV or YAML)"),
    goal_path: Optional[Path] = typer.Option(None, "--goal", "-g", help="Goal settings YAML"),
    today_str: Optional[str] = typer.Option(None, "--today", help="Reference date (YYYY-MM-DD)"),
    last: int = typer.Option(30, "--last", "-n", help="Number of most recent days to show"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show weight with its smoothed trend, regression line and target path."""
    from tdeetrack.tracking.diagnostics import (
        build_chart_series,
        format_weight_report,
        generate_weight_report,
    )

    json_output = wants_json(json_output)
    today = resolve_reference_date(today_str, "weight trend", json_output)
    entries, goal, _ = load_inputs(entries_path, goal_path, today, "weight trend", json_output)

    analysis = get_settings().analysis
    report = generate_weight_report(entries, smoothing=analysis.ema_smoothing)
    if report is None:
        fail("weight trend", "Not enough data for trend analysis", json_output)

    unit = goal.unit if goal else Unit.POUND
    points = build_chart_series(entries, goal, analysis=analysis)[-last:] if last > 0 else []

    if json_output:
        output_json({
            "success": True,
            "command": "weight trend",
            "data": {
                "unit": unit.value,
                "current_weight": report.current_weight,
                "current_trend": round(report.current_trend, 1),
                "trend_change": round(report.trend_change, 1),
                "weekly_rate": round(report.weekly_rate, 2),
                "period_days": report.period_days,
                "points": [
                    {
                        "date": p.date,
                        "weight": p.weight,
                        "smoothed_weight": p.smoothed_weight,
                        "trend_value": p.trend_value,
                        "target_value": p.target_value,
                        "calories": p.calories,
                        "calories_trend": p.calories_trend,
                        "rolling_tdee": p.rolling_tdee,
                    }
                    for p in points
                ],
            },
            "errors": [],
            "suggestions": [],
            "human_summary": (
                f"Trend: {report.current_trend:.1f} {unit.short}, "
                f"{report.weekly_rate:+.1f} {unit.short}/week"
            ),
        })
        return

    console.print(format_weight_report(report, unit))
    console.print()

    table = Table(title="Weight Trend")
    table.add_column("Date", style="cyan")
    table.add_column("Weight", justify="right")
    table.add_column("EMA", justify="right", style="blue")
    table.add_column("Trend", justify="right")
    table.add_column("Target", justify="right", style="green")

    for p in points:
        table.add_row(
            p.date,
            f"{p.weight:.1f}",
            f"{p.smoothed_weight:.1f}",
            f"{p.trend_value:.1f}",
            f"{p.target_value:.1f}" if p.target_value is not None else "-",
        )

    console.print(table)


# ============================================================================
# Entries Commands
# ============================================================================


@entries_app.command("check")
def entries_check(
    entries_path: Optional[Path] = typer.Option(None, "--entries", "-e", help="Entries file (CSV or YAML)"),
    goal_path: Optional[Path] = typer.Option(None, "--goal", "-g", help="Goal settings YAML"),
    today_str: Optional[str] = typer.Option(None, "--today", help="Reference date (YYYY-MM-DD)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Validate an entries file and summarize its coverage."""
    json_output = wants_json(json_output)
    today = resolve_reference_date(today_str, "entries check", json_output)
    entries, _, counts = load_inputs(entries_path, goal_path, today, "entries check", json_output)

    first = entries[0].date if entries else None
    last = entries[-1].date if entries else None
    span = days_between(first, last) + 1 if first and last else 0
    missing_days = span - len(entries)

    suggestions = []
    if counts["skipped_invalid"]:
        suggestions.append("Run with --verbose to see why rows were skipped")

    if json_output:
        output_json({
            "success": True,
            "command": "entries check",
            "data": {
                **counts,
                "entry_count": len(entries),
                "first_date": first,
                "last_date": last,
                "days_covered": span,
                "missing_days": missing_days,
            },
            "errors": [],
            "suggestions": suggestions,
            "human_summary": (
                f"{len(entries)} entries, {counts['skipped_invalid']} skipped, "
                f"{missing_days} missing days"
            ),
        })
        return

    console.print(f"[green]Loaded {len(entries)} entries[/green]")
    if first:
        console.print(f"  Range: {first} to {last} ({span} days, {missing_days} missing)")
    if counts["replaced"]:
        console.print(f"  [yellow]{counts['replaced']} duplicate dates (later rows kept)[/yellow]")
    if counts["skipped_invalid"]:
        console.print(f"  [yellow]{counts['skipped_invalid']} invalid rows skipped[/yellow]")
    for suggestion in suggestions:
        console.print(f"[dim]{suggestion}[/dim]")


# ============================================================================
# Config Commands
# ============================================================================


@config_app.command("show")
def config_show(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
) -> None:
    """Show the effective configuration."""
    settings = get_settings()

    if wants_json(json_output):
        output_json({
            "success": True,
            "command": "config show",
            "data": settings.to_dict(),
            "errors": [],
            "suggestions": [],
            "human_summary": "Current configuration",
        })
    else:
        console.print(yaml.dump(settings.to_dict(), default_flow_style=False, sort_keys=False))


@config_app.command("init")
def config_init(
    path: Optional[Path] = typer.Option(None, "--path", "-p", help="Where to write config.yaml"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """Write a config file with default settings."""
    from tdeetrack.config import default_config_path

    target = path or default_config_path()
    if target.exists() and not force:
        console.print(f"[yellow]Config already exists:[/yellow] {target}")
        console.print("[dim]Use --force to overwrite[/dim]")
        raise typer.Exit(1)

    Settings().save(target)
    console.print(f"[green]Wrote default config to[/green] {target}")


if __name__ == "__main__":
    app()
