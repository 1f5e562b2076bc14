"""Command line entry point for payoff projections."""

from __future__ import annotations

import json
from typing import Any

import click

from .config import BaseConfig
from .logging_config import get_logger, setup_logging
from .models.debt import coerce_debts
from .services.accrual import OverflowPolicy
from .services.comparison import PayoffSummary, compare_strategies, summarize
from .services.simulation import simulate_payoff
from .services.strategies import PayoffStrategy
from .services.timeline import format_month_tick

logger = get_logger("cli")

STRATEGY_CHOICES = [strategy.value for strategy in PayoffStrategy]
OVERFLOW_CHOICES = [policy.value for policy in OverflowPolicy]


def _load_debts(stream) -> list[Any]:
    """Read a debt list from JSON: a bare list or ``{"debts": [...]}``."""

    try:
        payload = json.load(stream)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"not valid JSON ({exc})", param_hint="DEBTS_FILE") from exc

    if isinstance(payload, dict):
        payload = payload.get("debts")
    if not isinstance(payload, list):
        raise click.BadParameter(
            'expected a list of debts or an object with a "debts" list',
            param_hint="DEBTS_FILE",
        )
    try:
        return coerce_debts(payload)
    except TypeError as exc:
        raise click.BadParameter(str(exc), param_hint="DEBTS_FILE") from exc


def _echo_summary(summary: PayoffSummary) -> None:
    if summary.debt_free:
        click.echo(f"Debt free in {summary.months_to_debt_free} months")
    else:
        click.echo(
            f"Not debt free after {summary.months_simulated} months "
            f"(${summary.remaining_balance:,.2f} remaining)"
        )
    click.echo(f"Total interest: ${summary.total_interest:,.2f}")
    click.echo(f"Total paid:     ${summary.total_paid:,.2f}")
    for label, month in summary.payoff_months.items():
        click.echo(f"  {label}: {'month ' + str(month) if month is not None else 'open'}")


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Project debt payoff with the snowball or avalanche method."""

    config = BaseConfig()
    setup_logging(config)
    ctx.obj = config


@cli.command("simulate")
@click.argument("debts_file", type=click.File("r", encoding="utf-8"))
@click.option("--strategy", type=click.Choice(STRATEGY_CHOICES, case_sensitive=False), default=None)
@click.option("--extra", "extra_payment", type=float, default=None, help="Monthly extra payment")
@click.option("--overflow", type=click.Choice(OVERFLOW_CHOICES, case_sensitive=False), default=None)
@click.option("--format", "output_format", type=click.Choice(["table", "json"]), default="table")
@click.pass_obj
def simulate_command(
    config: BaseConfig,
    debts_file,
    strategy: str | None,
    extra_payment: float | None,
    overflow: str | None,
    output_format: str,
) -> None:
    """Print the sampled payoff timeline for DEBTS_FILE."""

    debts = _load_debts(debts_file)
    result = simulate_payoff(
        debts,
        strategy or config.DEFAULT_STRATEGY,
        config.DEFAULT_EXTRA_PAYMENT if extra_payment is None else extra_payment,
        overflow=overflow or config.OVERFLOW_POLICY,
    )
    summary = summarize(result)

    if output_format == "json":
        click.echo(
            json.dumps({"timeline": result.rows(), "summary": summary.to_dict()}, indent=2)
        )
        return

    labels = [debt.label for debt in result.debts]
    header = ["Month", "Tick", "Total"] + labels
    click.echo("  ".join(f"{col:>12}" for col in header))
    for record in result.timeline:
        cells = [str(record.month), format_month_tick(record.month), f"{record.total_balance:,.2f}"]
        cells += [f"{record.balances[label]:,.2f}" for label in labels]
        click.echo("  ".join(f"{cell:>12}" for cell in cells))
    click.echo("")
    click.echo(f"Strategy: {result.strategy.value}")
    _echo_summary(summary)


@cli.command("compare")
@click.argument("debts_file", type=click.File("r", encoding="utf-8"))
@click.option("--extra", "extra_payment", type=float, default=None, help="Monthly extra payment")
@click.option("--overflow", type=click.Choice(OVERFLOW_CHOICES, case_sensitive=False), default=None)
@click.option("--format", "output_format", type=click.Choice(["table", "json"]), default="table")
@click.pass_obj
def compare_command(
    config: BaseConfig,
    debts_file,
    extra_payment: float | None,
    overflow: str | None,
    output_format: str,
) -> None:
    """Compare avalanche and snowball for DEBTS_FILE."""

    debts = _load_debts(debts_file)
    comparison = compare_strategies(
        debts,
        config.DEFAULT_EXTRA_PAYMENT if extra_payment is None else extra_payment,
        overflow=overflow or config.OVERFLOW_POLICY,
    )
    logger.info("Strategy comparison", extra={"recommended": comparison.recommended.value})

    if output_format == "json":
        click.echo(json.dumps(comparison.to_dict(), indent=2))
        return

    for summary in (comparison.avalanche, comparison.snowball):
        click.echo(f"== {summary.strategy.value}")
        _echo_summary(summary)
        click.echo("")
    click.echo(f"Interest saved with avalanche: ${comparison.interest_saved:,.2f}")
    click.echo(f"Recommended: {comparison.recommended.value}")


def main() -> None:  # pragma: no cover - console script
    cli()
