from __future__ import annotations

import os
import random
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .logging_config import setup_logging
from .models import Monkey
from .services.registry import MonkeyExplorerService, build_service
from .storage import EmbeddedSource, JsonFileSource

console = Console()

ASCII_ARTS = [
    "(\\_/)\n( •_•)\n/ >🐒",
    "  _\n ('_')\n/)>🐵",
    "  .-\"\"-.\n /      \\\n|  O  O |\n|  \\__/ |\n \\      /\n  `----`",
]


def get_service(data_path: Optional[str] = None, seed: Optional[int] = None) -> MonkeyExplorerService:
    # resolution order: flag > env var > default (embedded data, unseeded rng)
    path = data_path or os.environ.get("MONKEY_DATA_PATH")
    source = JsonFileSource(path) if path else EmbeddedSource()
    if seed is None and os.environ.get("MONKEY_SEED"):
        try:
            seed = int(os.environ["MONKEY_SEED"])
        except ValueError as e:
            raise click.BadParameter("MONKEY_SEED must be an integer") from e
    rng = random.Random(seed) if seed is not None else None
    return build_service(source, rng=rng)


def _truncate(value: Optional[str], max_length: int) -> str:
    if not value:
        return ""
    return value if len(value) <= max_length else value[: max_length - 3] + "..."


def print_monkeys(monkeys) -> None:
    if not monkeys:
        console.print("no monkeys available", style="yellow")
        return
    table = Table(title="monkeys")
    table.add_column("name")
    table.add_column("location")
    table.add_column("population", justify="right")
    table.add_column("latitude", justify="right")
    table.add_column("longitude", justify="right")
    for m in monkeys:
        table.add_row(
            escape(_truncate(m.name, 25)),
            escape(_truncate(m.location, 30)),
            str(m.population),
            f"{m.latitude:.6f}",
            f"{m.longitude:.6f}",
        )
    console.print(table)


def print_details(m: Monkey) -> None:
    console.print()
    console.print(f"name: {m.name}", markup=False)
    console.print(f"location: {m.location or ''}", markup=False)
    console.print(f"population: {m.population}")
    console.print(f"coordinates: {m.coordinates}")
    console.print(f"image: {m.image or ''}", markup=False)
    console.print("details:")
    console.print(m.details or "", markup=False)


def show_by_name(svc: MonkeyExplorerService, name: Optional[str]) -> bool:
    if not name or not name.strip():
        console.print("name cannot be empty", style="yellow")
        return False
    monkey = svc.find_by_name(name.strip())
    if monkey is None:
        console.print(f"no monkey found with name '{name}'", style="yellow", markup=False)
        return False
    print_details(monkey)
    return True


def show_random(svc: MonkeyExplorerService, times: int = 1) -> bool:
    monkey = None
    for _ in range(times):
        monkey = svc.pick_random()
    if monkey is None:
        console.print("no monkeys available to pick", style="yellow")
        return False
    console.print()
    console.print(svc.rng.choice(ASCII_ARTS), markup=False, highlight=False)
    print_details(monkey)
    console.print(f"(random-picked count for {monkey.name}: {svc.get_count(monkey.name)})", markup=False)
    return True


def print_tally(svc: MonkeyExplorerService) -> None:
    table = Table(title="random picks")
    table.add_column("name")
    table.add_column("count", justify="right")
    for name, count in svc.counts():
        table.add_row(escape(name), str(count))
    console.print(table)


@click.group(help="monkey explorer cli")
@click.option("--data", "data_path", default=None, help="path to a json dataset (default: embedded data)")
@click.option("--seed", type=int, default=None, help="seed for random picks and the ascii art shown with them")
@click.option("--verbose", "-v", is_flag=True, help="log info messages")
@click.option("--debug", is_flag=True, help="log debug messages")
@click.pass_context
def cli(ctx: click.Context, data_path: Optional[str], seed: Optional[int], verbose: bool, debug: bool):
    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    else:
        level = os.environ.get("MONKEY_LOG_LEVEL", "WARNING")
    setup_logging(level)
    # attach the service to context so subcommands share one catalog + counter
    ctx.obj = {"service": get_service(data_path, seed)}


@cli.command("list", help="list all monkeys")
@click.pass_context
def list_cmd(ctx: click.Context):
    svc: MonkeyExplorerService = ctx.obj["service"]
    print_monkeys(svc.list_all())


@cli.command("get", help="show details for a monkey by name")
@click.argument("name")
@click.pass_context
def get_cmd(ctx: click.Context, name: str):
    svc: MonkeyExplorerService = ctx.obj["service"]
    if not show_by_name(svc, name):
        raise SystemExit(1)


@cli.command("random", help="pick a random monkey")
@click.option("--times", type=click.IntRange(min=1), default=1, show_default=True, help="number of picks")
@click.pass_context
def random_cmd(ctx: click.Context, times: int):
    svc: MonkeyExplorerService = ctx.obj["service"]
    if not show_random(svc, times):
        raise SystemExit(1)
    if times > 1:
        print_tally(svc)


@cli.command("menu", help="interactive explorer")
@click.pass_context
def menu_cmd(ctx: click.Context):
    svc: MonkeyExplorerService = ctx.obj["service"]
    while True:
        console.print()
        console.print("monkey explorer", style="bold")
        console.print("1) list all monkeys")
        console.print("2) get details for a monkey by name")
        console.print("3) get a random monkey")
        console.print("4) exit (or q)")
        choice = click.prompt("select an option", default="", show_default=False).strip()
        if not choice:
            continue
        if choice == "1":
            print_monkeys(svc.list_all())
        elif choice == "2":
            show_by_name(svc, click.prompt("enter monkey name", default="", show_default=False))
        elif choice == "3":
            show_random(svc)
        elif choice in ("4", "q", "exit"):
            console.print("goodbye!")
            return
        else:
            console.print("unknown option. choose 1-4.")


def main():
    cli()


if __name__ == "__main__":
    main()
