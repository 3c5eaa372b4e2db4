"""CLI entry point for dragonsay."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from dragonsay.config import ConfigError, DragonsayConfig
from dragonsay.constants import MIN_INTERVAL_MS
from dragonsay.debug_log import setup_logging
from dragonsay.paths import get_config_path
from dragonsay.renderer import SlotPolicy
from dragonsay.script import Script, ScriptError
from dragonsay.sequencer import AnimationPlan, Sequencer, say
from dragonsay.terminal import ClickTerminal, TerminalError
from dragonsay.version import get_dragonsay_version

log = logging.getLogger(__name__)

SPLIT_CHOICES = tuple(policy.value for policy in SlotPolicy)

split_option = click.option(
    "--split",
    type=click.Choice(SPLIT_CHOICES),
    default=None,
    help="How side dishes are cut into the two slots (default from config)",
)


def _load_config() -> DragonsayConfig:
    try:
        return DragonsayConfig.load()
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc


def _resolve_policy(split: str | None, config: DragonsayConfig) -> SlotPolicy:
    if split is None:
        return config.display.split_policy
    return SlotPolicy(split)


@click.group(invoke_without_command=True)
@click.option("--version", is_flag=True, help="Show version and exit")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr")
@click.pass_context
def cli(ctx: click.Context, version: bool, verbose: bool) -> None:
    """A dragon that holds up your side dishes in the terminal."""
    setup_logging(verbose)

    if version:
        click.echo(f"dragonsay {get_dragonsay_version()}")
        ctx.exit(0)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument("side_dishes", nargs=-1)
@click.option(
    "-p",
    "--pre-captions",
    "pre_captions",
    multiple=True,
    help="Caption shown before the side dishes (repeatable)",
)
@click.option(
    "-A",
    "--after-captions",
    "after_captions",
    multiple=True,
    help="Caption shown after the side dishes (repeatable)",
)
@click.option(
    "-f",
    "--script-file",
    "script_file",
    type=click.Path(exists=True, dir_okay=False, readable=True, path_type=Path),
    default=None,
    help="Read side dishes and captions from a TOML script",
)
@click.option("-a", "--anime", is_flag=True, help="Animate: clear the screen between frames")
@click.option(
    "-i",
    "--interval",
    type=click.IntRange(min=MIN_INTERVAL_MS),
    default=None,
    help="Milliseconds between animation frames (default from config)",
)
@split_option
def play(
    side_dishes: tuple[str, ...],
    pre_captions: tuple[str, ...],
    after_captions: tuple[str, ...],
    script_file: Path | None,
    anime: bool,
    interval: int | None,
    split: str | None,
) -> None:
    """Show captions and side dishes, one dragon per item.

    \b
    Examples:
        dragonsay play hamburger
        dragonsay play -p "Today's menu" ramen gyoza -A "Enjoy!"
        dragonsay play -a -i 500 sushi tempura
        dragonsay play -a -f menu.toml
    """
    if script_file is not None and (side_dishes or pre_captions or after_captions):
        raise click.UsageError(
            "--script-file cannot be combined with side dishes, --pre-captions or --after-captions"
        )

    config = _load_config()
    interval_ms = None
    if anime:
        interval_ms = interval if interval is not None else config.display.default_interval_ms
    elif interval is not None:
        log.debug("--interval %d ignored without --anime", interval)

    if script_file is not None:
        try:
            plan = Script.load(script_file).to_plan(interval_ms)
        except ScriptError as exc:
            raise click.ClickException(str(exc)) from exc
    else:
        plan = AnimationPlan(
            pre_captions=pre_captions,
            side_dishes=side_dishes,
            after_captions=after_captions,
            interval_ms=interval_ms,
        )

    target = ClickTerminal(fallback_width=config.display.fallback_width)
    sequencer = Sequencer(target, policy=_resolve_policy(split, config))
    try:
        sequencer.run(plan)
    except TerminalError as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command(name="say")
@click.argument("side_dish", default="")
@click.option("-c", "--caption", default="", help="Caption printed under the dragon")
@split_option
def say_command(side_dish: str, caption: str, split: str | None) -> None:
    """Show a single dragon holding SIDE_DISH."""
    config = _load_config()
    target = ClickTerminal(fallback_width=config.display.fallback_width)
    try:
        say(side_dish, target, caption=caption, policy=_resolve_policy(split, config))
    except TerminalError as exc:
        raise click.ClickException(str(exc)) from exc


@cli.command(name="config")
@click.option("--init", "init_", is_flag=True, help="Write a default config file if none exists")
def config_command(init_: bool) -> None:
    """Show the config file location and effective settings."""
    path = get_config_path()
    click.echo(f"Config file: {path}")

    if init_:
        if path.exists():
            click.secho("Config file already exists, leaving it untouched.", fg="yellow")
        else:
            try:
                DragonsayConfig().save(path)
            except OSError as exc:
                raise click.ClickException(f"could not write {path}: {exc}") from exc
            click.secho("Wrote default config.", fg="green")

    config = _load_config()
    for key, value in config.display.model_dump(mode="json").items():
        click.echo(f"  {key} = {value}")


if __name__ == "__main__":
    cli()
