"""Command-line entry point: search, pick, play."""

from __future__ import annotations

import argparse
import shutil
import sys
from functools import partial

from rich.console import Console
from rich.markup import escape

from .cache import CacheStore
from .client import InvidiousClient
from .config import AppConfig
from .errors import YtSearchError
from .flow import FlowOutcome, SearchFlow
from .instances import InstanceResolver
from .logging_utils import get_logger
from .picker import pick
from .player import execute


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="yt",
        description="Search Invidious and play the chosen result with mpv",
    )
    p.add_argument("terms", nargs="*", help="Free-text search query")
    return p


def build_flow(config: AppConfig, console: Console, terminal_width: int) -> SearchFlow:
    client = InvidiousClient(timeout=config.timeout_seconds, user_agent=config.user_agent)
    cache = CacheStore(config.cache_path, config.retention_seconds)
    resolver = InstanceResolver(client, cache, config.instances_url)
    return SearchFlow(
        config,
        resolver,
        client,
        picker=partial(pick, vim_mode=config.vim_mode, max_width=config.max_width),
        console=console,
        terminal_width=terminal_width,
    )


def run_cli(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    err = Console(stderr=True, soft_wrap=True)
    try:
        config = AppConfig.from_file()
    except (ValueError, TypeError) as e:
        err.print(f"[bold red]Invalid config file:[/] {escape(str(e))}")
        return 1
    width = shutil.get_terminal_size().columns
    flow = build_flow(config, Console(soft_wrap=True), width)
    try:
        get_logger(config.log_level)
        result = flow.run(args.terms)
        if result.outcome is FlowOutcome.LAUNCH and result.action is not None:
            execute(result.action)
    except YtSearchError as e:
        get_logger().error("%s failed while %s: %s", type(e).__name__, flow.state.value, e)
        err.print(f"[bold red]error:[/] {escape(str(e))}")
        return 1
    except KeyboardInterrupt:  # pragma: no cover
        return 130
    return 0


def main() -> None:
    sys.exit(run_cli())
