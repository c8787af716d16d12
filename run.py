import logging
import sys
from typing import Optional

import click

from hostcrawl import __version__
from hostcrawl import config as env
from hostcrawl.container import Container
from hostcrawl.domain.config import CrawlerConfig
from hostcrawl.exceptions import InvalidConfigError

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def print_error(message: str):
    click.secho(message, fg="red", err=True)
    sys.exit(1)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
        stream=sys.stderr,
    )


def build_config(container: Container, config_path: Optional[str] = None, **overrides) -> CrawlerConfig:
    """Merge an optional YAML crawl file with CLI values, prompting for a missing seed or budget."""
    parser = container.config_parser()
    data = parser.read(config_path) if config_path else {}

    if overrides.get("seed_url") is None and not data.get("seed_url"):
        overrides["seed_url"] = click.prompt('Enter URL you want to crawl (must start with "https://")', type=str)
    if overrides.get("max_pages") is None and data.get("max_pages") is None:
        overrides["max_pages"] = click.prompt("Enter max number of pages you want to crawl", type=int)

    defaults = {
        "concurrency_limit": env.CONCURRENCY_LIMIT,
        "user_agent": container.config.USER_AGENT(),
        "http_timeout": container.config.HTTP_TIMEOUT(),
    }
    return parser.parse(config_path=config_path, data=data, defaults=defaults, **overrides)


def main(container: Optional[Container] = None, config_path: Optional[str] = None, **overrides):
    container = container or Container()

    try:
        crawl_config = build_config(container, config_path, **overrides)
    except InvalidConfigError as e:
        print_error(f"Error: {e}")

    # transport settings come from the crawl config from here on
    container.config.USER_AGENT.from_value(crawl_config.user_agent)
    container.config.HTTP_TIMEOUT.from_value(float(crawl_config.http_timeout))

    executor = container.crawl_executor(on_visit=lambda url: click.echo(f"visited: {url}"))
    result = executor.crawl(crawl_config)

    click.echo(f"Crawling took {result.elapsed_seconds:.2f}s")
    click.echo(f"Total pages crawled: {result.pages_visited}")
    return result


@click.command(context_settings=dict(help_option_names=["--help", "-h"]))
@click.version_option(__version__, "--version", "-v", message="HostCrawl, version %(version)s")
@click.option("--url", "-u", "seed_url", default=None, help="Seed URL (http/https). Prompted when missing.")
@click.option("--max-pages", "-n", "max_pages", type=int, default=None, help="Page budget. Prompted when missing.")
@click.option("--concurrency", "-c", "concurrency_limit", type=int, default=None,
              help=f"Max concurrent fetches [default: {env.CONCURRENCY_LIMIT}]")
@click.option("--user-agent", "user_agent", default=None, help="User agent for requests and robots.txt rules.")
@click.option("--timeout", "http_timeout", type=float, default=None, help="Per-request timeout in seconds.")
@click.option("--config", "config_path", default=None,
              type=click.Path(exists=True, dir_okay=False), help="YAML crawl file; CLI flags override it.")
@click.option("--log-level", "log_level", default=env.LOG_LEVEL, show_default=True,
              type=click.Choice(LOG_LEVELS, case_sensitive=False))
def cli(config_path, log_level, **overrides):
    """Crawl every page reachable from a seed URL on the seed's host."""
    configure_logging(log_level)
    main(config_path=config_path, **overrides)


if __name__ == '__main__':
    cli()
