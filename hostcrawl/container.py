"""Dependency injection container for the application."""
from dependency_injector import containers, providers

from hostcrawl import config as env
from hostcrawl.services.crawl_executor import CrawlExecutor
from hostcrawl.services.crawler_config_parser import CrawlerConfigParser
from hostcrawl.services.http_service import HttpService, build_session
from hostcrawl.services.link_processor import LinkProcessor
from hostcrawl.services.robots_fetcher import RobotsFetcher
from hostcrawl.services.robots_service import RobotsService


# Environment variables used by the container (read via `hostcrawl.config` helpers).
#
# USER_AGENT (str, default: "HostCrawl/1.0")
#   User-Agent header for page and robots.txt requests, and the agent name
#   evaluated against robots.txt rules.
#
# HTTP_TIMEOUT (float seconds, default: 3.0)
#   Timeout for every outbound request, robots.txt included.
#
# HOSTCRAWL_POOL_CONNECTIONS (int, default: 200)
#   Number of per-host connection pools the shared session keeps.
#
# HOSTCRAWL_POOL_MAXSIZE (int, default: 100)
#   Idle connections kept per host.
ENV = {
    "USER_AGENT": env.USER_AGENT,
    "HTTP_TIMEOUT": env.HTTP_TIMEOUT,
    "POOL_CONNECTIONS": env.POOL_CONNECTIONS,
    "POOL_MAXSIZE": env.POOL_MAXSIZE,
}


class Container(containers.DeclarativeContainer):
    """Dependency injection container for HostCrawl."""

    config = providers.Configuration(default=ENV)

    # Session - Singleton so every fetch shares one connection pool
    session = providers.Singleton(
        build_session,
        user_agent=config.USER_AGENT.as_(str),
        pool_connections=config.POOL_CONNECTIONS.as_(int),
        pool_maxsize=config.POOL_MAXSIZE.as_(int),
    )

    http_service = providers.Singleton(
        HttpService,
        user_agent=config.USER_AGENT.as_(str),
        http_client=session.provided.get,
        timeout=config.HTTP_TIMEOUT.as_(float),
    )

    robots_fetcher = providers.Singleton(
        RobotsFetcher,
        http_service=http_service,
    )

    robots_service = providers.Singleton(
        RobotsService,
        robots_fetcher=robots_fetcher,
        user_agent=config.USER_AGENT.as_(str),
    )

    link_processor = providers.Singleton(
        LinkProcessor,
        robots_service=robots_service,
    )

    config_parser = providers.Singleton(CrawlerConfigParser)

    crawl_executor = providers.Factory(
        CrawlExecutor,
        http_service=http_service,
        link_processor=link_processor,
    )
