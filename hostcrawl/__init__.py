"""HostCrawl: a same-host concurrent web crawler."""

__version__ = "0.1.0"
