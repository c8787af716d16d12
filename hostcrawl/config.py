import os
import logging
from pathlib import Path
from typing import Optional

try:
	from dotenv import load_dotenv
except ImportError:
	logging.warning("python-dotenv not available; using environment variables only")
else:
	loaded = load_dotenv()
	if not loaded and Path(".env").exists():
		raise RuntimeError(".env file present but failed to load")


def get_str_env(name: str, default: str) -> str:
	raw = os.getenv(name)
	if raw is None or raw.strip() == "":
		return default
	return raw


def get_optional_str_env(name: str) -> Optional[str]:
	raw = os.getenv(name)
	if raw is None or raw.strip() == "":
		return None
	return raw


def get_int_env(name: str, default: int) -> int:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	try:
		return int(raw)
	except Exception:
		logging.exception("Invalid %s: %r", name, raw)
		return default


def get_float_env(name: str, default: float) -> float:
	raw = os.getenv(name)
	if raw is None or raw == "":
		return default
	try:
		return float(raw)
	except Exception:
		logging.exception("Invalid %s: %r", name, raw)
		return default


USER_AGENT = get_str_env("USER_AGENT", "HostCrawl/1.0")
HTTP_TIMEOUT = get_float_env("HTTP_TIMEOUT", 3.0)
CONCURRENCY_LIMIT = get_int_env("HOSTCRAWL_CONCURRENCY_LIMIT", 200)
POOL_CONNECTIONS = get_int_env("HOSTCRAWL_POOL_CONNECTIONS", 200)
POOL_MAXSIZE = get_int_env("HOSTCRAWL_POOL_MAXSIZE", 100)
LOG_LEVEL = get_str_env("LOG_LEVEL", "INFO").strip().upper()
