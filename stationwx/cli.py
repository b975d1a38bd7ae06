# stationwx/cli.py
"""
Command-line entry point.

One run = one station: fetch the latest observation, assemble the
advisory, render the banner and write it. Any fetch failure aborts the
run before the engine is invoked.

Usage:
    STATION=KGOK RUNWAYS="160,340" stationwx
    stationwx --station KOKC --runways 17,35 --format text --output -
"""

import argparse
import sys
from datetime import tzinfo, timezone
from typing import List, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .engine.advisory import AdvisoryAssembler
from .engine.runway import runway_pair_from_config
from .ingestion.http import HttpClientError
from .ingestion.nws_observations import NWSObservationsClient
from .logging import configure_logging, get_logger
from .render.banner import render
from .render.output import write_banner
from .settings import OUTPUT_FORMATS, Settings, SettingsError

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stationwx",
        description="Render a flight-rules and runway banner from the latest NWS observation",
    )
    parser.add_argument("--station", help="Station identifier (env STATION)")
    parser.add_argument("--runways", help='Runway pair, e.g. "160,340" or "16,34" (env RUNWAYS)')
    parser.add_argument("--format", dest="output_format", choices=OUTPUT_FORMATS,
                        help="Banner format (env OUTPUT_FORMAT)")
    parser.add_argument("--output", dest="output_file",
                        help='Output file, "-" for stdout (env OUTPUT_FILE)')
    parser.add_argument("--timezone", dest="local_timezone",
                        help="Time zone for the local time label (env LOCAL_TIMEZONE)")
    parser.add_argument("--log-level", dest="log_level", help="Log level (env LOG_LEVEL)")
    parser.add_argument("--log-file", dest="log_file", help="Also write JSON logs to this file (env LOG_FILE)")
    return parser


def apply_args(settings: Settings, args: argparse.Namespace) -> Settings:
    """Override settings with any flags given on the command line."""
    for name in ("runways", "output_format", "output_file", "local_timezone", "log_level", "log_file"):
        value = getattr(args, name, None)
        if value is not None:
            setattr(settings, name, value)
    if args.station:
        settings.station = args.station.upper()
    return settings


def resolve_timezone(name: str) -> tzinfo:
    """ZoneInfo for name, UTC when the zone is unknown."""
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning("timezone_unknown", timezone=name, fallback="UTC")
        return timezone.utc


def run(settings: Settings, client: Optional[NWSObservationsClient] = None) -> int:
    """
    Execute one banner run.

    Args:
        settings: Effective configuration
        client: Observation client (built from settings when omitted)

    Returns:
        Process exit status
    """
    if settings.output_format not in OUTPUT_FORMATS:
        logger.error("run_failed", reason="unknown_output_format", output_format=settings.output_format)
        return 2

    runways = runway_pair_from_config(settings.runways)
    local_tz = resolve_timezone(settings.local_timezone)

    client = client or NWSObservationsClient(
        timeout=settings.http_timeout_seconds,
        user_agent=settings.nws_user_agent,
        max_attempts=settings.fetch_max_attempts,
    )

    try:
        observation = client.fetch_latest(settings.station)
    except HttpClientError as e:
        logger.error("run_failed", reason="upstream_failure", station=settings.station, error=str(e))
        return 1

    advisory = AdvisoryAssembler().assemble(observation, runways=runways, local_tz=local_tz)
    content = render(advisory, settings.output_format)

    try:
        write_banner(content, settings.output_path())
    except OSError as e:
        logger.error("run_failed", reason="write_failed", path=settings.output_path(), error=str(e))
        return 1

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = apply_args(Settings(), args)
    except SettingsError as e:
        configure_logging(force=True)
        logger.error("run_failed", reason="invalid_settings", error=str(e))
        return 2
    configure_logging(
        level=settings.log_level,
        json_output=settings.log_json,
        log_file=settings.log_file,
        force=True,
    )
    return run(settings)


if __name__ == "__main__":
    sys.exit(main())
