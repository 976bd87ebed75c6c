"""
Command-line application for the NFC card scanner bridge.

Opens the NFC reader, then forwards every newly detected card to the
game service until the process is stopped.
"""

import argparse
import sys
import time
from typing import List, Optional

from bridge.scanner import ScannerBridge
from config.settings import Settings
from core.card_table import CardTable, CardTableError
from core.decoder import FrameDecoder
from core.frame_reader import FrameReader, FrameReaderConnectionError
from core.notifier import ScanNotifier
from utils.logging import get_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="card-scanner",
        description="Forward NFC playing card scans to a game service"
    )
    parser.add_argument("--base", metavar="URL", help="Base URL of the game service")
    parser.add_argument("--game", metavar="ID", help="Game ID")
    parser.add_argument("--port", help="Serial device of the NFC reader (default: /dev/ttyUSB0)")
    parser.add_argument("--baud", type=int, help="Serial baud rate (default: 115200)")
    parser.add_argument("--cards", metavar="FILE", help="JSON file replacing the built-in card table")
    parser.add_argument("--settings", metavar="FILE", help="JSON settings file")
    parser.add_argument("--list-ports", action="store_true", help="List serial ports and exit")
    parser.add_argument("--debug", action="store_true", help="Enable DEBUG logging")
    return parser


def load_settings(args: argparse.Namespace) -> Settings:
    """Build settings from the optional file, then apply command-line overrides."""
    settings = Settings.load_from_file(args.settings) if args.settings else Settings()

    if args.base is not None:
        settings.service.base_url = args.base
    if args.game is not None:
        settings.service.game = args.game
    if args.port is not None:
        settings.serial.port = args.port
    if args.baud is not None:
        settings.serial.baud_rate = args.baud
    if args.cards is not None:
        settings.card_table_file = args.cards
    if args.debug:
        settings.log_level = "DEBUG"

    return settings


def load_card_table(settings: Settings) -> CardTable:
    if settings.card_table_file:
        return CardTable.load_from_file(settings.card_table_file)
    return CardTable()


def _keep_alive(interval: float):
    while True:
        time.sleep(interval)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_ports:
        for port in FrameReader.list_ports():
            print(port)
        return 0

    settings = load_settings(args)
    if not settings.service.base_url or not settings.service.game:
        parser.error("--base and --game are required")

    log = get_logger()
    log.set_level(settings.log_level)

    try:
        table = load_card_table(settings)
    except CardTableError as e:
        log.error(str(e))
        return 1
    log.debug(f"Loaded {table.count} cards from {table.source} table")

    endpoint = settings.service.endpoint
    log.info(f"Using game -> {endpoint}")

    reader = FrameReader(
        port=settings.serial.port,
        baud_rate=settings.serial.baud_rate,
        timeout=settings.serial.timeout,
        read_size=settings.serial.read_size,
        preferred_ports=settings.serial.preferred_ports,
        logger=log
    )
    try:
        reader.connect()
    except FrameReaderConnectionError as e:
        log.error(str(e))
        return 1

    notifier = ScanNotifier(
        endpoint,
        request_timeout=settings.service.request_timeout,
        logger=log
    )
    bridge = ScannerBridge(
        reader,
        FrameDecoder(table),
        notifier,
        retry_delay=settings.serial.retry_delay,
        logger=log
    )
    bridge.start()

    try:
        _keep_alive(settings.keepalive_interval)
    except KeyboardInterrupt:
        log.info("Shutting down")
    finally:
        bridge.stop()
        bridge.join(timeout=1.0)
        reader.disconnect()
        notifier.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
