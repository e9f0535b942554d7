"""Command that publishes an XOR-obfuscated temperature reading over MQTT."""

from __future__ import annotations

import argparse
import itertools
import logging
import sys
import time

from iotseclab.mqtt_comm import DEFAULT_PORT, MqttComm, MqttError
from iotseclab.xor_cipher import xor_encrypt

DEFAULT_CLIENT_ID = "bitdog1"
DEFAULT_BROKER = "192.168.0.100"
DEFAULT_TOPIC = "escola/sala1/temperatura"
DEFAULT_MESSAGE = "26.5"
DEFAULT_KEY = 42
DEFAULT_INTERVAL = 5.0


def _key(text: str) -> int:
    try:
        value = int(text, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid key: {text!r}") from exc
    if not 0 <= value <= 0xFF:
        raise argparse.ArgumentTypeError("key must be in the range 0..255")
    return value


def _non_negative_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid count: {text!r}") from exc
    if value < 0:
        raise argparse.ArgumentTypeError("count must not be negative")
    return value


def _non_negative_float(text: str) -> float:
    try:
        value = float(text)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid interval: {text!r}") from exc
    if value < 0:
        raise argparse.ArgumentTypeError("interval must not be negative")
    return value


def parse_args(argv=None) -> argparse.Namespace:
    """Parse command-line options."""
    parser = argparse.ArgumentParser(
        prog="iotseclab",
        description="Publish an XOR-obfuscated reading to an MQTT broker.",
    )
    parser.add_argument("--client-id", default=DEFAULT_CLIENT_ID)
    parser.add_argument("--broker", default=DEFAULT_BROKER, help="broker IPv4 address")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument("--user", default=None)
    parser.add_argument("--password", default=None)
    parser.add_argument("--topic", default=DEFAULT_TOPIC)
    parser.add_argument("--message", default=DEFAULT_MESSAGE)
    parser.add_argument("--key", type=_key, default=DEFAULT_KEY)
    parser.add_argument(
        "--interval", type=_non_negative_float, default=DEFAULT_INTERVAL,
        help="seconds between publications",
    )
    parser.add_argument(
        "--count", type=_non_negative_int, default=None,
        help="number of publications (default: run forever)",
    )
    return parser.parse_args(argv)


def run(comm, topic: str, payload: bytes, interval: float, count: int | None = None) -> int:
    """Publish ``payload`` repeatedly, waiting ``interval`` seconds in between.

    Runs forever when ``count`` is None. Returns the number of publications.
    """
    sent = 0
    rounds = itertools.count() if count is None else range(count)
    for _ in rounds:
        if sent:
            time.sleep(interval)
        comm.publish(topic, payload)
        sent += 1
    return sent


def main(argv=None) -> int:
    """Entry point of the command."""
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    payload = xor_encrypt(args.message.encode(), args.key)
    try:
        with MqttComm(
            args.client_id, args.broker, args.user, args.password, args.port
        ) as comm:
            run(comm, args.topic, payload, args.interval, args.count)
    except MqttError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())