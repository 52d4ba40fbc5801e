from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from cef_codec.core.codec import decode
from cef_codec.core.errors import CefError
from cef_codec.core.export import to_json
from cef_codec.core.models import CefEvent
from cef_codec.core.reader import read_events
from cef_codec.core.sink import StreamSink, emit_event
from cef_codec.settings import configure_logging, text_encoding

LOGGER = logging.getLogger(__name__)

_HEADER_LABELS = (
    ("Version", "version"),
    ("Device Vendor", "device_vendor"),
    ("Device Product", "device_product"),
    ("Device Version", "device_version"),
    ("Device Event Class ID", "device_event_class_id"),
    ("Name", "name"),
    ("Severity", "severity"),
)


def _parse_extension_arg(s: str) -> tuple[str, str]:
    """Parse a ``key=value`` extension argument (value may contain '=')."""
    key, sep, value = s.partition("=")
    if not sep:
        raise argparse.ArgumentTypeError("extension must look like key=value (e.g., src=10.0.0.1)")
    return key, value


def _print_event(event: CefEvent) -> None:
    for label, attr in _HEADER_LABELS:
        print(f"{label}: {getattr(event, attr)}")
    for key in sorted(event.extensions):
        print(f"  {key}={event.extensions[key]}")


def _cmd_encode(args: argparse.Namespace) -> int:
    event = CefEvent(
        version=args.cef_version,
        device_vendor=args.vendor,
        device_product=args.product,
        device_version=args.device_version,
        device_event_class_id=args.class_id,
        name=args.name,
        severity=args.severity,
        extensions=dict(args.extensions or []),
    )
    if args.json:
        print(to_json(event, indent=2))
        return 0
    return 0 if emit_event(event, StreamSink()) else 2


def _cmd_decode(args: argparse.Namespace) -> int:
    event = decode(args.line)
    if args.json:
        print(to_json(event, indent=2))
    else:
        _print_event(event)
    return 0


def _cmd_decode_file(args: argparse.Namespace) -> int:
    items = asyncio.run(read_events(Path(args.path), encoding=text_encoding()))
    failed = 0
    for item in items:
        if item.error is not None:
            failed += 1
            print(f"{item.line_no}: {item.error}", file=sys.stderr)
            continue
        if args.errors_only:
            continue
        if args.json:
            print(f"{item.line_no} {to_json(item.event)}")
        else:
            print(f"{item.line_no} {item.event.name} [{item.event.severity}]")

    print(f"\nDecoded {len(items) - failed} of {len(items)} lines.")
    return 1 if failed else 0


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="cef-codec", description="Encode and decode Common Event Format lines.")
    p.add_argument("--log-level", default=None, help="Logging level (default: $CEF_CODEC_LOG_LEVEL or INFO)")
    sub = p.add_subparsers(dest="command", required=True)

    enc = sub.add_parser("encode", help="Encode raw fields into a CEF line")
    enc.add_argument("--version", dest="cef_version", type=int, default=0, help="CEF version (default: 0)")
    enc.add_argument("--vendor", default="", help="Device vendor")
    enc.add_argument("--product", default="", help="Device product")
    enc.add_argument("--device-version", default="", help="Device version")
    enc.add_argument("--class-id", default="", help="Device event class ID")
    enc.add_argument("--name", default="", help="Event name")
    enc.add_argument("--severity", default="", help="Event severity")
    enc.add_argument(
        "--ext",
        dest="extensions",
        action="append",
        type=_parse_extension_arg,
        help="Extension pair key=value (repeatable)",
    )
    enc.add_argument("--json", action="store_true", help="Print the event as JSON instead of CEF")
    enc.set_defaults(func=_cmd_encode)

    dec = sub.add_parser("decode", help="Decode a single CEF line")
    dec.add_argument("line")
    dec.add_argument("--json", action="store_true", help="Print the event as JSON")
    dec.set_defaults(func=_cmd_decode)

    dfile = sub.add_parser("decode-file", help="Decode every line of a CEF file (plain or .gz)")
    dfile.add_argument("path")
    dfile.add_argument("--json", action="store_true", help="Print each event as JSON")
    dfile.add_argument("--errors-only", action="store_true", help="Only report lines that fail to decode")
    dfile.set_defaults(func=_cmd_decode_file)

    return p


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entrypoint."""
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    try:
        code = args.func(args)
    except FileNotFoundError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2)
    except (CefError, ValueError) as e:
        LOGGER.debug("command %s failed", args.command, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(2)

    if code:
        raise SystemExit(code)


if __name__ == "__main__":
    main()
