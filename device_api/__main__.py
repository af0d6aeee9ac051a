"""
Local invocation CLI.

Runs a request body through the real handler against the table configured
in the environment, and prints the API Gateway response.

Usage:
    python -m device_api invoke --body '{"ID": "d1", "DeviceModel": "X1", ...}'
    python -m device_api invoke --body-file device.json
"""

import argparse
import json
import sys
import uuid
from pathlib import Path

from device_api.handlers.add_device import get_handler


def build_event(body: str) -> dict:
    """Wrap a body in a minimal API Gateway proxy event."""
    return {
        "httpMethod": "POST",
        "path": "/devices",
        "headers": {"Content-Type": "application/json"},
        "body": body,
        "isBase64Encoded": False,
    }


def _parse_args(argv):
    parser = argparse.ArgumentParser(prog="device_api", description="Device API local tools")
    subparsers = parser.add_subparsers(dest="command", required=True)

    invoke = subparsers.add_parser("invoke", help="Invoke the add-device handler locally")
    source = invoke.add_mutually_exclusive_group(required=True)
    source.add_argument("--body", help="Raw request body")
    source.add_argument("--body-file", type=Path, help="File containing the request body")

    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = _parse_args(argv)

    body = args.body if args.body is not None else args.body_file.read_text(encoding="utf-8")
    response = get_handler().handle(build_event(body), request_id=f"local-{uuid.uuid4()}")
    print(json.dumps(response, indent=2))
    return 0 if 200 <= response["statusCode"] < 300 else 1


if __name__ == "__main__":
    sys.exit(main())
