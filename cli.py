"""CLI entry point for ytlaunch."""

import argparse
import dataclasses
import json
import sys

from config import configure_logging, load_config
from hosts import HostPolicy
from launcher import LaunchError, NoHandlerError, launch
from models import Rejected
from normalizer import InvalidURLError, normalize

INVALID_INPUT_MESSAGE = "Please enter a valid YouTube URL"


def _report_rejection(rejection: Rejected, as_json: bool) -> int:
    if as_json:
        print(json.dumps({"error": "InvalidURL", **rejection.to_dict()}))
    print(f"{INVALID_INPUT_MESSAGE}: {rejection.message}", file=sys.stderr)
    return 1


def run(raw: str, open_it: bool, as_json: bool, strict: bool) -> int:
    config = load_config("CLI")
    configure_logging(config)
    if strict:
        config = dataclasses.replace(config, host_policy=HostPolicy.ALLOW_LIST)

    if open_it:
        try:
            url, handler = launch(raw, config)
        except InvalidURLError as e:
            return _report_rejection(e.rejection, as_json)
        except NoHandlerError as e:
            print(f"Nothing can open this URL: {e}", file=sys.stderr)
            return 2
        except LaunchError as e:
            print(f"Open failed: {e}", file=sys.stderr)
            return 2
        print(json.dumps({"url": url, "handler": handler.name}) if as_json else url)
        return 0

    result = normalize(raw, config.host_policy)
    if isinstance(result, Rejected):
        return _report_rejection(result, as_json)
    print(json.dumps(result.to_dict()) if as_json else result.url)
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description="ytlaunch - open YouTube links from any pasted text")
    parser.add_argument("url", help="YouTube URL or bare video ID")
    parser.add_argument(
        "--open",
        action="store_true",
        help="open the canonical URL after normalizing",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="print the result as JSON",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="only accept exact YouTube domains and their subdomains",
    )
    args = parser.parse_args(argv)
    sys.exit(run(args.url, args.open, args.json, args.strict))


if __name__ == "__main__":
    main()
