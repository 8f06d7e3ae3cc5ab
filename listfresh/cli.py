import argparse
import json
import sys

from listfresh.config import configure_logging, get_settings
from listfresh.services.connectors import ListGateway, XrpcListGateway
from listfresh.services.locator import list_web_url, profile_web_url
from listfresh.services.resolver import get_list_info
from listfresh.services.validation import LocatorError, ResolutionError


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Show when a Bluesky list last gained a member")
    parser.add_argument("uri", help="List AT URI or https://bsky.app/profile/<actor>/lists/<rkey> link")
    parser.add_argument("--service", help="AppView base URL (overrides ATPROTO_SERVICE_URL)")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None, gateway: ListGateway | None = None) -> int:
    args = parse_args(argv)
    settings = get_settings()
    if args.service:
        settings = settings.model_copy(update={"atproto_service_url": args.service.rstrip("/")})
    configure_logging(settings)

    owned = gateway is None
    gateway = gateway or XrpcListGateway.from_settings(settings)
    try:
        summary = get_list_info(args.uri, gateway)
    except LocatorError as exc:
        print(f"error: {exc.code.value}: {exc.message}", file=sys.stderr)
        return 2
    except ResolutionError as exc:
        print(f"error: {exc.code.value}: {exc.message}", file=sys.stderr)
        return 1
    finally:
        if owned:
            gateway.close()

    payload = summary.model_dump(mode="json", by_alias=True)
    actor = summary.creator_handle or summary.creator_did
    payload["listUrl"] = list_web_url(actor, summary.rkey)
    payload["creatorUrl"] = profile_web_url(actor)
    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
