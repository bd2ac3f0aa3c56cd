#!/usr/bin/env python3
"""
Seed script to publish the catalog document to S3.

Run:
    python seed/seed_catalog.py \
      --bucket <BUCKET-NAME> \
      [--api-id <API-ID> --api-key <API-KEY>]
"""

import argparse
import json
from pathlib import Path
import sys
from typing import Any, cast

from aws_lambda_powertools import Logger
import requests

from catalog.infrastructure.adapters.s3_adapter import S3Adapter
from catalog.models.item import parse_catalog
from catalog.utils.constants import DEFAULT_CATALOG_S3_KEY, DEFAULT_FACET_TYPES

logger = Logger(service="seed")


BROWSE_API_URL = "http://localhost:4566/restapis/{0}/snd/_user_request_/v1/catalog"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Publish the catalog document to S3")

    parser.add_argument(
        "--bucket",
        required=True,
        help="Target S3 bucket name",
    )
    parser.add_argument(
        "--key",
        default=DEFAULT_CATALOG_S3_KEY,
        help="Target S3 object key",
    )
    parser.add_argument(
        "--file",
        type=Path,
        default=Path(__file__).parent / "data" / "catalog.json",
        help="Local catalog JSON document",
    )
    parser.add_argument(
        "--facet-types",
        default=",".join(DEFAULT_FACET_TYPES),
        help="Comma-separated facet types used to validate the document",
    )
    parser.add_argument(
        "--api-id",
        default=None,
        help="API Gateway ID to query after publishing (optional)",
    )
    parser.add_argument(
        "--api-key",
        default=None,
        help="API key for x-api-key header (optional for local)",
    )

    return parser.parse_args(argv)


def load_catalog_document(path: Path) -> Any:
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def check_browse_api(api_id: str, api_key: str | None) -> None:
    headers: dict[str, str] = {}
    if api_key:
        headers["x-api-key"] = api_key

    response = requests.get(
        BROWSE_API_URL.format(api_id),
        headers=headers,
        timeout=30,
    )
    body = cast(dict[str, Any], response.json())

    logger.info(
        "Browse catalog response",
        extra={
            "status": response.status_code,
            "total_count": body.get("total_count"),
            "page_count": (body.get("pagination") or {}).get("page_count"),
        },
    )


def seed_catalog(argv: list[str] | None = None) -> None:
    try:
        args = parse_args(argv)
        document = load_catalog_document(args.file)

        facet_types = [name.strip() for name in args.facet_types.split(",") if name.strip()]
        items = parse_catalog(document, facet_types)

        logger.info(
            "Publishing catalog",
            extra={"bucket": args.bucket, "key": args.key, "count": len(items)},
        )

        S3Adapter(args.bucket).put_object(
            key=args.key,
            body=json.dumps(document, ensure_ascii=False).encode("utf-8"),
            content_type="application/json",
        )

        logger.info("Seeding completed")

        if args.api_id:
            check_browse_api(args.api_id, args.api_key)

    except Exception as exc:
        logger.exception("Seeding failed", exc_info=exc)
        sys.exit(1)


if __name__ == "__main__":
    seed_catalog()
