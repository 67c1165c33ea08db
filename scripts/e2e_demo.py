#!/usr/bin/env python3
"""
End-to-end demo script for s3-helper.

Prerequisites:
    1. A MinIO or S3 endpoint with an existing bucket
    2. S3_ENDPOINT, AWS_BUCKET, AWS_ACCESS_KEY_ID, AWS_SECRET_ACCESS_KEY set
       in the environment or .env

Usage:
    python scripts/e2e_demo.py

    # With a custom file:
    python scripts/e2e_demo.py --file path/to/photo.png

    # Keep the object instead of deleting it:
    python scripts/e2e_demo.py --keep
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from uuid import uuid4

import httpx

from s3helper.core.config import Settings
from s3helper.core.logging import setup_logging
from s3helper.services.s3_service import S3Service
from s3helper.storage.contracts import StorageError
from s3helper.storage.factory import build_storage

SAMPLE_BODY = b"s3-helper e2e demo payload\n"
URL_MINUTES = 5


def fetch_signed_url(url: str) -> bytes:
    """GET a presigned URL without credentials."""
    with httpx.Client(timeout=30.0) as client:
        resp = client.get(url)
        resp.raise_for_status()
        return resp.content


async def run(settings: Settings, body: bytes, key: str, keep: bool) -> None:
    service = S3Service(build_storage(settings), settings)

    print("=" * 60)
    print("S3-HELPER - E2E DEMO")
    print("=" * 60)
    print(f"  Bucket: {service.bucket}")

    # Step 1: Upload
    print(f"\n[1/5] Uploading {len(body)} bytes to {key}...")
    uploaded = await service.upload(body, key)
    print(f"  ETag: {uploaded.etag}")

    # Step 2: Download through the SDK
    print("\n[2/5] Downloading...")
    data, headers = await service.download(key)
    if data != body:
        print("  Error: downloaded bytes differ from upload")
        sys.exit(1)
    print(f"  Content-Type: {headers.get('content-type', 'N/A')}")

    # Step 3: Download through a signed URL
    print(f"\n[3/5] Fetching signed URL valid for {URL_MINUTES} minutes...")
    url = await service.get_signed_url(key, URL_MINUTES)
    try:
        fetched = fetch_signed_url(url)
    except httpx.HTTPError as e:
        print(f"  Error fetching signed URL: {e}")
        sys.exit(1)
    print(f"  Signed URL works: {fetched == body}")

    # Step 4: Browser upload policy
    print("\n[4/5] Creating browser upload policy...")
    creds = await service.create_policy("text/plain", "private")
    print(json.dumps(creds.to_form_fields(), indent=2))

    # Step 5: Delete
    if keep:
        print("\n[5/5] Skipping delete (--keep)")
    else:
        print("\n[5/5] Deleting...")
        result = await service.delete_object(key)
        print(f"  Deleted: {', '.join(result.deleted) or 'none'}")
        for failure in result.errors:
            print(f"  Failed: {failure.key} {failure.code} {failure.message}")

    print("\n" + "=" * 60)
    print("DONE")
    print("=" * 60)


def main():
    parser = argparse.ArgumentParser(description="E2E demo for s3-helper")
    parser.add_argument("--file", "-f", type=Path, help="Path to file to upload")
    parser.add_argument("--keep", action="store_true", help="Do not delete the uploaded object")
    args = parser.parse_args()

    if args.file is not None and not args.file.exists():
        print(f"Error: file not found: {args.file}")
        sys.exit(1)

    body = args.file.read_bytes() if args.file else SAMPLE_BODY
    name = args.file.name if args.file else "demo.txt"

    settings = Settings()
    setup_logging(settings)
    try:
        asyncio.run(run(settings, body, f"e2e-demo/{uuid4()}/{name}", args.keep))
    except StorageError as e:
        print(f"  Storage error: {e}")
        sys.exit(1)

    sys.exit(0)


if __name__ == "__main__":
    main()
