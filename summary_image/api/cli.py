"""
Command-line adapter for summary-image generation.

Interface responsibilities:
- Read content from `--text`, `--file` or stdin.
- Merge explicit provider flags over environment defaults.
- Print the resulting data URI or write it to `--output`.

Error handling strategy:
- Unreadable input and generation/transport failures print a message to
  stderr and exit 1.
- Empty content exits 2 without calling the provider.
"""

import argparse
import logging
import sys
from pathlib import Path

import httpx

from summary_image.config import ImageApiConfig
from summary_image.image.errors import ImageGenerationError
from summary_image.image.service import generate_image_sync
from summary_image.utils.i18n import set_language


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="summary-image",
        description="Summarize text into one generated image (printed as a data URI)",
    )
    source = p.add_mutually_exclusive_group()
    source.add_argument("--text", help="Content to summarize")
    source.add_argument("--file", help="Read content from this file (default: stdin)")

    p.add_argument("--base-url", help="Provider URL (defaults to IMAGE_API_BASE_URL)")
    p.add_argument("--api-key", help="Provider API key (defaults to IMAGE_API_KEY)")
    p.add_argument("--model", help="Model name (defaults to IMAGE_MODEL_NAME)")
    p.add_argument("--lang", help="Message language, e.g. en or zh")
    p.add_argument("--output", "-o", help="Write the data URI here instead of stdout")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    return p


def read_content(args) -> str:
    if args.text is not None:
        return args.text
    if args.file:
        return Path(args.file).read_text(encoding="utf-8")
    return sys.stdin.read()


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.lang:
        set_language(args.lang)

    try:
        content = read_content(args)
    except (OSError, UnicodeDecodeError) as err:
        print(f"Could not read input: {err}", file=sys.stderr)
        return 1

    if not content.strip():
        print("No content provided", file=sys.stderr)
        return 2

    config = ImageApiConfig.from_env(
        base_url=args.base_url,
        api_key=args.api_key,
        model_name=args.model,
    )

    try:
        result = generate_image_sync(content, config)
    except ImageGenerationError as err:
        print(f"Image generation failed: {err}", file=sys.stderr)
        return 1
    except httpx.RequestError as err:
        print(f"Image provider unreachable: {err}", file=sys.stderr)
        return 1

    if args.output:
        out = Path(args.output)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(result.base64_data, encoding="utf-8")
        print(f"Wrote: {out}")
    else:
        print(result.base64_data)

    return 0


if __name__ == "__main__":
    sys.exit(main())
