#!/usr/bin/env python3
"""
CLI entrypoint for generating a deck from the Drive template.
"""

from __future__ import annotations

import argparse

from config import AUTH_MODES, DeckConfig
from logging_utils import enable_debug_logging, log_exception, setup_run_logging
from slides_generator import SlidesGenerator


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Fill a Google Slides template and export it as PDF.")
    parser.add_argument("--template-name", help="Name of the template presentation in Drive.")
    parser.add_argument("--copy-name", help="Name given to the copied presentation.")
    parser.add_argument("--image", dest="image_path", help="Local image that replaces the {{ image }} shape.")
    parser.add_argument("--output", dest="output_pdf_path", help="Where the exported PDF is written.")
    parser.add_argument("--product-name", help="Replacement for {{ product_name }}.")
    parser.add_argument("--product-description", help="Replacement for {{ product_description }}.")
    parser.add_argument("--credentials", dest="credentials_path", help="OAuth token cache file.")
    parser.add_argument("--client-secret", dest="client_secret_path", help="OAuth client secret JSON.")
    parser.add_argument("--auth-mode", choices=AUTH_MODES, help="How first-run authorization is completed.")
    parser.add_argument("--log-dir", default="logs", help="Directory for run logs.")
    parser.add_argument("--debug", action="store_true", help="Enable verbose logging.")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> DeckConfig:
    return DeckConfig.from_env().with_overrides(
        template_name=args.template_name,
        copy_name=args.copy_name,
        image_path=args.image_path,
        output_pdf_path=args.output_pdf_path,
        product_name=args.product_name,
        product_description=args.product_description,
        credentials_path=args.credentials_path,
        client_secret_path=args.client_secret_path,
        auth_mode=args.auth_mode,
    )


def main(argv=None) -> None:
    args = parse_args(argv)
    config = build_config(args)

    run_logger, _ = setup_run_logging(args.log_dir, f"{config.template_name} -> {config.copy_name}")
    if args.debug:
        enable_debug_logging()
        run_logger.debug("Debug logging enabled.")

    try:
        result = SlidesGenerator(config).generate()
    except Exception as exc:
        log_exception(run_logger, exc, context="generate", template=config.template_name)
        raise

    print("\n✅ Deck ready.")
    print(f"🔗 Presentation: {result.presentation_url}")
    print(f"📄 PDF: {result.pdf_path}")


if __name__ == "__main__":
    main()
