"""
Command-line interface for review sentiment and keyword maintenance.

Usage:
    # Score a review with the live lexicon
    court-sentiment analyze "Sân rất tốt, sạch sẽ"

    # Score without touching the keyword store
    court-sentiment analyze "Sân rất tốt" --sync

    # Create tables, then seed the default Vietnamese dataset
    court-sentiment migrate
    court-sentiment seed --clear

    # Export the lexicon
    court-sentiment export --language vi --output keywords.json
"""

import argparse
import asyncio
import json
import sys
from pathlib import Path
from typing import Any, List, Optional

import structlog

from court_sentiment.config import settings
from court_sentiment.keywords.accessor import KeywordAccessor
from court_sentiment.keywords.admin import KeywordAdmin, default_dataset_summary
from court_sentiment.keywords.database import create_all_tables, dispose_engine
from court_sentiment.logging_config import setup_logging
from court_sentiment.sentiment.scorer import create_external_client
from court_sentiment.sentiment.scoring import analyze_sentiment_sync
from court_sentiment.sentiment.service import SentimentService
from court_sentiment.version import PACKAGE_VERSION, RULE_SCORER_VERSION, SYNC_SCORER_VERSION

logger = structlog.get_logger(__name__)


# ============================================================================
# COMMANDS
# ============================================================================

async def run_analyze(
    text: str, language: str, use_external_model: bool = False, sync: bool = False
) -> dict:
    """
    Score one review.

    Returns:
        Result dict with the scorer version that produced it
    """
    if sync:
        result = analyze_sentiment_sync(text)
        scorer_version = SYNC_SCORER_VERSION
    else:
        client = create_external_client() if use_external_model else None
        service = SentimentService(external_client=client)
        result = await service.analyze(text, use_external_model=use_external_model, language=language)
        scorer_version = (
            f"external:{settings.llm_model}" if service.external.enabled else RULE_SCORER_VERSION
        )

    output = result.model_dump(mode="json")
    output["scorer_version"] = scorer_version
    return output


async def run_migrate() -> dict:
    await create_all_tables()
    return {"status": "ok", "tables": ["sentiment_categories", "sentiment_keywords"]}


async def run_seed(clear: bool = False, dry_run: bool = False) -> dict:
    """
    Seed the default dataset.

    Args:
        clear: Delete every keyword first (full reseed)
        dry_run: Only report what would be seeded
    """
    summary = default_dataset_summary()
    if dry_run:
        return {"dry_run": True, **summary}

    admin = KeywordAdmin(KeywordAccessor())
    if clear:
        report = await admin.reseed_all_keywords()
    else:
        report = await admin.seed_default_keywords()

    return {"dry_run": False, "clear": clear, **report.model_dump()}


async def run_export(language: str, type_: str, active: str, output: Optional[Path]) -> dict:
    admin = KeywordAdmin(KeywordAccessor())
    export = await admin.export_keywords(language=language, type_=type_, active=active)

    if output is None:
        return {"filename": export.filename, "rows": export.rows}

    if output.is_dir():
        output = output / export.filename
    output.parent.mkdir(parents=True, exist_ok=True)
    with open(output, "w", encoding="utf-8") as f:
        json.dump(export.rows, f, ensure_ascii=False, indent=2)

    logger.info("keywords_exported", path=str(output), count=len(export.rows))
    return {"path": str(output), "count": len(export.rows)}


async def _run_command(args: argparse.Namespace) -> Any:
    try:
        if args.command == "analyze":
            return await run_analyze(args.text, args.language, args.external, args.sync)
        if args.command == "migrate":
            return await run_migrate()
        if args.command == "seed":
            return await run_seed(clear=args.clear, dry_run=args.dry_run)
        if args.command == "export":
            output = Path(args.output) if args.output else None
            return await run_export(args.language, args.type, args.active, output)
        raise ValueError(f"Unknown command: {args.command}")
    finally:
        await dispose_engine()


# ============================================================================
# MAIN CLI
# ============================================================================

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="court-sentiment",
        description="Court review sentiment analysis and keyword maintenance",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s analyze "Sân rất tốt, sạch sẽ"
  %(prog)s analyze "Dịch vụ rất tệ" --external
  %(prog)s seed --dry-run
  %(prog)s export --type negative --output exports/

Environment:
  KEYWORDS_DB_URL   async SQLAlchemy URL of the keyword store
  LLM_API_KEY       enables --external (LLM_PROVIDER: openai, deepseek, openrouter)
        """,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {PACKAGE_VERSION}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    analyze = subparsers.add_parser("analyze", help="Score a review")
    analyze.add_argument("text", help="Review text")
    analyze.add_argument(
        "--language", "-l", default=settings.default_language, help="Lexicon language tag"
    )
    analyze.add_argument(
        "--external",
        "-e",
        action="store_true",
        help="Use the hosted model when LLM_API_KEY is set (falls back to rules)",
    )
    analyze.add_argument(
        "--sync",
        "-s",
        action="store_true",
        help="Use the hardcoded lexicon only, never reading the keyword store",
    )

    subparsers.add_parser("migrate", help="Create the sentiment tables")

    seed = subparsers.add_parser("seed", help="Seed the default Vietnamese keywords")
    seed.add_argument("--clear", action="store_true", help="Delete existing keywords first")
    seed.add_argument("--dry-run", action="store_true", help="Show what would be seeded")

    export = subparsers.add_parser("export", help="Export keywords as JSON")
    export.add_argument("--language", "-l", default=settings.default_language)
    export.add_argument(
        "--type", "-t", default="all", choices=["all", "positive", "negative", "strong_negative"]
    )
    export.add_argument("--active", "-a", default="all", choices=["all", "true", "false"])
    export.add_argument(
        "--output", "-o", default=None, help="Output file or directory (default: stdout)"
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)
    setup_logging()

    try:
        result = asyncio.run(_run_command(args))
    except Exception as e:
        logger.error("cli_failed", command=args.command, error=str(e), exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(result, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
