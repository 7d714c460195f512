#!/usr/bin/env python3
"""
YouTube Transcript CLI

Fetch, translate and format YouTube transcripts from the command line.
"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from .core.config import config, proxy_config_from_settings, setup_logging
from .core.transcript_api import YouTubeTranscriptApi
from .exceptions import YouTubeTranscriptError
from .formatters import FORMATTERS, get_formatter
from .models import FetchedTranscript, TranscriptConfig, TranscriptList
from .proxies import GenericProxyConfig, ProxyConfig, WebshareProxyConfig
from .utils.logging import get_logger

logger = get_logger("main")

console = Console()
err_console = Console(stderr=True)


def setup_argument_parser() -> argparse.ArgumentParser:
    """Setup command line argument parser."""
    parser = argparse.ArgumentParser(
        prog="youtube-transcript",
        description="Fetch YouTube transcripts",
        epilog="Example: youtube-transcript dQw4w9WgXcQ --languages de,en --format srt"
    )

    parser.add_argument(
        "video_ids",
        nargs="*",
        help="YouTube video IDs or URLs"
    )

    parser.add_argument(
        "--languages", "-l",
        default=",".join(config.transcript.default_languages),
        help="Comma-separated language codes in order of preference (default: %(default)s)"
    )

    parser.add_argument(
        "--format", "-f",
        dest="output_format",
        choices=sorted(FORMATTERS),
        default="text",
        help="Output format (default: text)"
    )

    parser.add_argument(
        "--output", "-o",
        help="Write output to this file instead of stdout"
    )

    parser.add_argument(
        "--translate", "-t",
        help="Translate the transcript to this language code"
    )

    parser.add_argument(
        "--list-transcripts",
        action="store_true",
        help="List the available transcripts for the first video and exit"
    )

    filters = parser.add_mutually_exclusive_group()
    filters.add_argument(
        "--exclude-generated",
        action="store_true",
        help="Only use manually created transcripts"
    )
    filters.add_argument(
        "--exclude-manually-created",
        action="store_true",
        help="Only use automatically generated transcripts"
    )

    parser.add_argument(
        "--preserve-formatting",
        action="store_true",
        default=config.transcript.preserve_formatting,
        help="Keep HTML formatting tags in the transcript text"
    )

    parser.add_argument(
        "--cookies",
        default=config.youtube.cookies_path,
        help="Path to a Netscape-format cookies.txt file"
    )

    parser.add_argument("--http-proxy", help="HTTP proxy URL")
    parser.add_argument("--https-proxy", help="HTTPS proxy URL")
    parser.add_argument("--webshare-proxy-username", help="Webshare proxy username")
    parser.add_argument("--webshare-proxy-password", help="Webshare proxy password")

    parser.add_argument(
        "--version",
        action="version",
        version=f"youtube-transcript v{config.app.version}"
    )

    return parser


def build_proxy_config(args: argparse.Namespace) -> Optional[ProxyConfig]:
    """Build the proxy configuration from CLI flags, falling back to the environment."""
    if args.webshare_proxy_username or args.webshare_proxy_password:
        if not (args.webshare_proxy_username and args.webshare_proxy_password):
            raise ValueError("Both --webshare-proxy-username and --webshare-proxy-password are required")
        return WebshareProxyConfig(args.webshare_proxy_username, args.webshare_proxy_password)
    if args.http_proxy or args.https_proxy:
        return GenericProxyConfig(args.http_proxy, args.https_proxy)
    return proxy_config_from_settings()


def parse_languages(value: str) -> List[str]:
    return [code.strip() for code in (value or "").split(",") if code.strip()]


def print_transcript_list(transcript_list: TranscriptList) -> None:
    """Print the available transcripts of a video."""
    console.print(f"[bold]Available transcripts for video {transcript_list.video_id}:[/bold]")
    console.rule()

    for transcript in transcript_list:
        console.print(f"Language: {escape(transcript.language)} ({transcript.language_code})")
        console.print(f"Auto-generated: {'Yes' if transcript.is_generated else 'No'}")
        console.print(f"Translatable: {'Yes' if transcript.is_translatable else 'No'}")

        if transcript.translation_languages:
            console.print("Available translations:")
            for lang in transcript.translation_languages:
                console.print(f"  - {escape(lang.language_name)} ({lang.language_code})")

        console.rule()


async def fetch_one(
    api: YouTubeTranscriptApi,
    video_id: str,
    args: argparse.Namespace,
    languages: List[str]
) -> FetchedTranscript:
    """List, select, optionally translate and fetch one video's transcript."""
    transcript_list = await api.list(video_id)

    if args.exclude_generated:
        transcript = transcript_list.find_manually_created_transcript(languages)
    elif args.exclude_manually_created:
        transcript = transcript_list.find_generated_transcript(languages)
    else:
        transcript = transcript_list.find_transcript(languages)

    if args.translate:
        transcript = transcript.translate(args.translate)

    return await transcript.fetch(preserve_formatting=args.preserve_formatting)


async def run(args: argparse.Namespace) -> int:
    """Run the CLI with parsed arguments and return the exit code."""
    if not args.video_ids:
        err_console.print("[red]Error: Please provide at least one video ID[/red]")
        return 1

    try:
        proxy_config = build_proxy_config(args)
    except ValueError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        return 1

    languages = parse_languages(args.languages)
    transcript_config = TranscriptConfig(languages=languages, preserve_formatting=args.preserve_formatting)
    languages = transcript_config.resolve_languages(config.transcript.default_languages)

    async with YouTubeTranscriptApi(cookie_path=args.cookies, proxy_config=proxy_config) as api:
        if args.list_transcripts:
            try:
                print_transcript_list(await api.list(args.video_ids[0]))
            except YouTubeTranscriptError as e:
                logger.error(f"Error listing transcripts for video {args.video_ids[0]}: {e.detail}")
                return 1
            return 0

        results = []
        for video_id in args.video_ids:
            try:
                results.append(await fetch_one(api, video_id, args, languages))
            except YouTubeTranscriptError as e:
                logger.error(f"Error fetching transcript for video {video_id}: {e.detail}")
            except Exception as e:
                logger.error(f"Unexpected error fetching transcript for video {video_id}: {str(e)}")

    if not results:
        err_console.print("[red]No transcripts were successfully fetched[/red]")
        return 1

    formatter = get_formatter(args.output_format)
    if len(results) == 1:
        output = formatter.format_transcript(results[0], indent=2)
    else:
        output = formatter.format_transcripts(results, indent=2)

    if args.output:
        Path(args.output).write_text(output, encoding="utf-8")
        err_console.print(f"[green]Transcripts written to {escape(args.output)}[/green]")
    else:
        sys.stdout.write(output + "\n")

    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = setup_argument_parser()
    args = parser.parse_args(argv)

    setup_logging()

    try:
        return asyncio.run(run(args))
    except KeyboardInterrupt:
        err_console.print("\nInterrupted")
        return 130
    except Exception as e:
        logger.error(f"Fatal error in main: {e}", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
