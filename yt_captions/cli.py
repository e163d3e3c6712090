import argparse
import sys
from rich.console import Console
from rich.table import Table
from yt_captions.config import settings
from yt_captions.services.transcript import TranscriptService

console = Console()

def format_time(ms: int) -> str:
    m, s = divmod(ms // 1000, 60)
    h, m = divmod(m, 60)
    if h > 0:
        return f"{h:02d}:{m:02d}:{s:02d}"
    return f"{m:02d}:{s:02d}"

def render_segments(result):
    table = Table(title=f"Transcript {result.video_id} ({result.language})", show_header=True, header_style="bold magenta")
    table.add_column("Start", style="cyan", width=10)
    table.add_column("Text", style="white")
    for seg in result.segments:
        table.add_row(format_time(seg.start_in_ms), seg.text)
    console.print(table)

def main():
    parser = argparse.ArgumentParser(description="Fetch the transcript of a YouTube video")
    parser.add_argument("url", nargs="?", help="Video URL (watch, youtu.be, embed, v or live)")
    parser.add_argument("--url", dest="url", help="Video URL (watch, youtu.be, embed, v or live)")
    parser.add_argument("--lang", help="Preferred caption languages, comma separated", default=settings.TRANSCRIPT_LANGS)
    parser.add_argument("--json", action="store_true", help="Print the full result as JSON")
    parser.add_argument("--timestamps", action="store_true", help="Print a table of timed segments")

    args = parser.parse_args()

    if not getattr(args, "url", None):
        parser.print_help()
        console.print("[red]Missing URL.[/red] Provide positional URL or --url.")
        sys.exit(2)

    url = args.url.strip().strip('`').strip('"').strip("'").strip()
    languages = [lang.strip() for lang in (args.lang or "").split(",") if lang.strip()]

    with console.status("Fetching transcript..."):
        result = TranscriptService().lookup(url, languages)

    if args.json:
        console.print_json(result.model_dump_json(by_alias=True))
    elif result.ok and args.timestamps:
        render_segments(result)
    elif result.ok:
        console.print(result.text(), highlight=False)

    if not result.ok:
        if not args.json:
            console.print(f"[bold red]Error:[/bold red] [{result.error.category.value}] {result.error.message}")
        sys.exit(1)

if __name__ == "__main__":
    main()
