import math
import re
from typing import Iterable, List, Optional
from yt_captions.models.transcript import TranscriptSegment

# <transcript><text start="1.5" dur="2.0">...</text>, times in seconds
TEXT_PATTERN = re.compile(r'<text[^>]*start="([^"]+)"[^>]*dur="([^"]+)"[^>]*>([\s\S]*?)</text>')
# <timedtext><body><p t="1500" d="2000">...</p>, times in milliseconds
PARAGRAPH_PATTERN = re.compile(r'<p[^>]*\bt="(\d+)"[^>]*\bd="(\d+)"[^>]*>([\s\S]*?)</p>')
TAG_PATTERN = re.compile(r"<[^>]+>")

# &amp; goes first, so "&amp;lt;" ends up as "<"
ENTITIES = [
    ("&amp;", "&"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&#39;", "'"),
]

def decode_html(s: str) -> str:
    """Decode the five entities captions use. Anything else is left as is."""
    for entity, char in ENTITIES:
        s = s.replace(entity, char)
    return s

def _seconds_to_ms(value: str) -> int:
    # half-up, not Python's banker's rounding
    return int(math.floor(float(value) * 1000 + 0.5))

def parse_transcript_texts(xml: str) -> List[TranscriptSegment]:
    segments = []
    for start, dur, body in TEXT_PATTERN.findall(xml):
        text = decode_html(body).strip()
        if not text:
            continue
        try:
            start_ms, duration_ms = _seconds_to_ms(start), _seconds_to_ms(dur)
        except (ValueError, OverflowError):
            continue
        segments.append(TranscriptSegment(text=text, start_in_ms=start_ms, duration=duration_ms))
    return segments

def parse_timedtext(xml: str) -> List[TranscriptSegment]:
    segments = []
    for start, dur, body in PARAGRAPH_PATTERN.findall(xml):
        text = decode_html(TAG_PATTERN.sub("", body)).strip()
        if text:
            segments.append(TranscriptSegment(text=text, start_in_ms=int(start), duration=int(dur)))
    return segments

def parse_segments(xml: str) -> List[TranscriptSegment]:
    """Parse caption XML in either dialect; the first one that yields segments wins."""
    return parse_transcript_texts(xml) or parse_timedtext(xml)

def normalize_segments(segments: Iterable[Optional[TranscriptSegment]]) -> List[TranscriptSegment]:
    """Trim, drop empties, dedupe on (start, text) keeping the first, sort by start.

    Applying it twice gives the same list as applying it once.
    """
    seen = set()
    cleaned = []
    for seg in segments:
        if seg is None or not isinstance(seg.text, str):
            continue
        text = seg.text.strip()
        if not text:
            continue
        key = (seg.start_in_ms, text)
        if key in seen:
            continue
        seen.add(key)
        cleaned.append(TranscriptSegment(text=text, start_in_ms=seg.start_in_ms, duration=seg.duration))
    return sorted(cleaned, key=lambda s: s.start_in_ms)
