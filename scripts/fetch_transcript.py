from yt_captions.providers.youtube import YouTubeProvider
from yt_captions.utils.logger import logger

if __name__ == "__main__":
    url = "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
    result = YouTubeProvider().get_transcript(url, ["pt", "en"])
    if not result.ok:
        logger.error(f"Transcript fetch failed: [{result.error.category.value}] {result.error.message}")
        raise SystemExit(1)
    print("language:", result.language)
    print("segments:", len(result.segments))
    for s in result.segments[:5]:
        print(f"[{s.start_in_ms / 1000:.2f} +{s.duration / 1000:.2f}] {s.text}")
