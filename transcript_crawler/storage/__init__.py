"""Storage package: key derivation and transcript sinks."""

from transcript_crawler.storage.keys import derive_key
from transcript_crawler.storage.sinks import LocalSink, S3Sink, TranscriptSink, build_sink

__all__ = ["derive_key", "LocalSink", "S3Sink", "TranscriptSink", "build_sink"]
