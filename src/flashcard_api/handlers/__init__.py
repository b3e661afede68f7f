"""Handler layer exports."""

from .transcription_orchestrator import TranscriptionOrchestrator, parse_result

__all__ = ["TranscriptionOrchestrator", "parse_result"]
