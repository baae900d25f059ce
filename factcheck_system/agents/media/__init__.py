"""Media authenticity submodule.

- MediaAnalyzer: vision-model inspection of uploaded images
"""

from factcheck_system.agents.media.media_analyzer import MediaAnalyzer

__all__ = ["MediaAnalyzer"]
