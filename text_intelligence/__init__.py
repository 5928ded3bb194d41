"""
text_intelligence

Learns word statistics from a stream of chat messages and answers:
top words, prefix completions, next-word prediction and related words.
"""

from .core.engine import TextEngine
from .report import Analysis, analyze_message

__all__ = ["TextEngine", "Analysis", "analyze_message"]

__version__ = "0.1.0"
