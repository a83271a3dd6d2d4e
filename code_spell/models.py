"""
Code Spell Models
=================
Result records produced by a spell check.
"""

from dataclasses import dataclass, field
from typing import List, Dict, Optional, Any, Tuple

MARKER_SOURCE = 'spell-checker'
MARKER_SEVERITY = 'warning'
MARKER_MESSAGE_SUGGESTIONS = 3


@dataclass(frozen=True)
class SpellError:
    """
    A flagged word in checked text.

    Attributes:
        word: The word as written (original casing)
        line: 1-based line number
        column: 1-based column of the first character
        end_column: column + len(word)
        suggestions: Up to five replacement words, best first, in the
                     casing to insert into code
        start_index: 0-based offset of the word within its line
        end_index: 0-based offset just past the word
    """
    word: str
    line: int
    column: int
    end_column: int
    suggestions: Tuple[str, ...] = ()
    start_index: int = 0
    end_index: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {
            'word': self.word,
            'line': self.line,
            'column': self.column,
            'end_column': self.end_column,
            'start_index': self.start_index,
            'end_index': self.end_index,
            'suggestions': list(self.suggestions),
        }

    @property
    def message(self) -> str:
        message = f'Possible misspelling: "{self.word}"'
        if self.suggestions:
            shown = ', '.join(self.suggestions[:MARKER_MESSAGE_SUGGESTIONS])
            message += f'. Suggestions: {shown}'
        return message

    def to_marker(self) -> Dict[str, Any]:
        """
        Convert to an editor decoration marker (Monaco marker shape).

        Each suggestion is attached as related information so the editor's
        context menu can offer "Replace with ..." actions.
        """
        related = [
            {
                'message': f'Suggestion: {suggestion}',
                'startLineNumber': self.line,
                'startColumn': self.column,
                'endLineNumber': self.line,
                'endColumn': self.end_column,
            }
            for suggestion in self.suggestions
        ]
        return {
            'startLineNumber': self.line,
            'endLineNumber': self.line,
            'startColumn': self.column,
            'endColumn': self.end_column,
            'message': self.message,
            'severity': MARKER_SEVERITY,
            'source': MARKER_SOURCE,
            'code': MARKER_SOURCE,
            'relatedInformation': related or None,
        }


@dataclass
class CheckResult:
    """Result of one check call, tagged with the caller's correlation token."""
    errors: List[SpellError] = field(default_factory=list)
    language: str = ""
    version: Optional[Any] = None
    dictionary_version: int = 0
    processing_time_ms: float = 0.0

    @property
    def error_count(self) -> int:
        return len(self.errors)

    def to_dict(self, include_markers: bool = False) -> Dict[str, Any]:
        """Convert to dictionary format."""
        data = {
            'errors': [e.to_dict() for e in self.errors],
            'error_count': self.error_count,
            'language': self.language,
            'version': self.version,
            'dictionary_version': self.dictionary_version,
            'processing_time_ms': round(self.processing_time_ms, 2),
        }
        if include_markers:
            data['markers'] = [e.to_marker() for e in self.errors]
        return data
