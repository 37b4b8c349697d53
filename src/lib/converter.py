"""
Batch conversion of content files between macro representations

Directions:
    editor      persisted tags -> editor placeholder blocks
    persisted   editor placeholder blocks -> persisted tags
    scan        content -> YAML dump of the text/macro event stream
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..config import appsettings
from ..models.tokens import MacroOccurrence, ScanEvent
from .codecs import PERSISTED_FORMAT, EditorFormatCodec, PersistedFormatCodec
from .log import LOG
from .tokenizer import Tokenizer


DIRECTIONS = ("editor", "persisted", "scan")


def events_toRecords(events: List[ScanEvent]) -> List[Dict[str, Any]]:
    """
    Plain data form of a scan, ready for YAML

    Example:
        [TextSegment("Hi "), MacroOccurrence("x", {"macroalias": "x"})]
        -> [{"text": "Hi "}, {"macro": "x", "attributes": {"macroalias": "x"}}]
    """
    records: List[Dict[str, Any]] = []
    for event in events:
        if isinstance(event, MacroOccurrence):
            records.append({"macro": event.alias, "attributes": dict(event.attributes)})
        else:
            records.append({"text": event.text})
    return records


class Converter:
    """
    Converts a set of content files and writes results under output_dir

    Responsibilities:
    - Read each input file
    - Apply the codec or tokenizer for the chosen direction
    - Mirror the input tree under output_dir
    - Count files and macro occurrences
    """

    def __init__(
        self,
        files: List[Path],
        input_dir: str,
        output_dir: str,
        direction: str = "editor",
        html_attributes: Optional[Dict[str, str]] = None,
        verbosity: int = 1,
    ) -> None:
        """
        Initialize converter

        Args:
            files: Input files (inside input_dir)
            input_dir: Root the output tree is mirrored from
            output_dir: Directory for converted output
            direction: One of DIRECTIONS
            html_attributes: Extra placeholder block attributes ("editor" only)
            verbosity: Output verbosity level (0-3)

        Raises:
            ValueError: If direction is unknown
        """
        if direction not in DIRECTIONS:
            raise ValueError(
                f"Unknown direction '{direction}'. Expected one of: {', '.join(DIRECTIONS)}"
            )

        self.files = files
        self.input_dir = Path(input_dir)
        self.output_dir = Path(output_dir)
        self.direction = direction
        self.html_attributes = html_attributes or {}
        self.verbosity = verbosity

        self.persisted_codec = PersistedFormatCodec()
        self.editor_codec = EditorFormatCodec()
        self.tokenizer = Tokenizer()

        self.macro_count = 0
        self.outputs: Dict[Path, str] = {}

    def convert(self) -> Dict[str, Any]:
        """
        Convert every input file

        Returns:
            dict with conversion results and statistics

        Raises:
            MacroTagError: If a file holds a malformed macro tag (scan only)
        """
        LOG(f"Converting {len(self.files)} files ({self.direction})...", level=2)
        self.output_dir.mkdir(parents=True, exist_ok=True)

        output_files: List[str] = []
        for source_file in self.files:
            output_file = self.outputPath_make(source_file)
            LOG(f"{source_file} -> {output_file}", level=2)

            content = source_file.read_text(encoding='utf-8')
            converted = self.content_convert(content)

            output_file.parent.mkdir(parents=True, exist_ok=True)
            output_file.write_text(converted, encoding='utf-8')
            self.outputs[output_file] = converted
            output_files.append(str(output_file))

        return {
            'status': True,
            'output_files': output_files,
            'file_count': len(output_files),
            'macro_count': self.macro_count,
        }

    def content_convert(self, content: str) -> str:
        """Convert one file's content according to self.direction"""
        if self.direction == "editor":
            self.macro_count += len(self.persistedAliases_find(content))
            return self.persisted_codec.editorMarkup_make(content, self.html_attributes)

        if self.direction == "persisted":
            converted = self.editor_codec.persisted_make(content)
            self.macro_count += len(self.persistedAliases_find(converted))
            return converted

        events = list(self.tokenizer.scan(content))
        self.macro_count += sum(isinstance(e, MacroOccurrence) for e in events)
        return yaml.safe_dump(
            events_toRecords(events), sort_keys=False, allow_unicode=True
        )

    def persistedAliases_find(self, content: str) -> List[str]:
        """Aliases of the persisted macro tags in content"""
        return [match.group(1) for match in PERSISTED_FORMAT.finditer(content)]

    def outputPath_make(self, source_file: Path) -> Path:
        """
        Output location for source_file, mirroring its place under input_dir

        Scan dumps get the configured events suffix appended to the name.
        """
        try:
            relative = source_file.relative_to(self.input_dir)
        except ValueError:
            relative = Path(source_file.name)

        if self.direction == "scan":
            relative = relative.with_name(relative.name + appsettings.events_suffix)
        return self.output_dir / relative
